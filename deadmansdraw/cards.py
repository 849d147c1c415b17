"""Card types used in Dead Man's Draw."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional


class CardType(Enum):
    """The suits a card can belong to, in display order."""

    Cannon = 0
    Chest = 1
    Key = 2
    Sword = 3
    Hook = 4
    Oracle = 5
    Map = 6
    Mermaid = 7
    Kraken = 8
    Anchor = 9


class CardLocation(Enum):
    """Where a card last came to rest after leaving the deck."""

    PLAY_AREA = "play area"
    DISCARD_PILE = "discard pile"
    BANK = "bank"


class Card:
    """A single card with a suit and a point value.

    Concrete suits subclass this and set ``kind``. The ``on_*`` hooks are
    called by the piles as a card moves through the game; each records the
    card's new ``location``.
    """

    kind: ClassVar[CardType]

    def __init__(self, game: Any, value: int) -> None:
        if type(self) is Card:
            raise TypeError("Card is abstract; use one of its suits")
        self.game = game
        self._value = value
        self.location: Optional[CardLocation] = None

    def __str__(self) -> str:
        return f"{self.card_type.name}({self._value})"

    def __repr__(self) -> str:
        return f"<{self}>"

    def on_played(self) -> None:
        """Called when the card is played into a play area without busting."""
        self.location = CardLocation.PLAY_AREA

    def on_discarded(self) -> None:
        """Called when the card is moved to a discard pile."""
        self.location = CardLocation.DISCARD_PILE

    def on_banked(self) -> None:
        """Called when the card is moved into a bank."""
        self.location = CardLocation.BANK

    def ability(self) -> str:
        """Describe the card's ability."""
        return "temp"

    @property
    def value(self) -> int:
        return self._value

    @property
    def card_type(self) -> CardType:
        return self.kind


class Cannon(Card):
    kind = CardType.Cannon


class Chest(Card):
    kind = CardType.Chest


class Key(Card):
    kind = CardType.Key


class Sword(Card):
    kind = CardType.Sword


class Hook(Card):
    kind = CardType.Hook


class Oracle(Card):
    kind = CardType.Oracle


class Map(Card):
    kind = CardType.Map


class Mermaid(Card):
    kind = CardType.Mermaid


class Kraken(Card):
    kind = CardType.Kraken