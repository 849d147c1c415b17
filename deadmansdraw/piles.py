"""Collections of cards: the deck, play area, bank and discard pile."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from deadmansdraw.cards import (
    Cannon,
    Card,
    Chest,
    Hook,
    Key,
    Kraken,
    Map,
    Mermaid,
    Oracle,
    Sword,
)


class Bank:
    """Cards a player has secured; they count towards the score."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def score(self) -> int:
        """Total value of all banked cards."""
        return sum(card.value for card in self._cards)

    def add_cards(self, cards: Iterable[Card]) -> None:
        added = list(cards)
        self._cards.extend(added)
        for card in added:
            card.on_banked()

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)


class DiscardPile:
    """Cards lost to a bust."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def add_cards(self, cards: Iterable[Card]) -> None:
        added = list(cards)
        self._cards.extend(added)
        for card in added:
            card.on_discarded()

    def is_empty(self) -> bool:
        return not self._cards

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)


class PlayArea:
    """Cards drawn during the current turn."""

    def __init__(self) -> None:
        self._cards: list[Card] = []
        self._discard_pile = DiscardPile()

    def __len__(self) -> int:
        return len(self._cards)

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def discard_cards(self) -> None:
        """Move every card in play to the discard pile."""
        self._discard_pile.add_cards(self._cards)
        self._cards.clear()

    def clear_cards(self) -> None:
        """Remove every card from play without discarding it."""
        self._cards.clear()

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def discard_pile(self) -> DiscardPile:
        return self._discard_pile


_STANDARD_SUITS: tuple[tuple[type[Card], range], ...] = (
    (Cannon, range(2, 8)),
    (Chest, range(2, 8)),
    (Key, range(2, 8)),
    (Sword, range(2, 8)),
    (Hook, range(2, 8)),
    (Oracle, range(2, 8)),
    (Map, range(2, 8)),
    (Mermaid, range(4, 10)),
    (Kraken, range(2, 8)),
)


class Deck:
    """The draw pile; cards are drawn from the end."""

    def __init__(self, game: Any) -> None:
        self._game = game
        self._cards: list[Card] = []

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the remaining cards in place."""
        (rng or random).shuffle(self._cards)

    def draw_card(self) -> Card | None:
        """Take the top card, or return None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def create_deck(self) -> None:
        """Add the standard set of cards for this deck's game."""
        self._cards.extend(
            suit(self._game, value)
            for suit, values in _STANDARD_SUITS
            for value in values
        )

    def is_empty(self) -> bool:
        return not self._cards

    def remaining_cards(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)