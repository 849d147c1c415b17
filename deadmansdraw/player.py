"""A player of Dead Man's Draw: their play area, bank and turn actions."""

from __future__ import annotations

import random
import sys
from collections import defaultdict
from collections.abc import Iterable
from typing import TextIO

from deadmansdraw.cards import Card, CardType
from deadmansdraw.piles import Bank, PlayArea

NAMES: tuple[str, ...] = (
    "Sam",
    "Billy",
    "Jen",
    "Bob",
    "Sally",
    "Joe",
    "Sue",
    "Sasha",
    "Tina",
    "Marge",
)


def random_name(rng: random.Random | None = None) -> str:
    """Pick a player name from the fixed list of names."""
    return (rng or random).choice(NAMES)


def _format_suits(cards: Iterable[Card]) -> list[str]:
    """One line per suit, in suit order, each suit's cards highest value first."""
    by_suit: dict[CardType, list[Card]] = defaultdict(list)
    for card in cards:
        by_suit[card.card_type].append(card)
    return [
        " ".join(str(card) for card in sorted(by_suit[suit], key=lambda c: c.value, reverse=True))
        for suit in sorted(by_suit, key=lambda s: s.value)
    ]


class Player:
    """A player with a play area for the current turn and a bank of secured cards."""

    def __init__(self, name: str | None = None, output: TextIO | None = None) -> None:
        self._name = name if name is not None else random_name()
        self._output = output
        self._bank = Bank()
        self._play_area = PlayArea()

    def _print(self, text: str) -> None:
        print(text, file=self._output if self._output is not None else sys.stdout)

    def play(self, card: Card | None) -> bool:
        """Put a card into play; return True if the player has busted."""
        if card is None:
            self._print("Error: Attempted to play a null card.")
            return True

        self._print(f"{self._name} Draws a {card}")
        self._play_area.add_card(card)

        if self.has_busted():
            self._print(f"BUST! {self._name} loses all cards in the play area.")
            self._play_area.discard_cards()
            return True

        self._print(card.ability())
        card.on_played()
        return False

    def bank_cards(self) -> None:
        """Move every card in play into the bank."""
        self._bank.add_cards(self._play_area.cards)
        self._play_area.clear_cards()

    def has_busted(self) -> bool:
        """True when two cards of the same suit are in play."""
        seen: set[CardType] = set()
        for card in self._play_area.cards:
            if card.card_type in seen:
                return True
            seen.add(card.card_type)
        return False

    def format_play_area(self) -> str:
        return "\n".join(_format_suits(self._play_area.cards))

    def format_bank(self) -> str:
        lines = [f"{self._name}'s Bank:"]
        lines.extend(_format_suits(self._bank.cards))
        lines.append(f"| Score: {self._bank.score()}")
        return "\n".join(lines)

    def print_play_area(self) -> None:
        text = self.format_play_area()
        if text:
            self._print(text)

    def print_bank(self) -> None:
        self._print(self.format_bank())

    @property
    def score(self) -> int:
        return self._bank.score()

    @property
    def name(self) -> str:
        return self._name