"""The game loop of Dead Man's Draw."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from deadmansdraw.piles import Deck
from deadmansdraw.player import Player, random_name

MAX_TURNS = 20
PLAYER_COUNT = 2


class Game:
    """A two-player game that alternates turns until the deck runs out."""

    def __init__(
        self,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._input = input_func
        self._output = output if output is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()
        self._deck = Deck(self)
        self._turn = 0
        self._round = 1
        self._current_player: Player | None = None
        self._players: list[Player] = []

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._output, flush=True)

    def _ask(self, prompt: str) -> str:
        self._print(prompt, end="")
        read = self._input if self._input is not None else input
        try:
            return read().strip()
        except EOFError:
            return ""

    def start_game(self) -> None:
        """Deal a shuffled deck, seat the players and play until the game ends."""
        self._deck.create_deck()
        self._deck.shuffle(self._rng)

        self._players.extend(
            Player(random_name(self._rng), self._output) for _ in range(PLAYER_COUNT)
        )
        self._current_player = self._players[0]

        self._print("Starting Dead Man's Draw++!")

        while not self._deck.is_empty() and self._turn <= MAX_TURNS:
            self.play_turn()
            self.switch_player()

        self.end_game()

    def switch_player(self) -> None:
        """Pass the turn to the next player, starting a new round after the last."""
        if not self._players:
            self._print("Error: No players available to switch.")
            return

        if self._current_player in self._players:
            index = self._players.index(self._current_player) + 1
            if index < len(self._players):
                self._current_player = self._players[index]
                return
        self._current_player = self._players[0]
        self._round += 1

    def play_turn(self) -> bool:
        """Play one turn for the current player; return True if they busted."""
        if self._current_player is None:
            raise RuntimeError("no current player")
        player = self._current_player

        self._turn += 1
        self._print(f"--- Round {self._round}, Turn {self._turn} ---")

        busted = player.play(self._deck.draw_card())
        while not busted:
            choice = self._ask("Draw again? (y/n): ")
            if choice[:1] not in ("y", "Y"):
                player.bank_cards()
                player.print_bank()
                break
            busted = player.play(self._deck.draw_card())
            player.print_play_area()
        return busted

    def end_game(self) -> None:
        """Show every bank and announce the winner."""
        self._print("--- Game Over ---")
        for player in self._players:
            player.print_bank()
        winner = self.winner()
        if winner is None:
            raise RuntimeError("no players to pick a winner from")
        self._print(f"{winner.name} wins!")

    def winner(self) -> Player | None:
        """The first player with the highest score, or None without players."""
        best: Player | None = None
        for player in self._players:
            if best is None or player.score > best.score:
                best = player
        return best

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def round(self) -> int:
        return self._round

    @property
    def current_player(self) -> Player | None:
        return self._current_player

    @property
    def players(self) -> list[Player]:
        return self._players


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="deadmansdraw", description="Play Dead Man's Draw++ for two players."
    )
    parser.parse_args(argv)
    Game().start_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())