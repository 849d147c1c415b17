# deadmansdraw

Dead Man's Draw++ is a push-your-luck card game for two players, played
in the terminal.

## How it plays

The deck holds 54 cards in nine suits. Cannon, Chest, Key, Sword, Hook,
Oracle, Map and Kraken are valued 2 to 7. Mermaid is valued 4 to 9. The deck
is shuffled and two players are seated, each given a name picked at random
from a fixed list.

On your turn a card is drawn into your play area. After each draw you are
asked `Draw again? (y/n):`.

- Answer `y` or `Y` to draw another card. If two cards of the same suit are
  now in your play area, you bust. Every card in your play area goes to your
  discard pile and your turn ends.
- Any other answer banks every card in your play area. Your bank is then
  shown with your score.

Drawing from an empty deck counts as a bust.

The players take turns. A round ends after both players have had a turn. The
game ends when the deck is empty, or when a turn ends after more than 20
turns have been played. Each player's bank is then shown. The player whose
banked cards add up to the highest value wins. On a tie, the first player
seated wins.

## Installing and running

```
pip install .
deadmansdraw
```

`deadmansdraw --help` shows the command's usage. The command takes no other
options.

## Using it from Python

```python
import io
import random

from deadmansdraw.game import Game

answers = iter(["y", "n"] * 50)
out = io.StringIO()
game = Game(input_func=lambda: next(answers), output=out, rng=random.Random(1))
game.start_game()
winner = game.winner()
print(winner.name, winner.score)
```

`Game` takes three optional arguments:

- `input_func`: a function with no arguments that returns the player's next
  answer. It defaults to `input`. An `EOFError` from it counts as an answer
  of "no".
- `output`: a text stream the game prints to. It defaults to standard output.
- `rng`: a `random.Random` used to shuffle the deck and pick player names.

After a game, `Game.players`, `Game.turn`, `Game.round` and `Game.deck` show
its state. You can also drive it step by step with `play_turn()`,
`switch_player()` and `end_game()`.

The package holds these modules:

- `deadmansdraw.cards`: `CardType`, the base `Card` and one class for each
  suit.
- `deadmansdraw.piles`: `Deck`, `PlayArea`, `DiscardPile` and `Bank`.
- `deadmansdraw.player`: `Player` and `random_name`.
- `deadmansdraw.game`: `Game` and the command's `main`.

## What it does not do

The cards have no special abilities. Playing a card prints a placeholder
ability text and nothing else happens. There is no Anchor card in the deck,
though `CardType` has an `Anchor` member. The game is for exactly two players
at one terminal. It does not save games and does not keep scores between
games.

## Running the tests

```
pip install ".[test]"
pytest
```