# enfrendados

Enfrendados is a dice game for two players, played in the terminal. It
mixes chance with a little arithmetic. On each turn you try to pick dice
from your stock whose faces add up to a target number. All on-screen text
is in Spanish.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Playing

Start the game with:

```
enfrendados
```

To make the dice repeatable, pass a seed:

```
enfrendados --seed 42
```

The main menu offers:

- **1) JUGAR**: play a match
- **2) ESTADÍSTICAS**: show the best score so far and who made it
- **3) CRÉDITOS**: show the team credits
- **0) SALIR**: quit, after a confirmation (`s` or `n`)

Any other choice prints an error and returns to the menu. Pressing
Ctrl-C or closing the input at any point resets the colours and leaves
the game.

The screen is drawn with ANSI escape sequences: colours, clearing the
screen and moving the cursor. On a terminal, keys are read one at a time
without waiting for Return. Input can also come from a pipe.

## Rules

- Each player starts with 6 six-sided dice in stock.
- Before the match, each player rolls one six-sided die. Equal rolls are
  rolled again. The player with the higher roll goes first in every
  round.
- At the start of each turn, two twelve-sided dice are rolled. Their sum
  is the **target number**.
- The player rolls every die in their stock, then picks dice one at a
  time by their number in the list. Picking a die that was already
  chosen, or a number outside the list, shows an error and asks again.
  - If the chosen dice add up exactly to the target, the turn succeeds.
    The player scores *target × number of dice used*, and those dice
    pass to the opponent.
  - If the sum goes over the target, or the player enters `0` to stop,
    no points are scored. In that case the opponent hands one die to the
    player, but only if the opponent has more than one die.
- A player whose successful turn empties their stock gets 10,000 points,
  and the match ends at once.
- Otherwise the match lasts three rounds. The player with more points
  wins, and equal points are a tie.

The best score stays on the statistics screen until the program exits.
A tie can also become the best score; it is then shown under both names.

## Using the game logic

The rules live in `enfrendados.game` and do not depend on the screen:

```python
import random
from enfrendados.game import (
    Hand, Player, Scoreboard, TurnOutcome, decide_result, settle_turn,
)

rng = random.Random(1)
ana, beto = Player("Ana"), Player("Beto")

hand = Hand.roll(ana.stock, rng)   # two 12-sided target dice, six 6-sided dice
hand.select(0)                      # pick a die by 0-based index
if hand.outcome() is TurnOutcome.PENDING:
    outcome = TurnOutcome.GAVE_UP
else:
    outcome = hand.outcome()
settle_turn(ana, beto, hand, outcome)   # updates stocks and points

result = decide_result(ana, beto)
board = Scoreboard()
board.record(result)
print(board.champion, board.best)
```

Here is what each part does:

- `Hand.select` raises `InvalidSelection` for a die that is already
  chosen, for an index out of range, and for any pick after the turn is
  decided.
- `first_player_order` rolls until the two results differ.
- `match_over` tells whether the match has ended.
- `enfrendados.dice` provides `roll_six`, `roll_twelve` and `die_face`.
  `die_face` returns the text picture of a die.
- `enfrendados.terminal.Terminal` handles colours, the cursor, pauses
  and key reads. It takes an output stream, a key reader and a sleep
  function, so a session can be driven without a real console.

## What it does not do

- Scores are not saved. The statistics screen only remembers the best
  score of the current run.
- There is no computer opponent. Both players share the same keyboard.

## Development

Run the tests with:

```
pip install -e ".[test]"
pytest
```