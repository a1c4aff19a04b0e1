# algobattle

A small arena for the board game **Passo**. Two players, each either a human
at the mouse or a computer agent, take turns on a 5×5 board. Every agent has
its own clock; an agent that runs out of time loses.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
algobattle
algobattle --time-limit 60
```

This opens a full-screen game window. `--time-limit` sets the seconds on each
agent's clock (default 30); humans play without a clock. Pick a player on the
left (Player One) and on the right (Player Two), either one of the built-in
agents (`Random-Agent`, `Slow-Random`, `DefenceAgent`) or *Human*, then press
**Play/Simulate**. Click one of your stacks to see where it can go, then click
a marked tile to move it. Close the window or press Escape to quit.

Agents think in a background thread while the window keeps running. If an
agent raises an error or answers with an illegal move, the program stops with
an `AgentError`.

## The rules in brief

- Player One starts with five stones on the bottom row and Player Two with
  five on the top row. Player One moves first.
- A move takes the top stone of one of your stacks and puts it on a
  neighbouring tile (any of the eight directions). Stacks may grow to at most
  three stones; holes cannot be entered.
- After every move, any tile whose neighbours are all holes becomes a hole
  itself, together with whatever stands on it.
- At the start of your turn you have won if one of your stacks is on the
  opponent's back rank (the farthest row on their side that is not all
  holes). You lose if you have no legal move left.

## Using the engine

```python
import random

from algobattle.passo import Passo, State
from algobattle.agents import DefenceAgent, RandomAgent

game = Passo()
players = [DefenceAgent(random.Random(1)), RandomAgent(random.Random(2))]

while game.game_result() is State.RUNNING:
    agent = players[game.player_turn]
    game.make_move(agent.calculate_move(game))

print(game.game_result())
```

- `Passo.legal_moves()` lists every move for the side to move, ordered by
  start tile and then end tile. Tiles are numbered 0–24, row by row from the
  top.
- `Passo.player_turn` is 0 when Player One is to move and 1 for Player Two.
- `Passo.make_move(move)` raises `IllegalMoveError` for a move that breaks
  the rules.
- `Passo.copy()` gives an independent copy to try moves on.

## Writing an agent

Subclass `Agent`, give it a name and implement `calculate_move`, which gets
the current game and returns a `Move`:

```python
from algobattle.agents import Agent

class FirstMove(Agent):
    def __init__(self):
        super().__init__("First-Move")

    def calculate_move(self, game):
        return game.legal_moves()[0]
```

To play your own agents, pass them to `algobattle.app.App` together with the
time limit in seconds each agent gets for the whole game, and call `run()`:

```python
from algobattle.app import App

App([FirstMove()], time_limit=10).run()
```

The `algobattle` command always offers the three built-in agents.