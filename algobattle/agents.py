"""Computer players for Passo."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod

from .passo import Move, Passo, State


class Agent(ABC):
    """A player that picks a move for a given game position."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def calculate_move(self, game: Passo) -> Move:
        """Return the move to play in the given position."""


def _require_moves(game: Passo) -> list[Move]:
    moves = game.legal_moves()
    if not moves:
        raise ValueError("the player to move has no legal moves")
    return moves


class RandomAgent(Agent):
    """Plays a uniformly random legal move."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("Random-Agent")
        self.rng = rng or random.Random()

    def calculate_move(self, game: Passo) -> Move:
        return self.rng.choice(_require_moves(game))


class SlowRandom(Agent):
    """Plays a random legal move after waiting a while."""

    def __init__(self, rng: random.Random | None = None, delay: float = 1.0) -> None:
        super().__init__("Slow-Random")
        self.rng = rng or random.Random()
        self.delay = delay

    def calculate_move(self, game: Passo) -> Move:
        moves = _require_moves(game)
        time.sleep(self.delay)
        return self.rng.choice(moves)


class DefenceAgent(Agent):
    """Takes a winning move if there is one, otherwise avoids moves that end the game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("DefenceAgent")
        self.rng = rng or random.Random()

    def calculate_move(self, game: Passo) -> Move:
        win = State.P2_WIN if game.player_turn else State.P1_WIN
        good_moves: list[Move] = []
        bad_move: Move | None = None
        for move in _require_moves(game):
            trial = game.copy()
            trial.make_move(move)
            result = trial.game_result()
            if result is win:
                return move
            if result is State.RUNNING:
                good_moves.append(move)
            else:
                bad_move = move

        if not good_moves:
            return bad_move
        return self.rng.choice(good_moves)