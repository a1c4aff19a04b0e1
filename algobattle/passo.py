"""The Passo board game: rules, move generation and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SIZE = 5
TILE_COUNT = SIZE * SIZE

# Tile encoding: EMPTY is a tile with no pieces on it, HOLE is a tile that has
# been removed from the board. Any larger value is a stack: a leading marker
# bit followed by one bit per piece, the lowest bit being the top piece and
# its value naming the owner (0 for player one, 1 for player two).
EMPTY = 0
HOLE = 1
FULL_STACK = 8
PLAYER_ONE_PIECE = 2
PLAYER_TWO_PIECE = 3


class IllegalMoveError(ValueError):
    """Raised when a move breaks the rules of the game."""


@dataclass(frozen=True)
class Move:
    """A move of the top piece of one tile onto a neighbouring tile."""

    start: int
    end: int


class State(Enum):
    """The state of a game, as seen by whoever runs it."""

    RUNNING = "running"
    P1_WIN = "p1_win"
    P1_WIN_TIME = "p1_win_time"
    P2_WIN = "p2_win"
    P2_WIN_TIME = "p2_win_time"
    DRAW = "draw"
    DEFAULT = "default"


def _adjacent(a: int, b: int) -> bool:
    return max(abs(a // SIZE - b // SIZE), abs(a % SIZE - b % SIZE)) == 1


def _neighbours(tile: int):
    y, x = divmod(tile, SIZE)
    for i in range(max(y - 1, 0), min(y + 1, SIZE - 1) + 1):
        for j in range(max(x - 1, 0), min(x + 1, SIZE - 1) + 1):
            other = i * SIZE + j
            if other != tile:
                yield other


class Passo:
    """A game of Passo on a five by five board."""

    def __init__(self) -> None:
        self.tiles: list[int] = []
        self._turn = 0
        self.reset()

    def reset(self) -> None:
        """Set up the starting position with player one to move."""
        self._turn = 0
        self.tiles = (
            [PLAYER_TWO_PIECE] * SIZE
            + [EMPTY] * (TILE_COUNT - 2 * SIZE)
            + [PLAYER_ONE_PIECE] * SIZE
        )

    def copy(self) -> Passo:
        """Return an independent copy of this game."""
        clone = Passo()
        clone.tiles = list(self.tiles)
        clone._turn = self._turn
        return clone

    __copy__ = copy

    @property
    def player_turn(self) -> int:
        """The player to move: 0 for player one, 1 for player two."""
        return self._turn

    def _owns(self, value: int) -> bool:
        return value > HOLE and (value & 1) == self._turn

    @staticmethod
    def _can_receive(value: int) -> bool:
        return value != HOLE and value < FULL_STACK

    def make_move(self, move: Move) -> None:
        """Play a move for the player to move; raise IllegalMoveError if it is not legal."""
        if not (0 <= move.start < TILE_COUNT and 0 <= move.end < TILE_COUNT):
            raise IllegalMoveError(f"tile out of range in {move}")
        start, end = self.tiles[move.start], self.tiles[move.end]
        if not self._owns(start):
            raise IllegalMoveError(f"no piece of the player to move on tile {move.start}")
        if not self._can_receive(end):
            raise IllegalMoveError(f"tile {move.end} cannot take another piece")
        if not _adjacent(move.start, move.end):
            raise IllegalMoveError(f"tiles {move.start} and {move.end} are not neighbours")

        if end == EMPTY:
            end = HOLE
        self.tiles[move.end] = (end << 1) | (start & 1)
        self.tiles[move.start] = start >> 1

        self._remove_islands()
        self._turn ^= 1

    def _remove_islands(self) -> None:
        for tile in range(TILE_COUNT):
            if self.tiles[tile] == HOLE:
                continue
            if all(self.tiles[other] == HOLE for other in _neighbours(tile)):
                self.tiles[tile] = HOLE

    def game_result(self) -> State:
        """Decide whether the game is over, judged for the player to move."""
        turn = self._turn
        rows = range(SIZE - 1, -1, -1) if turn else range(SIZE)
        back_rank = next(
            (row for row in rows if sum(self.tiles[row * SIZE:(row + 1) * SIZE]) != SIZE),
            None,
        )
        if back_rank is not None:
            row_tiles = self.tiles[back_rank * SIZE:(back_rank + 1) * SIZE]
            if any(self._owns(value) for value in row_tiles):
                return State.P2_WIN if turn else State.P1_WIN

        if not self.legal_moves():
            return State.P1_WIN if turn else State.P2_WIN

        return State.RUNNING

    def legal_moves(self) -> list[Move]:
        """All legal moves for the player to move, ordered by start then end tile."""
        return [
            Move(start, end)
            for start, value in enumerate(self.tiles)
            if self._owns(value)
            for end, target in enumerate(self.tiles)
            if self._can_receive(target) and _adjacent(start, end)
        ]