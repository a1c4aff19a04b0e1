import random

import pytest

from algobattle.passo import (
    EMPTY,
    HOLE,
    PLAYER_ONE_PIECE,
    PLAYER_TWO_PIECE,
    IllegalMoveError,
    Move,
    Passo,
    State,
)


def _holes():
    return [HOLE] * 25


def test_starting_position():
    game = Passo()
    assert game.tiles[:5] == [PLAYER_TWO_PIECE] * 5
    assert game.tiles[20:] == [PLAYER_ONE_PIECE] * 5
    assert game.tiles[5:20] == [EMPTY] * 15
    assert game.player_turn == 0


def test_initial_legal_moves():
    game = Passo()
    moves = game.legal_moves()
    assert len(moves) == 21
    assert all(move.start >= 20 for move in moves)
    assert moves == sorted(moves, key=lambda m: (m.start, m.end))


def test_initial_result_running():
    assert Passo().game_result() is State.RUNNING


def test_move_leaves_hole_and_switches_turn():
    game = Passo()
    game.make_move(Move(22, 17))
    assert game.tiles[17] == PLAYER_ONE_PIECE
    assert game.tiles[22] == HOLE
    assert game.player_turn == 1
    assert all(move.start < 5 for move in game.legal_moves())


def test_stacking_puts_mover_on_top():
    game = Passo()
    game.make_move(Move(22, 17))
    game.make_move(Move(2, 7))
    game.make_move(Move(23, 17))
    assert game.tiles[17] & 1 == 0
    assert game.tiles[17] > PLAYER_TWO_PIECE


@pytest.mark.parametrize(
    "move",
    [
        Move(2, 7),  # opponent's piece
        Move(22, 12),  # not a neighbour
        Move(12, 17),  # empty start tile
        Move(22, 30),  # off the board
    ],
)
def test_illegal_moves_raise(move):
    game = Passo()
    with pytest.raises(IllegalMoveError):
        game.make_move(move)
    assert game.tiles == Passo().tiles
    assert game.player_turn == 0


def test_cannot_move_onto_hole():
    game = Passo()
    game.make_move(Move(22, 17))
    game.make_move(Move(2, 7))
    with pytest.raises(IllegalMoveError):
        game.make_move(Move(21, 22))


def test_cannot_move_onto_full_stack():
    game = Passo()
    game.tiles[16] = 15  # three pieces
    with pytest.raises(IllegalMoveError):
        game.make_move(Move(21, 16))
    assert Move(21, 16) not in game.legal_moves()


def test_copy_is_independent():
    game = Passo()
    clone = game.copy()
    clone.make_move(Move(20, 15))
    assert game.tiles == Passo().tiles
    assert game.player_turn == 0
    assert clone.player_turn == 1


def test_back_rank_win():
    game = Passo()
    tiles = _holes()
    tiles[0] = PLAYER_ONE_PIECE
    tiles[1] = PLAYER_TWO_PIECE
    game.tiles = tiles
    assert game.game_result() is State.P1_WIN


def test_no_legal_moves_loses():
    game = Passo()
    tiles = _holes()
    tiles[24] = PLAYER_ONE_PIECE
    tiles[0] = PLAYER_TWO_PIECE
    game.tiles = tiles
    assert game.legal_moves() == []
    assert game.game_result() is State.P2_WIN


def test_isolated_tiles_are_removed():
    game = Passo()
    tiles = _holes()
    tiles[10] = PLAYER_TWO_PIECE
    tiles[11] = PLAYER_ONE_PIECE
    tiles[12] = EMPTY
    tiles[15] = EMPTY
    tiles[16] = EMPTY
    tiles[17] = EMPTY
    tiles[24] = EMPTY
    game.tiles = tiles
    game.make_move(Move(11, 10))
    assert game.tiles[24] == HOLE
    assert game.tiles[10] & 1 == 0


def test_random_play_keeps_invariants():
    rng = random.Random(7)
    game = Passo()
    for _ in range(200):
        moves = game.legal_moves()
        for move in moves:
            assert game.tiles[move.start] & 1 == game.player_turn
            assert game.tiles[move.end] != HOLE
        for tile, value in enumerate(game.tiles):
            if value == HOLE:
                continue
            y, x = divmod(tile, 5)
            neighbours = [
                game.tiles[i * 5 + j]
                for i in range(max(y - 1, 0), min(y + 1, 4) + 1)
                for j in range(max(x - 1, 0), min(x + 1, 4) + 1)
                if i * 5 + j != tile
            ]
            assert any(v != HOLE for v in neighbours)
        if game.game_result() is not State.RUNNING:
            break
        turn = game.player_turn
        game.make_move(rng.choice(moves))
        assert game.player_turn == 1 - turn