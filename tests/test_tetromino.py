import dataclasses

import pytest

from tetris.tetromino import SPAWN_X, SPAWN_Y, Tetromino, base_shape
from tetris.types import Orientation, TetrominoType

PIECES = [t for t in TetrominoType if t is not TetrominoType.NONE]


def test_i_north_shape_matches_table():
    assert base_shape(TetrominoType.I, Orientation.NORTH) == (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    )


def test_t_north_shape_matches_table():
    assert base_shape(TetrominoType.T, Orientation.NORTH) == (
        (0, 1, 0, 0),
        (1, 1, 1, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    )


def test_none_shape_is_empty():
    for orientation in Orientation:
        assert all(v == 0 for row in base_shape(TetrominoType.NONE, orientation) for v in row)


@pytest.mark.parametrize("piece_type", PIECES)
@pytest.mark.parametrize("orientation", list(Orientation))
def test_every_shape_has_four_cells(piece_type, orientation):
    shape = base_shape(piece_type, orientation)
    assert len(shape) == 4
    assert all(len(row) == 4 for row in shape)
    assert sum(v for row in shape for v in row) == 4


def test_o_piece_is_same_in_all_orientations():
    shapes = {base_shape(TetrominoType.O, o) for o in Orientation}
    assert len(shapes) == 1


@pytest.mark.parametrize("piece_type", [TetrominoType.I, TetrominoType.T, TetrominoType.J])
def test_rotating_pieces_have_distinct_orientations(piece_type):
    shapes = {base_shape(piece_type, o) for o in Orientation}
    assert len(shapes) == 4


def test_default_piece_is_empty_at_origin():
    piece = Tetromino()
    assert piece.piece_type is TetrominoType.NONE
    assert (piece.x, piece.y, piece.orientation) == (0, 0, Orientation.NORTH)
    assert list(piece.cells()) == []


def test_new_piece_faces_north():
    piece = Tetromino(TetrominoType.L, SPAWN_X, SPAWN_Y)
    assert piece.orientation is Orientation.NORTH
    assert piece.shape == base_shape(TetrominoType.L, Orientation.NORTH)


def test_moved_returns_new_piece_and_keeps_original():
    piece = Tetromino(TetrominoType.S, 3, 0)
    moved = piece.moved(-1, 2)
    assert (moved.x, moved.y) == (2, 2)
    assert (piece.x, piece.y) == (3, 0)
    assert moved.shape == piece.shape


def test_moved_shifts_every_cell():
    piece = Tetromino(TetrominoType.J, 3, 0)
    moved = piece.moved(2, 5)
    assert list(moved.cells()) == [(x + 2, y + 5) for x, y in piece.cells()]


def test_with_orientation_updates_shape():
    piece = Tetromino(TetrominoType.Z, 4, 7)
    turned = piece.with_orientation(Orientation.WEST)
    assert turned.orientation is Orientation.WEST
    assert turned.shape == base_shape(TetrominoType.Z, Orientation.WEST)
    assert (turned.x, turned.y) == (4, 7)
    assert piece.orientation is Orientation.NORTH


def test_cells_follow_shape():
    piece = Tetromino(TetrominoType.T, 5, 10, Orientation.EAST)
    expected = [
        (5 + col, 10 + row)
        for row, line in enumerate(base_shape(TetrominoType.T, Orientation.EAST))
        for col, v in enumerate(line)
        if v
    ]
    assert list(piece.cells()) == expected
    assert len(expected) == 4


def test_piece_is_immutable():
    piece = Tetromino(TetrominoType.I, 3, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        piece.x = 4
    assert (piece.x, piece.y) == (3, 0)