"""Tetromino shapes and the immutable falling-piece value."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass

from tetris.types import Grid, Orientation, TetrominoType

SPAWN_X = 3
SPAWN_Y = 0


def _grid(*rows: str) -> Grid:
    return tuple(tuple(int(c) for c in row) for row in rows)


_EMPTY = _grid("0000", "0000", "0000", "0000")

# Shapes per type, indexed by orientation (NORTH, EAST, SOUTH, WEST).
_SHAPES: dict[TetrominoType, tuple[Grid, Grid, Grid, Grid]] = {
    TetrominoType.NONE: (_EMPTY, _EMPTY, _EMPTY, _EMPTY),
    TetrominoType.I: (
        _grid("0000", "1111", "0000", "0000"),
        _grid("0010", "0010", "0010", "0010"),
        _grid("0000", "0000", "1111", "0000"),
        _grid("0100", "0100", "0100", "0100"),
    ),
    TetrominoType.O: (
        _grid("0110", "0110", "0000", "0000"),
        _grid("0110", "0110", "0000", "0000"),
        _grid("0110", "0110", "0000", "0000"),
        _grid("0110", "0110", "0000", "0000"),
    ),
    TetrominoType.T: (
        _grid("0100", "1110", "0000", "0000"),
        _grid("0100", "0110", "0100", "0000"),
        _grid("0000", "1110", "0100", "0000"),
        _grid("0100", "1100", "0100", "0000"),
    ),
    TetrominoType.S: (
        _grid("0110", "1100", "0000", "0000"),
        _grid("0100", "0110", "0010", "0000"),
        _grid("0000", "0110", "1100", "0000"),
        _grid("1000", "1100", "0100", "0000"),
    ),
    TetrominoType.Z: (
        _grid("1100", "0110", "0000", "0000"),
        _grid("0010", "0110", "0100", "0000"),
        _grid("0000", "1100", "0110", "0000"),
        _grid("0100", "1100", "1000", "0000"),
    ),
    TetrominoType.J: (
        _grid("1000", "1110", "0000", "0000"),
        _grid("0110", "0100", "0100", "0000"),
        _grid("0000", "1110", "0010", "0000"),
        _grid("0100", "0100", "1100", "0000"),
    ),
    TetrominoType.L: (
        _grid("0010", "1110", "0000", "0000"),
        _grid("0100", "0100", "0110", "0000"),
        _grid("0000", "1110", "1000", "0000"),
        _grid("1100", "0100", "0100", "0000"),
    ),
}


def base_shape(piece_type: TetrominoType, orientation: Orientation) -> Grid:
    """Return the 4x4 occupancy grid of a piece type in an orientation."""
    return _SHAPES[TetrominoType(piece_type)][Orientation(orientation)]


@dataclass(frozen=True)
class Tetromino:
    """A piece of a given type at a board position and orientation."""

    piece_type: TetrominoType = TetrominoType.NONE
    x: int = 0
    y: int = 0
    orientation: Orientation = Orientation.NORTH

    @property
    def shape(self) -> Grid:
        """The 4x4 occupancy grid for the current orientation."""
        return base_shape(self.piece_type, self.orientation)

    def moved(self, dx: int, dy: int) -> Tetromino:
        """Return this piece shifted by ``(dx, dy)``."""
        return dataclasses.replace(self, x=self.x + dx, y=self.y + dy)

    def with_orientation(self, orientation: Orientation) -> Tetromino:
        """Return this piece turned to ``orientation``, position unchanged."""
        return dataclasses.replace(self, orientation=Orientation(orientation))

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the board ``(x, y)`` of each filled cell, row by row."""
        for row, line in enumerate(self.shape):
            for col, filled in enumerate(line):
                if filled:
                    yield self.x + col, self.y + row