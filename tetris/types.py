"""Core enumerations, the game-state snapshot and the engine interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

BOARD_WIDTH = 10
BOARD_HEIGHT = 20
PREVIEW_SIZE = 2


class TetrominoType(enum.IntEnum):
    """Kinds of tetromino; NONE marks an empty cell or no piece."""

    NONE = 0
    I = 1  # noqa: E741
    O = 2  # noqa: E741
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class Orientation(enum.IntEnum):
    """Rotation states, in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class GameEvent(enum.Enum):
    """Player actions that an engine reacts to."""

    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    MOVE_DOWN = enum.auto()
    ROTATE_CW = enum.auto()
    ROTATE_CCW = enum.auto()
    HARD_DROP = enum.auto()
    HOLD = enum.auto()
    RESTART = enum.auto()


Grid = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class GameState:
    """An immutable snapshot of everything a front end needs to draw."""

    board: Grid
    current_piece_shape: Grid
    current_piece_type: TetrominoType
    current_piece_orientation: Orientation
    current_piece_x: int
    current_piece_y: int
    has_held_piece: bool
    can_hold: bool
    held_piece_type: TetrominoType
    next_pieces: tuple[TetrominoType, ...]
    ghost_piece_y: int
    score: int
    level: int
    lines_cleared: int
    game_over: bool


class GameEngine(abc.ABC):
    """Interface between the game rules and whatever drives and shows them."""

    @abc.abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""

    @abc.abstractmethod
    def handle_event(self, event: GameEvent) -> None:
        """React to one player action."""

    @abc.abstractmethod
    def get_state(self) -> GameState:
        """Return a snapshot of the current game."""