"""Game rules: board, falling piece, hold, scoring, levels and gravity."""

from __future__ import annotations

import random

from tetris.generator import PieceGenerator
from tetris.rotation import next_orientation, wall_kicks
from tetris.tetromino import SPAWN_X, SPAWN_Y, Tetromino
from tetris.types import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    GameEngine,
    GameEvent,
    GameState,
    TetrominoType,
)

LINE_POINTS = (0, 40, 100, 300, 1200)
LINES_PER_LEVEL = 10
SOFT_DROP_BONUS = 1
HARD_DROP_BONUS = 2
INITIAL_DROP_INTERVAL = 1.0
MIN_DROP_INTERVAL = 0.1
DROP_INTERVAL_STEP = 0.05


def _empty_board() -> list[list[int]]:
    return [[0] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]


class Game(GameEngine):
    """A single-player game on a 10x20 board with a seven-bag generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Start a fresh game: empty board, zero score, level one."""
        self._board = _empty_board()
        self._score = 0
        self._level = 1
        self._lines_cleared = 0
        self._game_over = False
        self._drop_timer = 0.0
        self._drop_interval = INITIAL_DROP_INTERVAL
        self._can_hold = True
        self._held: TetrominoType | None = None
        self._generator = PieceGenerator(self._rng)
        self._current = self._generator.next_piece()

    def update(self, delta_time: float) -> None:
        """Advance gravity by ``delta_time`` seconds."""
        if self._game_over:
            return
        self._drop_timer += delta_time
        if self._drop_timer < self._drop_interval:
            return
        self._drop_timer = 0.0
        if not self._try_move(0, 1):
            self._settle()

    def handle_event(self, event: GameEvent) -> None:
        """Apply one player action; only RESTART works once the game is over."""
        if self._game_over and event is not GameEvent.RESTART:
            return
        if event is GameEvent.MOVE_LEFT:
            self._try_move(-1, 0)
        elif event is GameEvent.MOVE_RIGHT:
            self._try_move(1, 0)
        elif event is GameEvent.MOVE_DOWN:
            if self._try_move(0, 1):
                self._score += SOFT_DROP_BONUS
        elif event is GameEvent.ROTATE_CW:
            self._try_rotate(clockwise=True)
        elif event is GameEvent.ROTATE_CCW:
            self._try_rotate(clockwise=False)
        elif event is GameEvent.HARD_DROP:
            self._hard_drop()
        elif event is GameEvent.HOLD:
            self._hold()
        elif event is GameEvent.RESTART:
            self.reset()

    def get_state(self) -> GameState:
        """Return a snapshot of the current game."""
        piece = self._current
        return GameState(
            board=tuple(tuple(row) for row in self._board),
            current_piece_shape=piece.shape,
            current_piece_type=piece.piece_type,
            current_piece_orientation=piece.orientation,
            current_piece_x=piece.x,
            current_piece_y=piece.y,
            has_held_piece=self._held is not None,
            can_hold=self._can_hold,
            held_piece_type=self._held if self._held is not None else TetrominoType.NONE,
            next_pieces=self._generator.preview(),
            ghost_piece_y=self._ghost_y(),
            score=self._score,
            level=self._level,
            lines_cleared=self._lines_cleared,
            game_over=self._game_over,
        )

    def _fits(self, piece: Tetromino) -> bool:
        return all(
            0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT and self._board[y][x] == 0
            for x, y in piece.cells()
        )

    def _try_move(self, dx: int, dy: int) -> bool:
        candidate = self._current.moved(dx, dy)
        if self._fits(candidate):
            self._current = candidate
            return True
        return False

    def _try_rotate(self, clockwise: bool) -> bool:
        piece = self._current
        target = next_orientation(piece.orientation, clockwise)
        turned = piece.with_orientation(target)
        for dx, dy in wall_kicks(piece.piece_type, piece.orientation, target):
            candidate = turned.moved(dx, dy)
            if self._fits(candidate):
                self._current = candidate
                return True
        return False

    def _ghost_y(self) -> int:
        ghost = self._current
        while self._fits(ghost.moved(0, 1)):
            ghost = ghost.moved(0, 1)
        return ghost.y

    def _lock_piece(self) -> None:
        value = int(self._current.piece_type)
        for x, y in self._current.cells():
            if 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT:
                self._board[y][x] = value

    def _clear_lines(self) -> int:
        remaining = [row for row in self._board if not all(row)]
        cleared = BOARD_HEIGHT - len(remaining)
        self._board = [[0] * BOARD_WIDTH for _ in range(cleared)] + remaining
        return cleared

    def _update_drop_interval(self) -> None:
        self._drop_interval = max(
            MIN_DROP_INTERVAL,
            INITIAL_DROP_INTERVAL - (self._level - 1) * DROP_INTERVAL_STEP,
        )

    def _settle(self) -> None:
        """Lock the current piece, score cleared lines and bring in the next."""
        self._lock_piece()
        cleared = self._clear_lines()
        if cleared:
            self._score += LINE_POINTS[cleared] * self._level
            self._lines_cleared += cleared
            self._level = self._lines_cleared // LINES_PER_LEVEL + 1
            self._update_drop_interval()
        self._current = self._generator.next_piece()
        self._can_hold = True
        if not self._fits(self._current):
            self._game_over = True

    def _hard_drop(self) -> None:
        ghost_y = self._ghost_y()
        distance = ghost_y - self._current.y
        self._current = self._current.moved(0, distance)
        self._score += distance * HARD_DROP_BONUS
        self._settle()
        self._drop_timer = 0.0

    def _hold(self) -> None:
        if not self._can_hold:
            return
        self._can_hold = False
        current_type = self._current.piece_type
        if self._held is not None:
            self._current = Tetromino(self._held, SPAWN_X, SPAWN_Y)
        else:
            self._current = self._generator.next_piece()
        self._held = current_type