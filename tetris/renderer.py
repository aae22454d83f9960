"""Pygame front end: draws the game state and turns key presses into events."""

from __future__ import annotations

import argparse
import random
from collections.abc import Collection, Iterable

import pygame

from tetris.game import Game
from tetris.tetromino import base_shape
from tetris.types import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    GameEngine,
    GameEvent,
    GameState,
    Grid,
    Orientation,
    TetrominoType,
)

Color = tuple[int, int, int, int]

TICK_RATE = 1.0 / 60.0
KEY_DELAY = 0.15
KEY_INTERVAL = 0.05
REPEATING_EVENTS = frozenset(
    {GameEvent.MOVE_LEFT, GameEvent.MOVE_RIGHT, GameEvent.MOVE_DOWN}
)

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
GRAY: Color = (130, 130, 130, 255)
RED: Color = (230, 41, 55, 255)
PANEL: Color = (20, 20, 20, 255)
GRID_LINE: Color = (50, 50, 50, 255)
OVERLAY: Color = (0, 0, 0, 180)

_PIECE_COLORS: dict[TetrominoType, Color] = {
    TetrominoType.I: (0, 255, 255, 255),
    TetrominoType.O: (255, 255, 0, 255),
    TetrominoType.T: (128, 0, 128, 255),
    TetrominoType.S: (0, 255, 0, 255),
    TetrominoType.Z: (255, 0, 0, 255),
    TetrominoType.J: (0, 0, 255, 255),
    TetrominoType.L: (255, 165, 0, 255),
}
_DEFAULT_COLOR: Color = (128, 128, 128, 255)

_DEFAULT_KEYS: tuple[tuple[int, GameEvent], ...] = (
    (pygame.K_LEFT, GameEvent.MOVE_LEFT),
    (pygame.K_h, GameEvent.MOVE_LEFT),
    (pygame.K_RIGHT, GameEvent.MOVE_RIGHT),
    (pygame.K_l, GameEvent.MOVE_RIGHT),
    (pygame.K_DOWN, GameEvent.MOVE_DOWN),
    (pygame.K_j, GameEvent.MOVE_DOWN),
    (pygame.K_UP, GameEvent.HARD_DROP),
    (pygame.K_k, GameEvent.HARD_DROP),
    (pygame.K_z, GameEvent.ROTATE_CCW),
    (pygame.K_x, GameEvent.ROTATE_CW),
    (pygame.K_SPACE, GameEvent.HOLD),
    (pygame.K_r, GameEvent.RESTART),
)

_CONTROLS_HELP = (
    "Arrows: Move",
    "X/Z: Rotate",
    "Arrow Up: Hard Drop",
    "Space: Hold",
    "R: Restart",
)


def color_for_type(piece_type: TetrominoType) -> Color:
    """Return the RGBA colour used to draw a piece type."""
    return _PIECE_COLORS.get(piece_type, _DEFAULT_COLOR)


def _half(value: int) -> int:
    # Halve with truncation toward zero.
    return int(value / 2)


def centered_offset(
    piece_type: TetrominoType, box_x: int, box_y: int, box_size: int, cell_size: int
) -> tuple[int, int] | None:
    """Return where to draw a piece's 4x4 grid so its blocks sit centred in a box.

    Returns None for a type with no blocks.
    """
    if piece_type == TetrominoType.NONE:
        return None
    shape = base_shape(piece_type, Orientation.NORTH)
    filled = [(r, c) for r, line in enumerate(shape) for c, v in enumerate(line) if v]
    if not filled:
        return None
    rows = [r for r, _ in filled]
    cols = [c for _, c in filled]
    width = (max(cols) - min(cols) + 1) * cell_size
    height = (max(rows) - min(rows) + 1) * cell_size
    x = box_x + _half(box_size - width) - min(cols) * cell_size
    y = box_y + _half(box_size - height) - min(rows) * cell_size
    return x, y


class Renderer:
    """Draws a game engine's state with pygame and feeds it player input."""

    def __init__(
        self,
        game: GameEngine,
        width: int = 800,
        height: int = 670,
        cell_size: int = 30,
    ) -> None:
        self._game = game
        self._width = width
        self._height = height
        self._cell = cell_size
        self._board_x = 250
        self._board_y = 50
        self._hold_x = 50
        self._hold_y = 50
        self._next_x = self._board_x + BOARD_WIDTH * cell_size + 50
        self._next_y = 50
        self._tick_accumulator = 0.0
        self._move_timer = 0.0
        self._key_mapping: dict[int, GameEvent] = {}
        self._surface: pygame.Surface | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        for key, event in _DEFAULT_KEYS:
            self.map_key(key, event)

    def map_key(self, key: int, event: GameEvent) -> None:
        """Bind a pygame key code to a game event, replacing any earlier binding."""
        self._key_mapping[key] = event

    def clear_key_mapping(self) -> None:
        """Remove every key binding."""
        self._key_mapping.clear()

    def process_input(self, pressed: Collection[int], held: Collection[int]) -> None:
        """Dispatch events for keys pressed this frame and auto-repeat held moves.

        ``pressed`` holds keys that went down this frame; ``held`` holds every
        key currently down, including those just pressed.
        """
        for key, event in sorted(self._key_mapping.items()):
            if key in pressed:
                self._game.handle_event(event)
                self._move_timer = 0.0
            if key in held and event in REPEATING_EVENTS:
                self._move_timer += TICK_RATE
                if self._move_timer > KEY_DELAY + KEY_INTERVAL:
                    self._game.handle_event(event)
                    self._move_timer = KEY_DELAY

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self._surface = pygame.display.set_mode((self._width, self._height))
            pygame.display.set_caption("Tetris")
            clock = pygame.time.Clock()
            running = True
            while running:
                frame_time = clock.tick(60) / 1000.0
                pressed: set[int] = set()
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        pressed.add(event.key)
                if not running:
                    break
                keys_down = pygame.key.get_pressed()
                held = {key for key in self._key_mapping if keys_down[key]}
                self.process_input(pressed, held)

                self._tick_accumulator += frame_time
                while self._tick_accumulator >= TICK_RATE:
                    self._game.update(TICK_RATE)
                    self._tick_accumulator -= TICK_RATE

                self.draw(self._game.get_state())
                pygame.display.flip()
        finally:
            self._surface = None
            pygame.quit()

    def draw(self, state: GameState) -> pygame.Surface:
        """Draw a full frame for ``state`` and return the surface drawn on."""
        if self._surface is None:
            self._surface = pygame.Surface((self._width, self._height))
        self._surface.fill(BLACK[:3])
        self._draw_board(state)
        self._draw_piece_cells(state, state.ghost_piece_y, 0.3)
        self._draw_piece_cells(state, state.current_piece_y, 1.0)
        self._draw_hold_box(state)
        self._draw_next_box(state)
        self._draw_stats(state)
        if state.game_over:
            self._draw_game_over()
        return self._surface

    # Drawing helpers

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        assert self._surface is not None
        rendered = self._font(size).render(text, True, color[:3])
        self._surface.blit(rendered, (x, y))

    def _text_width(self, text: str, size: int) -> int:
        return self._font(size).size(text)[0]

    def _fill(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        assert self._surface is not None
        if color[3] >= 255:
            pygame.draw.rect(self._surface, color[:3], pygame.Rect(x, y, w, h))
            return
        layer = pygame.Surface((max(w, 0), max(h, 0)), pygame.SRCALPHA)
        layer.fill(color)
        self._surface.blit(layer, (x, y))

    def _outline(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        assert self._surface is not None
        pygame.draw.rect(self._surface, color[:3], pygame.Rect(x, y, w, h), 1)

    def _block(self, x: int, y: int, piece_type: TetrominoType, alpha: float) -> None:
        r, g, b, _ = color_for_type(piece_type)
        size = self._cell
        self._fill(x + 1, y + 1, size - 2, size - 2, (r, g, b, int(255 * alpha)))
        self._outline(x, y, size, size, WHITE)

    def _cell_origin(self, col: int, row: int) -> tuple[int, int]:
        return self._board_x + col * self._cell, self._board_y + row * self._cell

    def _draw_shape(
        self, shape: Grid, x: int, y: int, piece_type: TetrominoType, alpha: float
    ) -> None:
        for row, line in enumerate(shape):
            for col, filled in enumerate(line):
                if filled:
                    self._block(
                        x + col * self._cell, y + row * self._cell, piece_type, alpha
                    )

    def _draw_board(self, state: GameState) -> None:
        self._fill(
            self._board_x,
            self._board_y,
            BOARD_WIDTH * self._cell,
            BOARD_HEIGHT * self._cell,
            PANEL,
        )
        for row, line in enumerate(state.board):
            for col, value in enumerate(line):
                x, y = self._cell_origin(col, row)
                self._outline(x, y, self._cell, self._cell, GRID_LINE)
                if value:
                    self._block(x, y, TetrominoType(value), 1.0)

    def _draw_piece_cells(self, state: GameState, top: int, alpha: float) -> None:
        x, y = self._cell_origin(state.current_piece_x, top)
        self._draw_shape(state.current_piece_shape, x, y, state.current_piece_type, alpha)

    def _draw_centered(
        self, piece_type: TetrominoType, box_x: int, box_y: int, box_size: int, alpha: float
    ) -> None:
        offset = centered_offset(piece_type, box_x, box_y, box_size, self._cell)
        if offset is None:
            return
        shape = base_shape(piece_type, Orientation.NORTH)
        self._draw_shape(shape, offset[0], offset[1], piece_type, alpha)

    def _draw_hold_box(self, state: GameState) -> None:
        self._text("HOLD", self._hold_x, self._hold_y - 25, 20, WHITE)
        size = 4 * self._cell
        self._fill(self._hold_x, self._hold_y, size, size, PANEL)
        self._outline(self._hold_x, self._hold_y, size, size, WHITE)
        if state.has_held_piece:
            alpha = 1.0 if state.can_hold else 0.4
            self._draw_centered(
                state.held_piece_type, self._hold_x, self._hold_y, size, alpha
            )

    def _draw_next_box(self, state: GameState) -> None:
        self._text("NEXT", self._next_x, self._next_y - 25, 20, WHITE)
        size = 4 * self._cell
        y = self._next_y
        for piece_type in state.next_pieces:
            self._fill(self._next_x, y, size, size, PANEL)
            self._outline(self._next_x, y, size, size, WHITE)
            self._draw_centered(piece_type, self._next_x, y, size, 1.0)
            y += size + 20

    def _draw_stats(self, state: GameState) -> None:
        x = self._next_x
        y = self._next_y + 2 * (4 * self._cell + 20) + 30
        self._text(f"SCORE: {state.score}", x, y, 20, WHITE)
        self._text(f"LEVEL: {state.level}", x, y + 30, 20, WHITE)
        self._text(f"LINES: {state.lines_cleared}", x, y + 60, 20, WHITE)

        controls_y = self._height - 200
        self._text("CONTROLS:", 50, controls_y, 16, GRAY)
        for index, line in enumerate(_CONTROLS_HELP):
            self._text(line, 50, controls_y + 25 + 20 * index, 14, GRAY)

    def _draw_game_over(self) -> None:
        center_x = self._width // 2
        center_y = self._height // 2
        self._fill(0, 0, self._width, self._height, OVERLAY)
        title = "GAME OVER"
        self._text(title, center_x - self._text_width(title, 60) // 2, center_y - 60, 60, RED)
        hint = "Press R to Restart"
        self._text(hint, center_x - self._text_width(hint, 30) // 2, center_y + 20, 30, WHITE)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tetris", description="Play Tetris.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece order")
    return parser.parse_args(None if argv is None else list(argv))


def main(argv: Iterable[str] | None = None) -> int:
    """Start a game in a window."""
    args = _parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    Renderer(Game(rng)).run()
    return 0