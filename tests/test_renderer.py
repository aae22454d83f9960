import dataclasses
import random

import pygame
import pytest

from tetris.game import Game
from tetris.renderer import Renderer, centered_offset, color_for_type
from tetris.tetromino import base_shape
from tetris.types import GameEngine, GameEvent, Orientation, TetrominoType

CELL = 30
BOARD_X = 250
BOARD_Y = 50


class _RecordingEngine(GameEngine):
    def __init__(self):
        self.events = []
        self.updates = []
        self._game = Game(random.Random(7))

    def update(self, delta_time):
        self.updates.append(delta_time)

    def handle_event(self, event):
        self.events.append(event)

    def get_state(self):
        return self._game.get_state()


def _cell_center(col, row):
    return BOARD_X + col * CELL + CELL // 2, BOARD_Y + row * CELL + CELL // 2


def test_color_for_type_pins_source_colors():
    assert color_for_type(TetrominoType.I) == (0, 255, 255, 255)
    assert color_for_type(TetrominoType.NONE) == (128, 128, 128, 255)


def test_piece_colors_are_distinct():
    real = [t for t in TetrominoType if t != TetrominoType.NONE]
    assert len({color_for_type(t) for t in real}) == len(real)


def test_centered_offset_none_for_empty_type():
    assert centered_offset(TetrominoType.NONE, 0, 0, 120, CELL) is None


@pytest.mark.parametrize(
    "piece_type", [t for t in TetrominoType if t != TetrominoType.NONE]
)
def test_centered_offset_centres_blocks(piece_type):
    box_x, box_y, box_size = 50, 50, 4 * CELL
    x, y = centered_offset(piece_type, box_x, box_y, box_size, CELL)
    shape = base_shape(piece_type, Orientation.NORTH)
    cells = [(r, c) for r, line in enumerate(shape) for c, v in enumerate(line) if v]
    left = x + min(c for _, c in cells) * CELL
    right = x + (max(c for _, c in cells) + 1) * CELL
    top = y + min(r for r, _ in cells) * CELL
    bottom = y + (max(r for r, _ in cells) + 1) * CELL
    assert abs((left - box_x) - (box_x + box_size - right)) <= 1
    assert abs((top - box_y) - (box_y + box_size - bottom)) <= 1


def test_pressed_key_dispatches_mapped_event():
    engine = _RecordingEngine()
    renderer = Renderer(engine)
    renderer.process_input({pygame.K_x}, {pygame.K_x})
    assert engine.events == [GameEvent.ROTATE_CW]


def test_unmapped_key_does_nothing():
    engine = _RecordingEngine()
    renderer = Renderer(engine)
    renderer.process_input({pygame.K_q}, {pygame.K_q})
    assert engine.events == []


def test_held_move_repeats_after_delay():
    engine = _RecordingEngine()
    renderer = Renderer(engine)
    for _ in range(10):
        renderer.process_input(set(), {pygame.K_LEFT})
    assert engine.events == []
    for _ in range(50):
        renderer.process_input(set(), {pygame.K_LEFT})
    assert len(engine.events) >= 1
    assert set(engine.events) == {GameEvent.MOVE_LEFT}


def test_held_hard_drop_does_not_repeat():
    engine = _RecordingEngine()
    renderer = Renderer(engine)
    for _ in range(60):
        renderer.process_input(set(), {pygame.K_UP})
    assert engine.events == []


def test_map_key_and_clear():
    engine = _RecordingEngine()
    renderer = Renderer(engine)
    renderer.map_key(pygame.K_a, GameEvent.HOLD)
    renderer.map_key(pygame.K_x, GameEvent.ROTATE_CCW)
    renderer.process_input({pygame.K_a, pygame.K_x}, set())
    assert engine.events == [GameEvent.HOLD, GameEvent.ROTATE_CCW]
    renderer.clear_key_mapping()
    renderer.process_input({pygame.K_a, pygame.K_x, pygame.K_LEFT}, set())
    assert engine.events == [GameEvent.HOLD, GameEvent.ROTATE_CCW]


def test_draw_shows_current_piece_and_empty_board():
    game = Game(random.Random(3))
    renderer = Renderer(game)
    state = game.get_state()
    surface = renderer.draw(state)
    assert surface.get_size() == (800, 670)

    row, col = next(
        (r, c)
        for r, line in enumerate(state.current_piece_shape)
        for c, v in enumerate(line)
        if v
    )
    px = _cell_center(state.current_piece_x + col, state.current_piece_y + row)
    expected = color_for_type(state.current_piece_type)[:3]
    assert tuple(surface.get_at(px))[:3] == expected

    assert tuple(surface.get_at(_cell_center(0, 10)))[:3] == (20, 20, 20)


def test_draw_locked_cell_uses_type_color():
    game = Game(random.Random(5))
    renderer = Renderer(game)
    game.handle_event(GameEvent.HARD_DROP)
    state = game.get_state()
    surface = renderer.draw(state)
    locked = [
        (r, c) for r, line in enumerate(state.board) for c, v in enumerate(line) if v
    ]
    assert len(locked) == 4
    r, c = locked[0]
    expected = color_for_type(TetrominoType(state.board[r][c]))[:3]
    assert tuple(surface.get_at(_cell_center(c, r)))[:3] == expected


def test_game_over_overlay_darkens_board():
    game = Game(random.Random(3))
    renderer = Renderer(game)
    state = game.get_state()
    plain = tuple(renderer.draw(state).get_at(_cell_center(0, 10)))[:3]
    over = tuple(
        renderer.draw(dataclasses.replace(state, game_over=True)).get_at(
            _cell_center(0, 10)
        )
    )[:3]
    assert all(o <= p for o, p in zip(over, plain))
    assert sum(over) < sum(plain)