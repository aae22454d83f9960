# tetris

A falling-block puzzle game played in a desktop window. The board is 10 columns
by 20 rows and the game follows the familiar modern rules:

- Super Rotation System wall kicks for every piece, with the I piece using its
  own kick table.
- A 7-bag randomizer: every run of seven pieces contains each shape once.
- A two-piece preview of what comes next.
- Hold: put the current piece aside once per piece and swap it back in later.
- A ghost piece showing where the current piece will land.
- Scoring of 40 / 100 / 300 / 1200 points for clearing 1 / 2 / 3 / 4 lines,
  multiplied by the level, plus 1 point per row of soft drop and 2 points per
  row of hard drop.
- A new level every 10 lines. The drop interval starts at one second and gets
  0.05 s shorter with each level, down to 0.1 s.

## Installing

```
pip install .
```

This installs pygame, which is used to draw the window and read the keyboard.

## Playing

```
tetris
```

To get the same order of pieces every time, give a seed:

```
tetris --seed 42
```

| Key              | Action                   |
|------------------|--------------------------|
| Left / H         | Move left                |
| Right / L        | Move right               |
| Down / J         | Soft drop                |
| Up / K           | Hard drop                |
| X                | Rotate clockwise         |
| Z                | Rotate counter-clockwise |
| Space            | Hold                     |
| R                | Restart                  |
| Escape           | Quit                     |

Holding a movement key (left, right or down) repeats it after a short delay.
Once the game is over only R does anything; closing the window ends the
program.

## Using the engine

The game rules live in `tetris.game` and do not depend on pygame, so they can
be driven from code, for example to write a bot or to test a strategy:

```python
import random

from tetris.game import Game
from tetris.types import GameEvent

game = Game(random.Random(42))
game.handle_event(GameEvent.ROTATE_CW)
game.handle_event(GameEvent.HARD_DROP)
game.update(1 / 60)

state = game.get_state()
print(state.score, state.level, state.lines_cleared, state.next_pieces)
```

`Game.update(delta_time)` advances gravity, `Game.handle_event(event)` applies
one `GameEvent`, and `Game.reset()` starts over. `Game.get_state()` returns a
frozen `GameState` snapshot holding the board, the current piece with its
shape, type, orientation and position, the held piece, the preview, the row
the ghost piece lands on, and the score, level, line count and game-over flag.
`Game` implements the abstract `GameEngine` interface in `tetris.types`.

The lower-level pieces are also available:

- `tetris.types`: `TetrominoType`, `Orientation`, `GameEvent`, `GameState`
  and `GameEngine`.
- `tetris.tetromino`: the immutable `Tetromino` (with `moved`,
  `with_orientation`, `cells` and the `shape` property) and `base_shape`.
- `tetris.rotation`: `wall_kicks` and `next_orientation`.
- `tetris.generator`: the 7-bag `PieceGenerator`, with `next_piece` and
  `preview`.

## The window

`tetris.renderer.Renderer` draws any `GameEngine` with pygame. Besides `run()`,
which opens the window and plays until it is closed, it offers `map_key` and
`clear_key_mapping` to change the key bindings, `process_input` to feed it
pressed and held key codes directly, and `draw(state)`, which draws one frame
onto a surface and returns it. `color_for_type` and `centered_offset` are the
helpers it uses for piece colours and for centring pieces in the hold and
preview boxes.

## Running the tests

```
pip install ".[test]"
pytest
```