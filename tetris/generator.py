"""Seven-bag random piece generator with a two-piece preview."""

from __future__ import annotations

import random
from collections import deque

from tetris.tetromino import SPAWN_X, SPAWN_Y, Tetromino
from tetris.types import PREVIEW_SIZE, TetrominoType

BAG_PIECES = (
    TetrominoType.I,
    TetrominoType.O,
    TetrominoType.T,
    TetrominoType.S,
    TetrominoType.Z,
    TetrominoType.J,
    TetrominoType.L,
)


class PieceGenerator:
    """Deals pieces from shuffled bags holding one of each type."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._bag: deque[TetrominoType] = deque()
        self._preview: deque[TetrominoType] = deque(
            self._draw() for _ in range(PREVIEW_SIZE)
        )

    def _refill(self) -> None:
        pieces = list(BAG_PIECES)
        self._rng.shuffle(pieces)
        self._bag.extend(pieces)

    def _draw(self) -> TetrominoType:
        if not self._bag:
            self._refill()
        return self._bag.popleft()

    def next_piece(self) -> Tetromino:
        """Return the first previewed piece at the spawn point and advance."""
        piece_type = self._preview.popleft()
        self._preview.append(self._draw())
        return Tetromino(piece_type, SPAWN_X, SPAWN_Y)

    def preview(self) -> tuple[TetrominoType, ...]:
        """Return the upcoming piece types, soonest first."""
        return tuple(self._preview)