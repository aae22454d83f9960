"""Super Rotation System wall kicks and orientation stepping."""

from __future__ import annotations

from tetris.types import Orientation, TetrominoType

Kick = tuple[int, int]

_N, _E, _S, _W = Orientation

_JLSTZ_KICKS: dict[tuple[Orientation, Orientation], tuple[Kick, ...]] = {
    (_N, _E): ((0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)),
    (_E, _N): ((0, 0), (1, 0), (1, 1), (0, -2), (1, -2)),
    (_N, _W): ((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
    (_W, _N): ((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
    (_E, _S): ((0, 0), (1, 0), (1, 1), (0, -2), (1, -2)),
    (_S, _E): ((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
    (_S, _W): ((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
    (_W, _S): ((0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)),
}

_I_KICKS: dict[tuple[Orientation, Orientation], tuple[Kick, ...]] = {
    (_N, _E): ((0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)),
    (_E, _N): ((0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)),
    (_N, _W): ((0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)),
    (_W, _N): ((0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)),
    (_E, _S): ((0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)),
    (_S, _E): ((0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)),
    (_S, _W): ((0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)),
    (_W, _S): ((0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)),
}

_NO_KICK: tuple[Kick, ...] = ((0, 0),)


def wall_kicks(
    piece_type: TetrominoType,
    from_orientation: Orientation,
    to_orientation: Orientation,
) -> list[Kick]:
    """Return the ``(dx, dy)`` offsets to try, in order, for a rotation.

    The O piece and any pair of orientations that are not neighbours get a
    single zero offset.
    """
    if piece_type == TetrominoType.O:
        return list(_NO_KICK)
    table = _I_KICKS if piece_type == TetrominoType.I else _JLSTZ_KICKS
    key = (Orientation(from_orientation), Orientation(to_orientation))
    return list(table.get(key, _NO_KICK))


def next_orientation(current: Orientation, clockwise: bool) -> Orientation:
    """Return the orientation one quarter turn from ``current``."""
    step = 1 if clockwise else -1
    return Orientation((int(current) + step) % len(Orientation))