"""A falling-block puzzle game with SRS rotation, hold, a ghost piece and a 7-bag randomizer."""

__version__ = "0.1.0"
__all__ = ["types", "tetromino", "rotation", "generator", "game", "renderer"]