from __future__ import annotations


class InvalidColumnError(ValueError):
    """Column index is not an int or lies outside the board."""


class InvalidRowError(ValueError):
    """Row index is not an int or lies outside the board."""


class UnknownSideError(ValueError):
    """Side identifier is neither "X" nor "O"."""


class InvalidBoardError(ValueError):
    """Grid has the wrong shape, an unknown cell value, or a floating piece."""


class InvalidLevelError(ValueError):
    """Difficulty is not one of easy/medium/hard or a positive int depth."""


class GameOverError(RuntimeError):
    """A move was submitted after the game had already ended."""
