"""
errors.py - Exceptions raised by the Bent Four board and controller
"""

from typing import Optional


class GameError(Exception):
    """Base class for every game rule violation."""


class InvalidConfigurationError(GameError):
    """The board dimensions are too small to play on."""


class InvalidPositionError(GameError, ValueError):
    """A row or column lies outside the board."""


class InvalidSymbolError(GameError, ValueError):
    """Something other than a player's marker was inserted."""


class ColumnFullError(GameError):
    """The column has no empty cell left."""

    def __init__(self, column: Optional[int] = None):
        if column is None:
            super().__init__("every column is full")
        else:
            super().__init__(f"column {column} is full")
        self.column = column
