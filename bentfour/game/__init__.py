"""
bentfour.game - Core game mechanics for Bent Four

This package contains the board representation, the error types and, in
bentfour.game.rules, the game controller and the gymnasium environment.
"""

# rules is not imported here, it depends on bentfour.ai which needs the board
from bentfour.game.board import Board
from bentfour.game.errors import (GameError, InvalidConfigurationError,
                                  InvalidPositionError, InvalidSymbolError,
                                  ColumnFullError)

__all__ = ['Board', 'GameError', 'InvalidConfigurationError',
           'InvalidPositionError', 'InvalidSymbolError', 'ColumnFullError']
