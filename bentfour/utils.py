"""
utils.py - Constants, enumerations and helpers for Bent Four

This module holds the values shared by the board, the controller, the AI
players and the interfaces: board defaults, the symbols, the winning shape
templates and the text helpers used to draw the field.
"""

from enum import Enum, auto
from typing import List, Tuple

# Board constants
DEFAULT_ROWS = 9
DEFAULT_COLUMNS = 10
MIN_SIZE = 3

# Winning formations as (row, column) offsets from the shape's top-left
# bounding-box corner. Row 0 is the top of the board.
#
#   X X     X X       X         X
# X X         X X     X X     X X
#                       X     X
WIN_SHAPES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 1), (0, 2), (1, 0), (1, 1)),
    ((0, 0), (0, 1), (1, 1), (1, 2)),
    ((0, 0), (1, 0), (1, 1), (2, 1)),
    ((0, 1), (1, 0), (1, 1), (2, 0)),
)

CLEAR_SCREEN = "\x1b[2J"


class Symbol(Enum):
    """Enumeration representing the players' markers and empty cells."""
    EMPTY = 0
    A = 1    # Moves first
    B = 2

    def other(self) -> 'Symbol':
        """Get the opposing marker."""
        if self == Symbol.A:
            return Symbol.B
        elif self == Symbol.B:
            return Symbol.A
        return Symbol.EMPTY

    def is_player(self) -> bool:
        return self != Symbol.EMPTY

    def __str__(self):
        if self == Symbol.A:
            return "X"
        elif self == Symbol.B:
            return "O"
        return "-"


PLAYER_SYMBOLS = (Symbol.A, Symbol.B)


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    A_WIN = auto()
    B_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @staticmethod
    def win_for(symbol: Symbol) -> 'GameResult':
        return GameResult.A_WIN if symbol == Symbol.A else GameResult.B_WIN


class PolicyType(Enum):
    """Who chooses the moves for a symbol."""
    HUMAN = "human"
    RANDOM = "random"
    GREEDY = "greedy"
    HEURISTIC = "heuristic"

    def is_ai(self) -> bool:
        return self != PolicyType.HUMAN


def shape_size(shape: Tuple[Tuple[int, int], ...]) -> Tuple[int, int]:
    """Height and width of a shape's bounding box."""
    return (max(dr for dr, _ in shape) + 1, max(dc for _, dc in shape) + 1)


def render_column_numbers(columns: int) -> List[str]:
    """
    Render the column numbers as header lines aligned with the field.

    Numbers with more than one digit are written top to bottom, one digit
    per line, so every column stays one character wide.

    Args:
        columns: Number of columns on the board

    Returns:
        Header lines, most significant digit first
    """
    labels = [str(col) for col in range(columns)]
    digits = len(labels[-1])
    lines = []
    for pos in range(digits - 1, -1, -1):
        line = []
        for label in labels:
            line.append(label[len(label) - pos - 1] if pos < len(label) else " ")
        lines.append(" ".join(line))
    return lines


def render_field(board_text: str, columns: int) -> str:
    """Combine the board text with its column number header lines."""
    return "\n".join(["Field:", board_text] + render_column_numbers(columns))
