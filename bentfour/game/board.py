"""
board.py - Board representation and core game mechanics for Bent Four

This module implements the Board class which holds the grid of tokens,
applies the gravity rule when a token is dropped, and detects the bent
four-cell formations that win the game.
"""

from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np

from bentfour.debug import debug, DebugLevel
from bentfour.game.errors import (ColumnFullError, InvalidConfigurationError,
                                  InvalidPositionError, InvalidSymbolError)
from bentfour.utils import (DEFAULT_COLUMNS, DEFAULT_ROWS, MIN_SIZE,
                            PLAYER_SYMBOLS, WIN_SHAPES, Symbol, shape_size)


class Board:
    """
    Represents a Bent Four game board.

    Row 0 is the top of the board; tokens fall towards the highest row
    index. The board knows nothing about turns, it only enforces the
    placement rules and reports a winner.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS):
        """
        Initialize an empty board.

        Args:
            rows: Number of rows (at least 3)
            columns: Number of columns (at least 3)

        Raises:
            InvalidConfigurationError: If either dimension is below 3
        """
        if rows < MIN_SIZE or columns < MIN_SIZE:
            raise InvalidConfigurationError(
                f"the field has to be at least {MIN_SIZE}x{MIN_SIZE} in size, got {rows}x{columns}")
        debug.debug(f"Initializing new {rows}x{columns} Board", "board")
        self.grid = np.zeros((rows, columns), dtype=int)

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def columns(self) -> int:
        return self.grid.shape[1]

    def clone(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same dimensions and cells
        """
        debug.trace("Cloning board", "board")
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_column(self, column) -> bool:
        return isinstance(column, Integral) and not isinstance(column, bool) \
            and 0 <= column < self.columns

    def _check_column(self, column) -> None:
        if not self.is_valid_column(column):
            raise InvalidPositionError(f"there is no column {column}")

    def cell_at(self, row: int, column: int) -> Symbol:
        """
        Get the symbol stored at a position.

        Raises:
            InvalidPositionError: If row or column is outside the board
        """
        self._check_column(column)
        if not (isinstance(row, Integral) and 0 <= row < self.rows):
            raise InvalidPositionError(f"there is no row {row}")
        return Symbol(int(self.grid[row, column]))

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return self.grid[0, column] != Symbol.EMPTY.value

    def get_valid_moves(self) -> List[int]:
        """Columns that can still take a token."""
        return [int(col) for col in np.flatnonzero(self.grid[0] == Symbol.EMPTY.value)]

    def try_insert(self, column: int, symbol: Symbol) -> Optional[int]:
        """
        Drop a token into a column if it has room.

        Args:
            column: Column to drop into (0-indexed)
            symbol: Symbol.A or Symbol.B

        Returns:
            The row the token landed in, or None if the column is full

        Raises:
            InvalidPositionError: If the column does not exist
            InvalidSymbolError: If symbol is not a player's marker
        """
        self._check_column(column)
        if symbol not in PLAYER_SYMBOLS:
            raise InvalidSymbolError(f'"{symbol}" is not a valid symbol to insert')

        empty_rows = np.flatnonzero(self.grid[:, column] == Symbol.EMPTY.value)
        if empty_rows.size == 0:
            debug.trace(f"Column {column} is full", "board")
            return None

        row = int(empty_rows[-1])
        self.grid[row, column] = symbol.value
        debug.trace(f"Placed {symbol} at ({row}, {column})", "board")
        return row

    def insert(self, column: int, symbol: Symbol) -> int:
        """
        Drop a token into a column.

        Returns:
            The row the token landed in

        Raises:
            InvalidPositionError: If the column does not exist
            InvalidSymbolError: If symbol is not a player's marker
            ColumnFullError: If the column has no empty cell (board unchanged)
        """
        row = self.try_insert(column, symbol)
        if row is None:
            raise ColumnFullError(column)
        return row

    def is_full(self) -> bool:
        """True if every column's top cell is occupied."""
        return bool(np.all(self.grid[0] != Symbol.EMPTY.value))

    def _find_win(self) -> Optional[Tuple[Symbol, List[Tuple[int, int]]]]:
        for shape in WIN_SHAPES:
            height, width = shape_size(shape)
            if height > self.rows or width > self.columns:
                continue
            span_rows = self.rows - height + 1
            span_cols = self.columns - width + 1

            for symbol in PLAYER_SYMBOLS:
                owned = self.grid == symbol.value
                # hits[r, c] is True when the shape anchored at (r, c) is complete
                hits = np.ones((span_rows, span_cols), dtype=bool)
                for dr, dc in shape:
                    hits &= owned[dr:dr + span_rows, dc:dc + span_cols]

                anchors = np.argwhere(hits)
                if anchors.size:
                    row, col = (int(v) for v in anchors[0])
                    return symbol, [(row + dr, col + dc) for dr, dc in shape]
        return None

    def winner(self) -> Optional[Symbol]:
        """
        Find the owner of a completed winning shape.

        Returns:
            The winning symbol, or None if no shape is complete
        """
        found = self._find_win()
        return found[0] if found else None

    def get_winning_shape(self) -> List[Tuple[int, int]]:
        """
        Get the cells of a completed winning shape.

        Returns:
            List of (row, column) positions, or an empty list if no win
        """
        found = self._find_win()
        return found[1] if found else []

    def get_state(self) -> np.ndarray:
        """Get a copy of the raw grid of symbol values."""
        return self.grid.copy()

    def to_display_text(self) -> str:
        """Render the grid, one line per row with space separated cells."""
        return "\n".join(
            " ".join(str(Symbol(int(value))) for value in row) for row in self.grid)

    def __str__(self) -> str:
        return self.to_display_text()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.TRACE)

    board = Board(6, 7)
    for column, symbol in [(0, Symbol.A), (2, Symbol.B), (1, Symbol.A),
                           (6, Symbol.B), (1, Symbol.A), (6, Symbol.B), (2, Symbol.A)]:
        board.insert(column, symbol)
    print(board)
    print(f"Winner: {board.winner()} at {board.get_winning_shape()}")
