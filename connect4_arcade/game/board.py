"""
board.py - Board representation for the Connect Four engine

This module implements the Board class, which owns the grid of cells,
finds where a dropped piece lands, records placed pieces and reports
whether the board is full.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from connect4_arcade.debug import debug
from connect4_arcade.utils import (ROWS, COLS, Player, is_valid_position,
                                   render_board_ascii)


class Board:
    """
    A ROWS x COLS gravity board.

    Row 0 is the top of the board and row ROWS-1 the bottom. Pieces fill a
    column from the bottom up, so the occupied cells of a column never
    have gaps.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.trace("Initializing new Board", "board")
        self.rows = ROWS
        self.cols = COLS
        self.reset()

    def reset(self) -> None:
        """Set every cell to empty."""
        debug.debug("Resetting board", "board")
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)
        self.last_move: Optional[Tuple[int, int]] = None
        self.move_count = 0

    @classmethod
    def from_position(cls, values: Union[Sequence[int], np.ndarray]) -> 'Board':
        """
        Build a board from a flat or 2D position.

        Args:
            values: ROWS*COLS cell values (0, 1 or 2), top row first

        Returns:
            A board holding the position

        Raises:
            ValueError: If the position has the wrong size, unknown cell
                values, or pieces floating above an empty cell
        """
        array = np.asarray(values, dtype=int)
        if array.size != ROWS * COLS:
            raise ValueError(f"Position must have {ROWS * COLS} values, got {array.size}")

        allowed = [p.value for p in Player]
        if not np.isin(array, allowed).all():
            raise ValueError(f"Cell values must be one of {allowed}")

        board = cls()
        board.grid = array.reshape(ROWS, COLS).astype(np.int8)
        if not board.is_gap_free():
            raise ValueError("Position has pieces floating above empty cells")

        board.move_count = int(np.count_nonzero(board.grid))
        return board

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.last_move = self.last_move
        new_board.move_count = self.move_count
        return new_board

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.cols:
            raise IndexError(f"Column {column} out of range 0..{self.cols - 1}")

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would settle in.

        The board is not modified, so calling this twice without an
        intervening ``place`` yields the same row.

        Args:
            column: Column index (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full
        """
        self._check_column(column)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Put ``player``'s piece at (row, column).

        Callers must pass a row obtained from ``find_landing_row`` on the
        current board; anything else is a programming error.

        Raises:
            IndexError: If the coordinates are off the board
            ValueError: If the cell is taken, the row is not the column's
                landing row, or ``player`` is not a real player
        """
        if not is_valid_position(row, column, self.rows, self.cols):
            raise IndexError(f"Cell ({row}, {column}) is off the board")
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty piece")
        if self.grid[row, column] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")
        if row != self.find_landing_row(column):
            raise ValueError(f"Row {row} is not the landing row of column {column}")

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value
        self.last_move = (row, column)
        self.move_count += 1

    def is_full(self) -> bool:
        """True when every cell of the top row is occupied."""
        return bool(np.all(self.grid[0] != Player.EMPTY.value))

    def is_valid_move(self, column: int) -> bool:
        if not 0 <= column < self.cols:
            return False
        return bool(self.grid[0, column] == Player.EMPTY.value)

    def get_valid_moves(self) -> List[int]:
        return [col for col in range(self.cols) if self.is_valid_move(col)]

    def is_gap_free(self) -> bool:
        """Check that no piece sits above an empty cell in any column."""
        occupied = self.grid != Player.EMPTY.value
        # Below an occupied cell, every cell must be occupied too
        return bool(np.all(occupied[1:] | ~occupied[:-1]))

    def count(self, player: Player) -> int:
        return int(np.count_nonzero(self.grid == player.value))

    def cells(self) -> Iterable[Tuple[int, int, Player]]:
        """Yield (row, col, player) for every occupied cell."""
        for row, col in zip(*np.nonzero(self.grid)):
            yield int(row), int(col), Player(int(self.grid[row, col]))

    def get_state(self) -> np.ndarray:
        """Return a copy of the grid."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
