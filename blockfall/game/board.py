"""
Board logic for a 20x12 falling-block grid.

The board is a 2D numpy array (rows x cols) of bool values:
  - False = empty cell
  - True  = permanently filled cell

Row 0 is the top of the grid. Rows above it (negative indices) are a
pre-spawn buffer: piece cells may sit there but never collide with the grid.
"""

from __future__ import annotations

import numpy as np

from blockfall.game.pieces import shape_cells

ROWS = 20
COLS = 12


class Board:
    """Fixed-size grid with collision checks, locking, and line clearing.

    Attributes:
        rows: Number of rows (default 20).
        cols: Number of columns (default 12).
        grid: 2D numpy array of shape (rows, cols), dtype bool.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        """Initialize an empty board.

        Args:
            rows: Number of rows.
            cols: Number of columns.
        """
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((self.rows, self.cols), dtype=bool)

    def can_place(self, shape: np.ndarray, x: int, y: int) -> bool:
        """Check whether ``shape`` fits with its top-left corner at (x, y).

        A position is invalid if any occupied cell of the shape:
          - lies left of column 0 or at/past the right edge,
          - lies at or below the bottom edge,
          - overlaps a filled grid cell in a row >= 0.

        Cells in negative rows are only checked against the side walls.

        Args:
            shape: Square boolean matrix.
            x: Column offset of the shape's top-left corner.
            y: Row offset of the shape's top-left corner.

        Returns:
            True if the position is valid, False otherwise.
        """
        for r, c in shape_cells(shape):
            board_row = y + r
            board_col = x + c
            if board_col < 0 or board_col >= self.cols:
                return False
            if board_row >= self.rows:
                return False
            if board_row >= 0 and self.grid[board_row, board_col]:
                return False
        return True

    def lock(self, shape: np.ndarray, x: int, y: int) -> None:
        """Write the occupied cells of ``shape`` into the grid.

        Does NOT check collisions first. Cells outside the grid (above row 0,
        below the floor, or past either side wall) are dropped.

        Args:
            shape: Square boolean matrix.
            x: Column offset of the shape's top-left corner.
            y: Row offset of the shape's top-left corner.
        """
        for r, c in shape_cells(shape):
            board_row = y + r
            board_col = x + c
            if 0 <= board_row < self.rows and 0 <= board_col < self.cols:
                self.grid[board_row, board_col] = True

    def clear_lines(self) -> int:
        """Remove all full rows and shift everything above them down.

        Returns:
            The number of rows cleared.
        """
        full = self.grid.all(axis=1)
        cleared = int(full.sum())
        if cleared == 0:
            return 0

        remaining = self.grid[~full]
        empty_rows = np.zeros((cleared, self.cols), dtype=bool)
        self.grid = np.vstack([empty_rows, remaining])
        return cleared

    def top_row_occupied(self) -> bool:
        """Return True if any cell in row 0 is filled."""
        return bool(self.grid[0].any())

    def filled_count(self) -> int:
        return int(self.grid.sum())

    def get_grid(self) -> np.ndarray:
        """Return a copy of the board grid.

        Returns:
            A numpy array of shape (rows, cols), dtype bool.
        """
        return self.grid.copy()

    def reset(self) -> None:
        """Clear the entire board, setting all cells to empty."""
        self.grid = np.zeros((self.rows, self.cols), dtype=bool)
