"""
Board logic for a 12x20 grid.

The board is a 2D numpy array (height x width) of int8 values:
  - 0 = empty cell
  - 1-7 = piece id of a locked cell (used for coloring)

Row 0 is the top of the playing field. A piece matrix may hang above it
(negative rows) while spawning; those cells never touch the grid.
"""

from __future__ import annotations

import numpy as np


class Board:
    """Playing field with collision detection, merging and row clearing.

    Attributes:
        width: Number of columns (default 12).
        height: Number of rows (default 20).
        grid: 2D numpy array of shape (height, width), dtype int8.
    """

    def __init__(self, width: int = 12, height: int = 20) -> None:
        """Initialize an empty board.

        Args:
            width: Number of columns.
            height: Number of rows.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def collides(self, matrix: np.ndarray, x: int, y: int) -> bool:
        """Check whether a piece matrix placed at (x, y) overlaps anything.

        An occupied cell collides if it lands:
          - left of column 0 or right of the last column,
          - on or below the bottom edge (row >= height),
          - on a cell that is already filled.
        Cells above the top edge (row < 0) are not collisions.

        Args:
            matrix: Piece matrix; any non-zero entry is an occupied cell.
            x: Column offset of the matrix's top-left corner.
            y: Row offset of the matrix's top-left corner.

        Returns:
            True if the placement is illegal, False otherwise.
        """
        rows, cols = np.nonzero(matrix)
        board_rows = rows + y
        board_cols = cols + x
        out_of_bounds = (board_cols < 0) | (board_cols >= self.width) | (board_rows >= self.height)
        if np.any(out_of_bounds):
            return True
        on_board = board_rows >= 0
        return bool(np.any(self.grid[board_rows[on_board], board_cols[on_board]] != 0))

    def merge(self, matrix: np.ndarray, x: int, y: int) -> None:
        """Lock a piece matrix onto the board at (x, y).

        Writes each occupied cell's value (the piece id) into the grid.
        Does NOT check for collisions first; the caller must ensure the
        placement is valid.

        Args:
            matrix: Piece matrix whose occupied cells hold the piece id.
            x: Column offset of the matrix's top-left corner.
            y: Row offset of the matrix's top-left corner.
        """
        rows, cols = np.nonzero(matrix)
        for r, c in zip(rows, cols):
            board_row = y + r
            if board_row >= 0:
                self.grid[board_row, x + c] = matrix[r, c]

    def sweep(self) -> int:
        """Remove every full row and drop the rows above it.

        Rows are scanned bottom-to-top. When a full row is removed, an empty
        row enters at the top and the scan stays on the same index, so the
        row that just shifted into place is checked as well.

        Returns:
            The number of rows cleared.
        """
        cleared = 0
        row = self.height - 1
        while row >= 0:
            if np.all(self.grid[row] != 0):
                self.grid[1:row + 1] = self.grid[:row].copy()
                self.grid[0] = 0
                cleared += 1
            else:
                row -= 1
        return cleared

    def get_grid(self) -> np.ndarray:
        """Return a copy of the board grid."""
        return self.grid.copy()

    def reset(self) -> None:
        """Clear the entire board, setting all cells to 0."""
        self.grid.fill(0)
