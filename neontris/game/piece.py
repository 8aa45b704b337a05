"""
The falling piece: its own matrix copy plus a grid position.

Movement and rotation are validated against a Board. A move or rotation
that ends in a collision is reverted completely, so an ActivePiece is
never left in a half-applied state.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from neontris.game.board import Board
from neontris.game.pieces import PIECE_IDS, create_piece, rotate_matrix

CLOCKWISE = 1
COUNTER_CLOCKWISE = -1


@dataclass(eq=False)
class ActivePiece:
    """A piece in play.

    Attributes:
        name: Piece type letter (I, O, T, S, Z, J, L).
        matrix: Independent copy of the shape with occupied cells set to the
            piece id.
        x: Column of the matrix's top-left corner on the board.
        y: Row of the matrix's top-left corner on the board.
    """

    name: str
    matrix: np.ndarray
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, name: str, board_width: int) -> ActivePiece | None:
        """Create a piece at the top of the board, horizontally centered.

        Args:
            name: Piece type letter.
            board_width: Width of the board the piece will fall on.

        Returns:
            The new piece, or None if the type is not in the catalog.
        """
        matrix = create_piece(name)
        if matrix is None:
            return None
        matrix[matrix != 0] = PIECE_IDS[name]
        x = board_width // 2 - matrix.shape[1] // 2
        return cls(name, matrix, x, 0)

    @property
    def width(self) -> int:
        """Number of columns in the piece matrix."""
        return self.matrix.shape[1]

    def cells(self) -> list[tuple[int, int]]:
        """Return the board (x, y) coordinates of every occupied cell."""
        rows, cols = np.nonzero(self.matrix)
        return [(self.x + int(c), self.y + int(r)) for r, c in zip(rows, cols)]

    def try_move(self, board: Board, dx: int, dy: int) -> bool:
        """Shift the piece by (dx, dy) unless that would collide.

        Returns:
            True if the piece moved, False if it was blocked.
        """
        self.x += dx
        self.y += dy
        if board.collides(self.matrix, self.x, self.y):
            self.x -= dx
            self.y -= dy
            return False
        return True

    def rotate(self, board: Board, direction: int) -> bool:
        """Rotate 90 degrees, kicking sideways off walls and blocks.

        After rotating, if the piece collides it is pushed horizontally by
        +1, -2, +3, -4, ... columns in turn (so it tries one column right,
        one left, two right, two left, ...). Once the next push would exceed
        the matrix width plus one, the rotation is undone and the original
        column restored.

        Args:
            board: Board to test placements against.
            direction: CLOCKWISE or COUNTER_CLOCKWISE.

        Returns:
            True if the piece rotated (with or without a kick), False if the
            rotation was abandoned.
        """
        original_x = self.x
        rotate_matrix(self.matrix, direction)

        offset = 1
        while board.collides(self.matrix, self.x, self.y):
            self.x += offset
            offset = -(offset + (1 if offset > 0 else -1))
            if abs(offset) > self.width + 1:
                rotate_matrix(self.matrix, -direction)
                self.x = original_x
                return False
        return True
