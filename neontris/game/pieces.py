"""
Tetromino catalog and matrix rotation.

Each piece is defined once, in its spawn orientation, on the bounding box
that fits its natural rotation extent (I: 4x4, O: 2x2, everything else 3x3).
Rotated orientations are not stored; an active piece rotates its own copy
of the matrix in place with rotate_matrix().

Coordinate convention:
  - Row 0 is the top of a matrix and row index increases downward.
  - Column 0 is the left edge and column index increases rightward.
"""

from __future__ import annotations

import random

import numpy as np

# =============================================================================
# Piece Colors: neon palette keyed by piece id (RGB)
# =============================================================================

COLOR_CYAN    = (0, 255, 255)    # I
COLOR_MAGENTA = (255, 0, 255)    # O
COLOR_YELLOW  = (255, 255, 0)    # T
COLOR_GREEN   = (0, 255, 0)      # S
COLOR_AZURE   = (0, 153, 255)    # Z
COLOR_ORANGE  = (255, 153, 0)    # J
COLOR_PINK    = (255, 0, 153)    # L

# =============================================================================
# Tetromino Definitions
# =============================================================================
# 1 marks an occupied cell. The "id" is what gets written into the board
# when the piece locks, so it doubles as the color key.

I_PIECE: dict = {
    "id": 1,
    "name": "I",
    "color": COLOR_CYAN,
    "shape": np.array([
        [0, 0, 0, 0],
        [1, 1, 1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ], dtype=np.int8),
}

O_PIECE: dict = {
    "id": 2,
    "name": "O",
    "color": COLOR_MAGENTA,
    "shape": np.array([
        [1, 1],
        [1, 1],
    ], dtype=np.int8),
}

T_PIECE: dict = {
    "id": 3,
    "name": "T",
    "color": COLOR_YELLOW,
    "shape": np.array([
        [0, 1, 0],
        [1, 1, 1],
        [0, 0, 0],
    ], dtype=np.int8),
}

S_PIECE: dict = {
    "id": 4,
    "name": "S",
    "color": COLOR_GREEN,
    "shape": np.array([
        [0, 1, 1],
        [1, 1, 0],
        [0, 0, 0],
    ], dtype=np.int8),
}

Z_PIECE: dict = {
    "id": 5,
    "name": "Z",
    "color": COLOR_AZURE,
    "shape": np.array([
        [1, 1, 0],
        [0, 1, 1],
        [0, 0, 0],
    ], dtype=np.int8),
}

J_PIECE: dict = {
    "id": 6,
    "name": "J",
    "color": COLOR_ORANGE,
    "shape": np.array([
        [1, 0, 0],
        [1, 1, 1],
        [0, 0, 0],
    ], dtype=np.int8),
}

L_PIECE: dict = {
    "id": 7,
    "name": "L",
    "color": COLOR_PINK,
    "shape": np.array([
        [0, 0, 1],
        [1, 1, 1],
        [0, 0, 0],
    ], dtype=np.int8),
}

# =============================================================================
# Lookup tables
# =============================================================================

PIECE_TYPES: list[dict] = [I_PIECE, O_PIECE, T_PIECE, S_PIECE, Z_PIECE, J_PIECE, L_PIECE]

PIECES_BY_NAME: dict[str, dict] = {piece["name"]: piece for piece in PIECE_TYPES}

PIECE_IDS: dict[str, int] = {piece["name"]: piece["id"] for piece in PIECE_TYPES}

PIECE_COLORS: dict[int, tuple[int, int, int]] = {
    piece["id"]: piece["color"] for piece in PIECE_TYPES
}

# Draw order for the randomizer
PIECE_NAMES: str = "ILJOTSZ"

# Shape definitions are shared; nothing may write through them.
for _piece in PIECE_TYPES:
    _piece["shape"].setflags(write=False)


def create_piece(name: str) -> np.ndarray | None:
    """Return a fresh copy of a piece's 0/1 shape matrix.

    Args:
        name: Single-letter piece type (one of I, O, T, S, Z, J, L).

    Returns:
        A new, writable int8 matrix, or None if the type is unknown.
    """
    piece = PIECES_BY_NAME.get(name)
    if piece is None:
        return None
    return piece["shape"].copy()


def random_piece_type(rng: random.Random | None = None) -> str:
    """Pick one of the 7 piece types uniformly at random.

    Args:
        rng: Optional random generator (for reproducible sequences).
            Falls back to the module-level generator.

    Returns:
        A single-letter piece type.
    """
    return (rng or random).choice(PIECE_NAMES)


def rotate_matrix(matrix: np.ndarray, direction: int) -> None:
    """Rotate a square matrix 90 degrees in place.

    The matrix is transposed, then each row is reversed (clockwise) or the
    row order is reversed (counter-clockwise).

    Args:
        matrix: Square 2D array, modified in place.
        direction: Positive for clockwise, negative for counter-clockwise.
    """
    transposed = matrix.T.copy()
    if direction > 0:
        matrix[:] = transposed[:, ::-1]
    else:
        matrix[:] = transposed[::-1, :]
