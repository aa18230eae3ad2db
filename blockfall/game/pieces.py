"""
Tetromino shape templates and rotation.

Every shape is a square boolean matrix. Pieces whose visible footprint is not
square (I, J, L, S, T, Z) are padded with empty rows/columns so that rotation
is always a plain matrix operation.

Coordinate convention:
  - Row 0 is the top of the matrix and row index increases downward.
  - Column 0 is the left edge and column index increases rightward.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# Tetromino Definitions
# =============================================================================
# Order matches the shape index used by the randomizer (0-6).

I_SHAPE = np.array([
    [0, 0, 0, 0],
    [1, 1, 1, 1],
    [0, 0, 0, 0],
    [0, 0, 0, 0],
], dtype=bool)

J_SHAPE = np.array([
    [1, 0, 0],
    [1, 1, 1],
    [0, 0, 0],
], dtype=bool)

L_SHAPE = np.array([
    [0, 0, 1],
    [1, 1, 1],
    [0, 0, 0],
], dtype=bool)

Z_SHAPE = np.array([
    [1, 1, 0],
    [0, 1, 1],
    [0, 0, 0],
], dtype=bool)

S_SHAPE = np.array([
    [0, 1, 1],
    [1, 1, 0],
    [0, 0, 0],
], dtype=bool)

O_SHAPE = np.array([
    [1, 1],
    [1, 1],
], dtype=bool)

T_SHAPE = np.array([
    [0, 1, 0],
    [1, 1, 1],
    [0, 0, 0],
], dtype=bool)

SHAPES: list[np.ndarray] = [I_SHAPE, J_SHAPE, L_SHAPE, Z_SHAPE, S_SHAPE, O_SHAPE, T_SHAPE]

for _shape in SHAPES:
    _shape.flags.writeable = False


def rotate_shape(shape: np.ndarray) -> np.ndarray:
    """Return a copy of ``shape`` rotated 90 degrees clockwise.

    The cell at (row, col) moves to (col, N - 1 - row), where N is the side
    length of the square matrix. The template passed in is never modified.

    Args:
        shape: Square boolean matrix.

    Returns:
        A new square boolean matrix of the same size.
    """
    size = shape.shape[0]
    rotated = np.zeros((size, size), dtype=bool)
    for row in range(size):
        for col in range(size):
            rotated[col, size - 1 - row] = shape[row, col]
    return rotated


def shape_cells(shape: np.ndarray) -> list[tuple[int, int]]:
    """List the (row, col) offsets of every occupied cell in ``shape``."""
    rows, cols = np.nonzero(shape)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]
