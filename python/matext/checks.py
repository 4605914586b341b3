"""
Input guards shared by the matrix routines.

Centralizes shape checks so the algorithms can assume a float64 square
matrix of a supported size.
"""

import numpy as np
from typing import Optional, Tuple

from matext.config import MATEXT_CONFIG as cfg

SUPPORTED_DIMS = (2, 3, 4)


def as_square_matrix(
    matrix: np.ndarray,
    dims: Tuple[int, ...] = SUPPORTED_DIMS
) -> np.ndarray:
    """Convert to a float64 square matrix and check its size.

    Args:
        matrix: array-like (n x n)
        dims: accepted values of n

    Returns:
        the input as a float64 array, copied only if it was not one already

    Raises:
        ValueError: if the matrix is not square or n is not in dims
    """
    matrix = np.asarray(matrix, dtype=np.float64)

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("Matrix must be square")

    n = matrix.shape[0]
    if n not in dims:
        raise ValueError(
            f"Unsupported matrix size {n}x{n}, expected one of "
            f"{', '.join(f'{d}x{d}' for d in dims)}"
        )

    return matrix


def has_nan(matrix: np.ndarray) -> bool:
    """True if any entry is NaN."""
    return bool(np.any(np.isnan(matrix)))


def is_diagonal(matrix: np.ndarray, rtol: Optional[float] = None) -> bool:
    """True if every off-diagonal entry is within rtol * max|entry| of zero."""
    if rtol is None:
        rtol = cfg.decomposition.diagonal_rtol
    off_diagonal = matrix - np.diag(np.diag(matrix))
    scale = np.abs(matrix).max()
    return bool(np.abs(off_diagonal).max() <= rtol * scale)
