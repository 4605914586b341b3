"""
Operator Norm Primitives

Induced l1, l2 and l-infinity norms of small square matrices.
"""

import numpy as np

from matext.checks import as_square_matrix
from matext.matrix.eigen import eigenvalues


def norm_l1(matrix: np.ndarray) -> float:
    """
    Operator norm induced by the l1 vector norm.

    Maximum absolute column sum.
    """
    matrix = as_square_matrix(matrix)
    return float(np.abs(matrix).sum(axis=0).max())


def norm_linf(matrix: np.ndarray) -> float:
    """
    Operator norm induced by the l-infinity vector norm.

    Maximum absolute row sum, i.e. norm_l1 of the transpose.
    """
    matrix = as_square_matrix(matrix)
    return float(np.abs(matrix).sum(axis=1).max())


def norm_l2(matrix: np.ndarray) -> float:
    """
    Operator norm induced by the Euclidean vector norm.

    Parameters
    ----------
    matrix : np.ndarray
        Square matrix (2x2, 3x3 or 4x4)

    Returns
    -------
    float
        Largest singular value of the matrix

    Notes
    -----
    ||M||_2 = sqrt(lambda_max(M^T M)). The eigenvalues of M^T M come from
    the closed-form characteristic polynomial solver.
    """
    matrix = as_square_matrix(matrix)
    gram = matrix.T @ matrix
    # Rounding can push the top eigenvalue of a zero-ish Gram matrix below 0
    return float(np.sqrt(max(eigenvalues(gram).real.max(), 0.0)))
