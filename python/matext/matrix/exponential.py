"""
Matrix Exponential Primitive

exp(M) by truncated Taylor series.
"""

import logging

import numpy as np
from typing import Optional

from matext.checks import as_square_matrix, has_nan
from matext.config import MATEXT_CONFIG as cfg, EPSILON
from matext.matrix.norms import norm_linf

logger = logging.getLogger(__name__)


def expm(
    matrix: np.ndarray,
    max_terms: Optional[int] = None
) -> np.ndarray:
    """
    Compute the matrix exponential exp(M) = sum_k M^k / k!.

    Parameters
    ----------
    matrix : np.ndarray
        Square matrix (2x2, 3x3 or 4x4)
    max_terms : int, optional
        Highest series index k (default: cfg.exponential.max_terms)

    Returns
    -------
    np.ndarray
        exp(M), same shape as the input

    Notes
    -----
    The series is accumulated term by term and stops as soon as the next
    term satisfies ||M^k / k!||_inf < eps ||M||_inf. Without scaling and
    squaring this is only accurate for matrices of moderate norm.
    """
    matrix = as_square_matrix(matrix)
    n = matrix.shape[0]

    if max_terms is None:
        max_terms = cfg.exponential.max_terms

    if has_nan(matrix):
        return np.full((n, n), np.nan)

    result = np.eye(n)
    scale = norm_linf(matrix)
    if scale == 0:
        return result

    term = matrix.copy()
    for k in range(2, max_terms + 1):
        result += term
        term = term @ matrix / k
        if norm_linf(term) < EPSILON * scale:
            break
    else:
        logger.debug(
            f"Taylor series for exp(M) not converged after {max_terms} terms "
            f"(||M||_inf={scale:.3e})"
        )

    return result
