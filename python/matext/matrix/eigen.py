"""
Matrix Eigenvalue Primitives

Eigenvalues of 2x2, 3x3 and 4x4 matrices from the invariants of the
characteristic polynomial. No iterative eigensolver is involved.
"""

import numpy as np
from itertools import combinations

from matext.checks import as_square_matrix, has_nan
from matext.solver.polynomial import solve_quadratic, solve_cubic, solve_quartic

# Root finder per matrix size, fed with (c1, ..., cn)
_ROOT_SOLVERS = {
    2: solve_quadratic,
    3: solve_cubic,
    4: solve_quartic,
}


def _cofactor_det(matrix: np.ndarray) -> float:
    """Determinant by cofactor expansion along the first row."""
    n = matrix.shape[0]
    if n == 1:
        return matrix[0, 0]
    if n == 2:
        return matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0]

    det = 0.0
    for j in range(n):
        if matrix[0, j] == 0:
            continue
        minor = np.delete(matrix[1:], j, axis=1)
        det += (-1) ** j * matrix[0, j] * _cofactor_det(minor)
    return det


def principal_minor_sum(matrix: np.ndarray, k: int) -> float:
    """
    Sum of all k x k principal minors of a square matrix.

    k = 1 gives the trace, k = n the determinant.
    """
    n = matrix.shape[0]
    return sum(
        _cofactor_det(matrix[np.ix_(idx, idx)])
        for idx in combinations(range(n), k)
    )


def characteristic_polynomial(matrix: np.ndarray) -> np.ndarray:
    """
    Coefficients of det(x I - M).

    Parameters
    ----------
    matrix : np.ndarray
        Square matrix (2x2, 3x3 or 4x4)

    Returns
    -------
    np.ndarray
        Monic coefficients [1, c1, ..., cn], highest degree first

    Notes
    -----
    c_k = (-1)^k E_k, with E_k the sum of the k x k principal minors:
    - 2x2: (-tr M, det M)
    - 3x3: (-tr M, E_2, -det M)
    - 4x4: (-tr M, E_2, -E_3, det M)
    Minors are expanded by cofactors, so integer input gives exact
    coefficients.
    """
    matrix = as_square_matrix(matrix)
    n = matrix.shape[0]

    coeffs = [1.0]
    for k in range(1, n + 1):
        coeffs.append((-1) ** k * principal_minor_sum(matrix, k))

    return np.array(coeffs, dtype=np.float64)


def eigenvalues(matrix: np.ndarray) -> np.ndarray:
    """
    Compute the eigenvalues of a small square matrix.

    Parameters
    ----------
    matrix : np.ndarray
        Square matrix (2x2, 3x3 or 4x4)

    Returns
    -------
    np.ndarray
        n complex eigenvalues

    Notes
    -----
    Even when all eigenvalues are real their order is not guaranteed;
    sort with np.sort_complex when a stable order matters.
    """
    matrix = as_square_matrix(matrix)
    n = matrix.shape[0]

    # Handle NaN
    if has_nan(matrix):
        return np.full(n, np.nan + 0j)

    coeffs = characteristic_polynomial(matrix)
    return _ROOT_SOLVERS[n](*coeffs[1:])
