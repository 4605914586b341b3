"""
Matrix Decomposition Primitives

Iwasawa (M = K A N) and Cartan (M = K exp(S)) decompositions of small
real matrices.
"""

import logging

import numpy as np
from typing import Optional, Tuple

from matext.checks import as_square_matrix, has_nan, is_diagonal
from matext.config import EPSILON
from matext.matrix.eigen import eigenvalues
from matext.matrix.spectrum import symmetric_eigenbasis

logger = logging.getLogger(__name__)

# Sizes whose orthogonal Cartan factor is re-orthonormalized afterwards
_REORTHONORMALIZE = {3}


def iwasawa_decomposition(
    matrix: np.ndarray
) -> Optional[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """
    Compute the Iwasawa (KAN) decomposition of a matrix.

    Parameters
    ----------
    matrix : np.ndarray
        Square matrix (2x2, 3x3 or 4x4) with independent columns

    Returns
    -------
    tuple or None
        (K, A, N) with matrix = K @ A @ N
        K: orthogonal matrix
        A: diagonal matrix with positive entries
        N: unit upper triangular matrix
        None if some column is (numerically) dependent on the previous ones

    Notes
    -----
    Classic Gram-Schmidt on the columns m_j:
        n_ij = <m_j, v_i> / |v_i|^2   (i < j)
        v_j  = m_j - sum_i n_ij v_i
    K = [v_j / |v_j|], A = diag(|v_j|), N[i, j] = n_ij.
    This is QR with the signs fixed so that R = A N has a positive diagonal.
    """
    matrix = as_square_matrix(matrix)
    n = matrix.shape[0]

    if has_nan(matrix):
        return None

    basis = []
    sq_norms = []
    unipotent = np.eye(n)

    for j in range(n):
        column = matrix[:, j]
        v = column.copy()
        for i, (u, sq_norm) in enumerate(zip(basis, sq_norms)):
            coef = np.dot(column, u) / sq_norm
            unipotent[i, j] = coef
            v -= coef * u

        sq_norm = np.dot(v, v)
        if not sq_norm > 0:
            logger.debug(f"Iwasawa decomposition failed: column {j} is degenerate")
            return None

        basis.append(v)
        sq_norms.append(sq_norm)

    lengths = np.sqrt(sq_norms)
    orthogonal = np.column_stack(basis) / lengths

    return orthogonal, np.diag(lengths), unipotent


def _is_invertible(matrix: np.ndarray) -> bool:
    singular = np.linalg.svd(matrix, compute_uv=False)
    return bool(singular[-1] > matrix.shape[0] * EPSILON * singular[0])


def cartan_decomposition(
    matrix: np.ndarray,
    degeneracy_rtol: Optional[float] = None
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """
    Compute the Cartan decomposition M = K exp(S).

    Parameters
    ----------
    matrix : np.ndarray
        Invertible square matrix (2x2 or 3x3)
    degeneracy_rtol : float, optional
        Relative gap below which eigenvalues of M^T M count as repeated
        (default: cfg.decomposition.degeneracy_rtol)

    Returns
    -------
    tuple or None
        (K, S) with matrix = K @ expm(S)
        K: orthogonal matrix
        S: symmetric matrix
        None if the matrix is singular

    Notes
    -----
    With A = M^T M = E D E^T (E orthogonal eigenvectors, D diagonal):
        exp(S) = E sqrt(D) E^T     (the positive square root of A)
        S      = E ln(sqrt(D)) E^T
        K      = M exp(S)^-1
    This is the polar decomposition with the positive factor written as
    the exponential of a symmetric matrix. Eigenvalues come from the
    closed-form solver applied to A - (tr A / n) I; the eigenbasis is
    orthonormal by construction, so nearly repeated eigenvalues cost no
    accuracy (see symmetric_eigenbasis).
    """
    matrix = as_square_matrix(matrix, dims=(2, 3))
    n = matrix.shape[0]

    if has_nan(matrix):
        return None

    gram = matrix.T @ matrix
    if not _is_invertible(gram):
        logger.debug("Cartan decomposition failed: matrix is singular")
        return None

    if is_diagonal(gram):
        # Coordinate axes are eigenvectors
        basis = np.eye(n)
    else:
        # Solving the trace-free part keeps a near-scalar gram from
        # scattering its repeated root over ~eps^(1/n) * |lambda|
        shift = np.trace(gram) / n
        values = eigenvalues(gram - shift * np.eye(n)).real + shift
        basis = symmetric_eigenbasis(gram, values, degeneracy_rtol)

    spectrum = np.diag(basis.T @ gram @ basis)
    root = np.sqrt(spectrum)

    symmetric = basis @ np.diag(np.log(root)) @ basis.T
    positive = basis @ np.diag(root) @ basis.T
    orthogonal = matrix @ np.linalg.inv(positive)

    if n in _REORTHONORMALIZE:
        # Gram-Schmidt removes the drift accumulated through inv()
        kan = iwasawa_decomposition(orthogonal)
        if kan is None:
            logger.debug("Cartan decomposition failed: orthogonal factor is degenerate")
            return None
        orthogonal = kan[0]

    return orthogonal, symmetric
