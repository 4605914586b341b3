"""
Symmetric Spectrum Helpers

Eigenvalue clustering and eigenvector recovery for real symmetric 2x2 and
3x3 matrices whose eigenvalues are already known.
"""

import enum

import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from matext.checks import is_diagonal
from matext.config import MATEXT_CONFIG as cfg
from matext.matrix.eigen import eigenvalues


class Degeneracy(enum.Enum):
    """How many eigenvalues coincide."""

    DISTINCT = "distinct"
    PAIR = "pair"
    ALL_EQUAL = "all_equal"


@dataclass(frozen=True)
class EigenCluster:
    """
    Outcome of clustering a real spectrum.

    pair and single are only set for PAIR: indices of the two coinciding
    eigenvalues and of the remaining one.
    """

    kind: Degeneracy
    pair: Optional[Tuple[int, int]] = None
    single: Optional[int] = None


def cluster_eigenvalues(
    values: np.ndarray,
    rtol: Optional[float] = None
) -> EigenCluster:
    """
    Decide once which eigenvalues of a 2- or 3-element spectrum coincide.

    Parameters
    ----------
    values : np.ndarray
        Real eigenvalues (length 2 or 3)
    rtol : float, optional
        Relative gap below which two eigenvalues are equal
        (default: cfg.decomposition.degeneracy_rtol)

    Returns
    -------
    EigenCluster
        DISTINCT, PAIR (3 values only) or ALL_EQUAL

    Notes
    -----
    Two eigenvalues are equal when they differ by at most
    rtol * max|lambda|. The test is scale free: multiplying the spectrum
    by any positive constant leaves the outcome unchanged.
    """
    if rtol is None:
        rtol = cfg.decomposition.degeneracy_rtol

    values = np.asarray(values, dtype=np.float64)
    tol = rtol * float(np.abs(values).max())

    if len(values) == 2:
        if abs(values[0] - values[1]) <= tol:
            return EigenCluster(Degeneracy.ALL_EQUAL)
        return EigenCluster(Degeneracy.DISTINCT)

    pairs = [(0, 1, 2), (1, 2, 0), (2, 0, 1)]
    equal = [(i, j, k) for i, j, k in pairs if abs(values[i] - values[j]) <= tol]

    if not equal:
        return EigenCluster(Degeneracy.DISTINCT)
    if len(equal) == 1:
        i, j, k = equal[0]
        return EigenCluster(Degeneracy.PAIR, pair=(i, j), single=k)
    return EigenCluster(Degeneracy.ALL_EQUAL)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _largest_row(matrix: np.ndarray) -> np.ndarray:
    return matrix[np.argmax((matrix ** 2).sum(axis=1))]


def _most_isolated(values: np.ndarray) -> int:
    """Index of the eigenvalue farthest from its nearest neighbour."""
    gaps = np.abs(values[:, None] - values[None, :])
    np.fill_diagonal(gaps, np.inf)
    return int(np.argmax(gaps.min(axis=1)))


def null_vector2(shifted: np.ndarray) -> np.ndarray:
    """
    Unit vector spanning the kernel of a rank-1 2x2 matrix.

    The row with the larger magnitude is rotated by 90 degrees. A zero
    matrix has every vector in its kernel; the first axis is returned.
    """
    row = _largest_row(shifted)
    if not row.any():
        return np.array([1.0, 0.0])
    return _normalize(np.array([-row[1], row[0]]))


def complement_basis3(normal: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Orthonormal basis of the plane perpendicular to a unit 3-vector.

    u1 zeroes the smallest component of the normal, u2 = normal x u1.
    """
    small = np.argmin(np.abs(normal))
    i, j = [axis for axis in range(3) if axis != small]
    u1 = np.zeros(3)
    u1[i], u1[j] = -normal[j], normal[i]
    u1 = _normalize(u1)

    u2 = _normalize(np.cross(normal, u1))
    return u1, u2


def null_vector3(shifted: np.ndarray) -> np.ndarray:
    """
    Unit vector spanning the kernel of a rank-2 3x3 matrix.

    Parameters
    ----------
    shifted : np.ndarray
        A - lambda I for a simple eigenvalue lambda

    Returns
    -------
    np.ndarray
        Normalized eigenvector for lambda

    Notes
    -----
    Any two independent rows are orthogonal to the kernel, so their cross
    product spans it. Of the three pairings the one with the largest cross
    product is used; a near-parallel pair would give a tiny, noisy vector.
    When all rows are parallel (rank 1) a vector perpendicular to them is
    returned, and for a zero matrix the first axis.
    """
    r0, r1, r2 = shifted
    crosses = np.array([np.cross(r1, r2), np.cross(r2, r0), np.cross(r0, r1)])
    best = _largest_row(crosses)
    if best.any():
        return _normalize(best)

    row = _largest_row(shifted)
    if row.any():
        return complement_basis3(_normalize(row))[0]
    return np.array([1.0, 0.0, 0.0])


def eigenbasis2(matrix: np.ndarray, value: Optional[float] = None) -> np.ndarray:
    """
    Orthonormal eigenvectors of a symmetric 2x2 matrix.

    Parameters
    ----------
    matrix : np.ndarray
        Real symmetric 2x2 matrix
    value : float, optional
        Eigenvalue for the first column (default: the larger eigenvalue,
        computed here)

    Returns
    -------
    np.ndarray
        Rotation whose first column belongs to value

    Notes
    -----
    Works on the trace-free part B = matrix - (tr / 2) I, whose
    eigenvalues +/- sqrt(-det B) carry no cancellation even when the two
    eigenvalues of matrix nearly coincide. The second column is the first
    rotated by 90 degrees rather than a second null vector.
    """
    shift = np.trace(matrix) / 2.0
    trace_free = matrix - shift * np.eye(2)
    if value is None:
        offset = eigenvalues(trace_free).real.max()
    else:
        offset = value - shift

    first = null_vector2(trace_free - offset * np.eye(2))
    return np.column_stack([first, [-first[1], first[0]]])


def symmetric_eigenbasis(
    gram: np.ndarray,
    values: np.ndarray,
    rtol: Optional[float] = None
) -> np.ndarray:
    """
    Orthonormal eigenvectors of a symmetric 2x2 or 3x3 matrix.

    Parameters
    ----------
    gram : np.ndarray
        Real symmetric matrix
    values : np.ndarray
        Its real eigenvalues, in any order
    rtol : float, optional
        Degeneracy threshold, see cluster_eigenvalues

    Returns
    -------
    np.ndarray
        Orthogonal matrix whose columns are unit eigenvectors

    Notes
    -----
    For 3x3 only one eigenvector w is taken from a null space: the one of
    the single eigenvalue for PAIR, of the most isolated one for DISTINCT.
    Its gap to the other two is large, so w is accurate. The remaining pair
    is diagonalized inside the plane w-perpendicular as a 2x2 problem. The
    columns are orthonormal whatever the gap inside the pair.
    """
    n = gram.shape[0]
    values = np.asarray(values, dtype=np.float64)

    cluster = cluster_eigenvalues(values, rtol)

    if cluster.kind is Degeneracy.ALL_EQUAL and is_diagonal(gram):
        # gram is a multiple of the identity
        return np.eye(n)

    if n == 2:
        return eigenbasis2(gram, values[0])

    if cluster.kind is Degeneracy.PAIR:
        single = cluster.single
    else:
        single = _most_isolated(values)

    w = null_vector3(gram - values[single] * np.eye(3))
    plane = np.column_stack(complement_basis3(w))
    rotation = eigenbasis2(plane.T @ gram @ plane)
    return np.column_stack([plane @ rotation, w])
