"""
Polynomial Root Primitives

Closed-form roots of monic quadratic, cubic and quartic equations over the
complex numbers, polished by Newton-Raphson.
"""

import logging

import numpy as np
from typing import Optional

from matext.config import MATEXT_CONFIG as cfg, SQRT_EPSILON

logger = logging.getLogger(__name__)

# Primitive cube roots of unity
OMEGA = complex(-0.5, np.sqrt(3.0) / 2.0)
OMEGA2 = OMEGA.conjugate()

# Sign patterns (sa, sb, sc) for the Ferrari candidates, i = 0..7
_QUARTIC_SIGNS = np.array(
    [[(-1) ** (i % 2), (-1) ** ((i // 2) % 2), (-1) ** ((i // 4) % 2)] for i in range(8)],
    dtype=np.float64,
)


def _newton_refine(
    roots: np.ndarray,
    poly: np.ndarray,
    max_iter: Optional[int] = None
) -> np.ndarray:
    """
    Polish approximate roots of a polynomial with Newton-Raphson.

    Parameters
    ----------
    roots : np.ndarray
        Approximate complex roots
    poly : np.ndarray
        Polynomial coefficients, highest degree first
    max_iter : int, optional
        Step ceiling per root (default: cfg.solver.newton_max_iter)

    Returns
    -------
    np.ndarray
        Refined roots (complex128)

    Notes
    -----
    A root is accepted once |f(x)| <= sqrt(eps) |f'(x)|. When
    |f'(x)| < sqrt(eps) the step would blow up, so the current estimate is
    kept as is.
    """
    if max_iter is None:
        max_iter = cfg.solver.newton_max_iter

    dpoly = np.polyder(poly)
    refined = np.empty(len(roots), dtype=np.complex128)

    for i, x in enumerate(roots):
        x = complex(x)
        f = complex(np.polyval(poly, x))
        f_prime = complex(np.polyval(dpoly, x))
        steps = 0
        while abs(f) > SQRT_EPSILON * abs(f_prime):
            if abs(f_prime) < SQRT_EPSILON:
                break
            if steps >= max_iter:
                logger.debug(
                    f"Newton refinement stopped after {max_iter} steps: "
                    f"x={x}, |f(x)|={abs(f):.3e}"
                )
                break
            x -= f / f_prime
            f = complex(np.polyval(poly, x))
            f_prime = complex(np.polyval(dpoly, x))
            steps += 1
        refined[i] = x

    return refined


def solve_quadratic(a: float, b: float) -> np.ndarray:
    """
    Solve x^2 + a x + b = 0.

    Parameters
    ----------
    a, b : float
        Coefficients of the monic quadratic

    Returns
    -------
    np.ndarray
        Two complex roots. Real roots come in ascending order; a complex
        pair is returned as (-a + i h) / 2, (-a - i h) / 2.
    """
    det = a * a - 4.0 * b

    if det >= 0:
        h = np.sqrt(det)
        return np.array([(-a - h) / 2.0, (-a + h) / 2.0], dtype=np.complex128)

    h = np.sqrt(-det)
    return np.array([complex(-a, h) / 2.0, complex(-a, -h) / 2.0])


def pre_solve_cubic(
    p: float,
    q: float,
    max_iter: Optional[int] = None
) -> np.ndarray:
    """
    Solve the depressed cubic x^3 + p x + q = 0 (Cardano).

    Parameters
    ----------
    p, q : float
        Coefficients of the depressed cubic
    max_iter : int, optional
        Newton step ceiling per root

    Returns
    -------
    np.ndarray
        Three complex roots, in no particular order

    Notes
    -----
    alpha^2 = (q/2)^2 + (p/3)^3 decides the branch:
    - alpha^2 >= 0: u, v are the real cube roots of -q/2 -/+ alpha
    - alpha^2 < 0:  u, v are principal cube roots of -q/2 +/- i sqrt(-alpha^2)
    Roots are u + v, w u + w^2 v, w^2 u + w v with w = exp(2 pi i / 3).
    """
    p_3 = p / 3.0
    q_2 = q / 2.0
    alpha2 = q_2 * q_2 + p_3 * p_3 * p_3

    # Handle NaN
    if np.isnan(alpha2):
        return np.full(3, np.nan + 0j)

    if alpha2 >= 0:
        alpha = np.sqrt(alpha2)
        u = complex(np.cbrt(-q_2 - alpha))
        v = complex(np.cbrt(-q_2 + alpha))
    else:
        alpha = np.sqrt(-alpha2)
        u = complex(-q_2, alpha) ** (1.0 / 3.0)
        v = complex(-q_2, -alpha) ** (1.0 / 3.0)

    roots = np.array([u + v, OMEGA * u + OMEGA2 * v, OMEGA2 * u + OMEGA * v])
    return _newton_refine(roots, np.array([1.0, 0.0, p, q]), max_iter)


def solve_cubic(
    a: float,
    b: float,
    c: float,
    max_iter: Optional[int] = None
) -> np.ndarray:
    """
    Solve x^3 + a x^2 + b x + c = 0.

    Substitutes x = t - a/3 and hands the depressed cubic to
    pre_solve_cubic.
    """
    a_3 = a / 3.0
    p = b - a * a_3
    q = c - a_3 * b + 2.0 * a_3 * a_3 * a_3
    return pre_solve_cubic(p, q, max_iter) - a_3


def pre_solve_quartic(
    p: float,
    q: float,
    r: float,
    max_iter: Optional[int] = None
) -> np.ndarray:
    """
    Solve the depressed quartic x^4 + p x^2 + q x + r = 0 (Ferrari).

    Parameters
    ----------
    p, q, r : float
        Coefficients of the depressed quartic
    max_iter : int, optional
        Newton step ceiling per root

    Returns
    -------
    np.ndarray
        Four complex roots, in no particular order

    Notes
    -----
    The resolvent cubic y^3 + 2p y^2 + (p^2 - 4r) y - q^2 = 0 has roots
    y_k; with a, b, c = sqrt(y_k) / 2 the quartic roots are one of the
    eight sign choices of (-a-b-c, -a+b+c, a-b+c, a+b-c). The principal
    square roots do not fix the signs, so every choice is scored by its
    worst squared residual and the best one is kept.
    """
    poly = np.array([1.0, 0.0, p, q, r])

    half_roots = np.sqrt(solve_cubic(2.0 * p, p * p - 4.0 * r, -q * q, max_iter)) / 2.0
    a, b, c = (_QUARTIC_SIGNS * half_roots).T
    candidates = np.stack([-a - b - c, -a + b + c, a - b + c, a + b - c], axis=1)

    worst = (np.abs(np.polyval(poly, candidates)) ** 2).max(axis=1)
    best = candidates[np.argmin(worst)]

    return _newton_refine(best, poly, max_iter)


def solve_quartic(
    a: float,
    b: float,
    c: float,
    d: float,
    max_iter: Optional[int] = None
) -> np.ndarray:
    """
    Solve x^4 + a x^3 + b x^2 + c x + d = 0.

    Substitutes x = t - a/4 and hands the depressed quartic to
    pre_solve_quartic.
    """
    a_4 = a / 4.0
    a_4sq = a_4 * a_4
    p = b - 6.0 * a_4sq
    q = c - 2.0 * b * a_4 + 8.0 * a_4sq * a_4
    r = d - c * a_4 + b * a_4sq - 3.0 * a_4sq * a_4sq
    return pre_solve_quartic(p, q, r, max_iter) - a_4
