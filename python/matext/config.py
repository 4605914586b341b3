"""
Matext Configuration

Centralized configuration for solver and decomposition defaults.
Avoids hardcoded tolerances scattered across modules.

Usage:
    from matext.config import MATEXT_CONFIG as cfg

    # Access values
    for _ in range(cfg.solver.newton_max_iter):
        ...
    if gap < cfg.decomposition.degeneracy_rtol * scale:
        ...
"""

from dataclasses import dataclass

import numpy as np

EPSILON = float(np.finfo(np.float64).eps)
SQRT_EPSILON = float(np.sqrt(EPSILON))


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the closed-form polynomial solvers."""

    # Newton-Raphson refinement ceiling per root
    newton_max_iter: int = 100


@dataclass(frozen=True)
class ExponentialConfig:
    """Configuration for the Taylor-series matrix exponential."""

    # Highest series index evaluated before giving up on convergence
    max_terms: int = 64


@dataclass(frozen=True)
class DecompositionConfig:
    """Configuration for the Cartan / Iwasawa decompositions."""

    # Eigenvalues within rtol * max|lambda| of each other count as repeated
    degeneracy_rtol: float = 1e-6

    # Off-diagonal entries below rtol * max|A| count as zero
    diagonal_rtol: float = 4 * EPSILON


@dataclass(frozen=True)
class MatextConfig:
    """Master configuration for matext."""

    solver: SolverConfig = SolverConfig()
    exponential: ExponentialConfig = ExponentialConfig()
    decomposition: DecompositionConfig = DecompositionConfig()


# Global singleton instance
MATEXT_CONFIG = MatextConfig()
