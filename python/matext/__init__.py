"""
matext: closed-form linear algebra for 2x2, 3x3 and 4x4 matrices.

Eigenvalues from the characteristic polynomial, operator norms, the
matrix exponential, and the Iwasawa / Cartan decompositions, all on top of
closed-form quadratic, cubic and quartic solvers.

Usage:
    from matext import eigenvalues, norm_l2, expm
    from matext import iwasawa_decomposition, cartan_decomposition

    # Or import by category:
    from matext.solver.polynomial import solve_quartic
    from matext.matrix.spectrum import cluster_eigenvalues
"""
__version__ = "0.1.0"

from matext.solver.polynomial import (
    solve_quadratic,
    pre_solve_cubic,
    solve_cubic,
    pre_solve_quartic,
    solve_quartic,
)
from matext.matrix.eigen import eigenvalues, characteristic_polynomial
from matext.matrix.norms import norm_l1, norm_l2, norm_linf
from matext.matrix.exponential import expm
from matext.matrix.decomposition import iwasawa_decomposition, cartan_decomposition

# Subpackages
from matext import solver  # noqa: F401
from matext import matrix  # noqa: F401

__all__ = [
    # Polynomial solvers
    "solve_quadratic",
    "pre_solve_cubic",
    "solve_cubic",
    "pre_solve_quartic",
    "solve_quartic",
    # Eigenvalues
    "eigenvalues",
    "characteristic_polynomial",
    # Operator norms
    "norm_l1",
    "norm_l2",
    "norm_linf",
    # Exponential
    "expm",
    # Decompositions
    "iwasawa_decomposition",
    "cartan_decomposition",
]
