"""
Closed-form polynomial solvers (degree 2-4) with Newton refinement.
"""
from matext.solver.polynomial import (
    solve_quadratic,
    pre_solve_cubic,
    solve_cubic,
    pre_solve_quartic,
    solve_quartic,
)

__all__ = [
    "solve_quadratic",
    "pre_solve_cubic",
    "solve_cubic",
    "pre_solve_quartic",
    "solve_quartic",
]
