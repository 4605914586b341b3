"""
Shared matrices with known properties.

Random draws are seeded so every ground truth comparison sees the same
inputs run to run.
"""
import numpy as np
import pytest
from scipy.stats import ortho_group


@pytest.fixture
def rng():
    """Seeded generator for the random sweeps."""
    return np.random.RandomState(42)


@pytest.fixture
def random_orthogonal(rng):
    """Factory for Haar-distributed orthogonal matrices of a given size."""
    def draw(n):
        return ortho_group.rvs(dim=n, random_state=rng)
    return draw


@pytest.fixture
def random_spd(random_orthogonal, rng):
    """Factory for symmetric positive definite matrices.

    Eigenvalues lie between 1.5 and 12 and no two are closer than 0.5.
    """
    def draw(n):
        q = random_orthogonal(n)
        spectrum = 1.0 + np.cumsum(0.5 + rng.rand(n) * 9.0 / n)
        return q @ np.diag(spectrum) @ q.T
    return draw


@pytest.fixture
def match_roots():
    """Pair each reference root with the closest unused computed root.

    The returned callable gives the largest pairing distance.
    """
    def worst_distance(ours, theirs):
        remaining = list(ours)
        worst = 0.0
        for target in theirs:
            distances = [abs(z - target) for z in remaining]
            best = int(np.argmin(distances))
            worst = max(worst, distances[best])
            remaining.pop(best)
        return worst
    return worst_distance


@pytest.fixture
def min_gap():
    """Smallest pairwise distance in a set of (complex) values."""
    def smallest(values):
        values = np.asarray(values)
        gaps = np.abs(values[:, None] - values[None, :])
        return gaps[~np.eye(len(values), dtype=bool)].min()
    return smallest
