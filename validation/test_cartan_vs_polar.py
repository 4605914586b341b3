"""
Cartan decomposition validation against scipy.linalg.polar.

Ground truth: scipy.linalg.polar (SVD based), scipy.linalg.logm

For invertible M the right polar decomposition M = U P is unique, with U
orthogonal and P symmetric positive definite. Cartan writes P = exp(S), so
    K = U,  exp(S) = P,  S = logm(P)
"""
import numpy as np
import pytest
from scipy.linalg import logm, polar

from matext.matrix.decomposition import cartan_decomposition
from matext.matrix.exponential import expm


class TestCartanVsPolar:
    """Compare against scipy.linalg.polar."""

    @pytest.mark.parametrize("dim", [2, 3])
    def test_random_well_conditioned(self, dim, rng):
        n_checked = 0
        for _ in range(300):
            m = rng.randn(dim, dim)
            if np.linalg.cond(m) > 50:
                continue
            u, p = polar(m, side="right")
            k, s = cartan_decomposition(m)
            np.testing.assert_allclose(k, u, atol=1e-7)
            np.testing.assert_allclose(expm(s), p, atol=1e-7)
            np.testing.assert_allclose(s, np.real(logm(p)), atol=1e-7)
            n_checked += 1
        assert n_checked > 100

    def test_repeated_singular_values(self, random_orthogonal):
        q = random_orthogonal(3)
        v = random_orthogonal(3)
        m = q @ v @ np.diag([2.0, 2.0, 0.5]) @ v.T
        u, p = polar(m, side="right")
        k, s = cartan_decomposition(m)
        np.testing.assert_allclose(k, u, atol=1e-8)
        np.testing.assert_allclose(expm(s), p, atol=1e-8)

    def test_scalar_multiple_of_orthogonal(self, random_orthogonal):
        q = random_orthogonal(3)
        u, p = polar(5.0 * q, side="right")
        k, s = cartan_decomposition(5.0 * q)
        np.testing.assert_allclose(k, u, atol=1e-10)
        np.testing.assert_allclose(s, np.log(5.0) * np.eye(3), atol=1e-10)

    def test_symmetric_positive_definite(self, random_spd):
        m = random_spd(3)
        k, s = cartan_decomposition(m)
        np.testing.assert_allclose(k, np.eye(3), atol=1e-8)
        np.testing.assert_allclose(s, np.real(logm(m)), atol=1e-8)
