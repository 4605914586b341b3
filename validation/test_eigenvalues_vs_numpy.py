"""
Characteristic-polynomial eigenvalues validation against numpy.linalg.

Ground truth: numpy.linalg.eigvals / eigvalsh (LAPACK, gold standard)

Known values:
- Identity matrix:  all eigenvalues = 1
- Diagonal matrix:  eigenvalues = diagonal entries
- Rank-1 matrix:    one nonzero eigenvalue |v|^2
"""
import numpy as np
import pytest

from matext.matrix.eigen import characteristic_polynomial, eigenvalues


class TestEigenvaluesVsNumpy:
    """Compare against numpy.linalg.eigvals."""

    @pytest.mark.parametrize("dim", [2, 3, 4])
    def test_diagonal(self, dim):
        diag_vals = np.arange(1.0, dim + 1.0)
        ours = np.sort(eigenvalues(np.diag(diag_vals)).real)
        np.testing.assert_allclose(ours, diag_vals, atol=1e-10)

    def test_rank_one(self):
        v = np.array([1.0, 2.0, 3.0])
        eigs = np.sort(eigenvalues(np.outer(v, v)).real)
        assert abs(eigs[-1] - 14.0) < 1e-8
        assert np.all(np.abs(eigs[:-1]) < 1e-6)

    @pytest.mark.parametrize("dim", [2, 3, 4])
    def test_random_symmetric_vs_eigvalsh(self, dim, random_spd):
        for _ in range(100):
            m = random_spd(dim)
            ours = np.sort(eigenvalues(m).real)
            theirs = np.linalg.eigvalsh(m)
            np.testing.assert_allclose(ours, theirs, atol=1e-8)

    @pytest.mark.parametrize("dim", [2, 3, 4])
    def test_random_general_vs_eigvals(self, dim, rng, match_roots, min_gap):
        n_checked = 0
        for _ in range(300):
            m = rng.randn(dim, dim)
            theirs = np.linalg.eigvals(m)
            if min_gap(theirs) < 0.05:
                continue
            assert match_roots(eigenvalues(m), theirs) < 1e-6
            n_checked += 1
        assert n_checked > 150


class TestCharacteristicPolynomialVsNumpy:
    """Compare against numpy.poly (coefficients from LAPACK eigenvalues)."""

    @pytest.mark.parametrize("dim", [2, 3, 4])
    def test_random(self, dim, rng):
        for _ in range(50):
            m = rng.randn(dim, dim)
            np.testing.assert_allclose(characteristic_polynomial(m), np.poly(m), atol=1e-10)
