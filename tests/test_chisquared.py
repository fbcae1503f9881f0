"""Tests for probkit.distributions.chisquared."""

import numpy as np
import pytest
from scipy import stats

from probkit.core.source import NumpySource
from probkit.core.types import InvalidParameter, Median
from probkit.distributions import Chisquared, Gamma

from .reference import (
    DENSITY_P,
    DENSITY_X,
    DISTRIBUTION_P,
    DISTRIBUTION_X,
    ENTROPY_K3_THETA2,
)


class TestConstruction:
    """Parameter checks, accessors and the owned Gamma."""

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 7, 30])
    def test_k_round_trips(self, k):
        assert Chisquared(k).k() == k

    def test_owned_gamma(self):
        assert Chisquared(5).gamma == Gamma(2.5, 2.0)

    def test_accepts_numpy_integer(self):
        assert Chisquared(np.int64(3)).k() == 3

    @pytest.mark.parametrize("k", [0, -4])
    def test_non_positive_raises(self, k):
        with pytest.raises(InvalidParameter, match="must be > 0"):
            Chisquared(k)

    @pytest.mark.parametrize("k", [2.5, 4.0, True, "4", None])
    def test_non_integer_raises(self, k):
        with pytest.raises(InvalidParameter, match="integer"):
            Chisquared(k)

    def test_is_not_a_gamma_subclass(self):
        assert not isinstance(Chisquared(4), Gamma)

    def test_equality_and_repr(self):
        assert Chisquared(4) == Chisquared(4)
        assert Chisquared(4) != Chisquared(5)
        assert hash(Chisquared(4)) == hash(Chisquared(4))
        assert repr(Chisquared(4)) == "Chisquared(k=4)"


class TestReferenceValues:
    """Values for Chisquared(4) and friends."""

    def test_density(self):
        d = Chisquared(4)
        np.testing.assert_allclose(d.density(DENSITY_X), DENSITY_P, rtol=0, atol=1e-14)

    def test_density_at_two(self):
        assert Chisquared(4).density(2.0) == pytest.approx(0.1839397205857212, abs=1e-14)

    def test_distribution(self):
        d = Chisquared(4)
        np.testing.assert_allclose(
            d.distribution(DISTRIBUTION_X), DISTRIBUTION_P, rtol=0, atol=1e-14
        )

    def test_distribution_far_point(self):
        assert Chisquared(4).distribution(19.0) == pytest.approx(0.9992140557861791, abs=1e-14)

    def test_entropy(self):
        assert Chisquared(6).entropy() == pytest.approx(ENTROPY_K3_THETA2, abs=1e-14)

    def test_kurtosis(self):
        assert Chisquared(3).kurtosis() == 4.0

    def test_mean(self):
        assert Chisquared(5).mean() == 5.0

    def test_variance(self):
        assert Chisquared(5).variance() == 10.0

    def test_modes(self):
        assert Chisquared(5).modes() == [3.0]

    def test_modes_empty_for_one_degree(self):
        assert Chisquared(1).modes() == []

    def test_skewness(self):
        assert Chisquared(5).skewness() == pytest.approx(0.12649110640673518e+01, abs=1e-15)

    @pytest.mark.parametrize("k", [1, 3, 10])
    def test_matches_scipy(self, k):
        xs = np.linspace(0.1, 25, 40)
        np.testing.assert_allclose(Chisquared(k).density(xs), stats.chi2.pdf(xs, k), rtol=1e-12)
        np.testing.assert_allclose(
            Chisquared(k).distribution(xs), stats.chi2.cdf(xs, k), rtol=1e-12
        )


class TestMedian:
    """The Wilson-Hilferty median is Chisquared's own formula."""

    def test_has_median_capability(self):
        assert isinstance(Chisquared(3), Median)

    @pytest.mark.parametrize("k", [1, 2, 5, 20])
    def test_formula(self, k):
        assert Chisquared(k).median() == pytest.approx(k * (1 - 2 / (9 * k)) ** 3, rel=1e-15)

    def test_close_to_exact_median(self):
        assert Chisquared(20).median() == pytest.approx(stats.chi2.median(20), rel=1e-3)


class TestDelegation:
    """Chisquared(2k) behaves exactly like Gamma(k, 2)."""

    @pytest.mark.parametrize("dof", [1, 4, 9])
    def test_statistics_agree(self, dof):
        c, g = Chisquared(dof), Gamma(dof / 2, 2.0)
        xs = np.linspace(-1, 30, 50)
        np.testing.assert_array_equal(c.density(xs), g.density(xs))
        np.testing.assert_array_equal(c.distribution(xs), g.distribution(xs))
        assert c.mean() == g.mean()
        assert c.variance() == g.variance()
        assert c.skewness() == g.skewness()
        assert c.kurtosis() == g.kurtosis()
        assert c.entropy() == g.entropy()
        assert c.modes() == g.modes()

    def test_samples_agree(self):
        c, g = Chisquared(7), Gamma(3.5, 2.0)
        a = [c.sample(NumpySource(seed=9)) for _ in range(3)]
        b = [g.sample(NumpySource(seed=9)) for _ in range(3)]
        assert a == b
        np.testing.assert_array_equal(
            c.sample_n(50, NumpySource(seed=1)), g.sample_n(50, NumpySource(seed=1))
        )

    def test_sample_moments(self):
        samples = Chisquared(6).sample_n(100_000, NumpySource(seed=21))
        assert samples.mean() == pytest.approx(6.0, rel=0.02)
        assert samples.var(ddof=1) == pytest.approx(12.0, rel=0.05)
