"""Tests for probkit/sampler.py.

Covers:
- Independent: endless stream of draws
- SampleSet: mean, variance, std, quantile, len, repr
- draw: collection, argument checks, convergence
"""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from probkit.core.context import SamplingContext
from probkit.core.source import NumpySource
from probkit.distributions import Chisquared, Erlang, Gamma
from probkit.sampler import Independent, SampleSet, draw


# ------------------------------------------------------------------ #
#  Independent tests
# ------------------------------------------------------------------ #


class TestIndependent:
    """Tests for the Independent iterator."""

    def test_yields_same_as_repeated_sample(self) -> None:
        d = Gamma(2.0, 3.0)
        stream = Independent(d, NumpySource(seed=6))
        src = NumpySource(seed=6)
        expected = [d.sample(src) for _ in range(10)]
        assert list(itertools.islice(stream, 10)) == expected

    def test_is_own_iterator(self) -> None:
        stream = Independent(Gamma(1.0, 1.0), NumpySource(seed=0))
        assert iter(stream) is stream

    def test_uses_active_context(self) -> None:
        with SamplingContext(seed=12) as ctx:
            stream = Independent(Erlang(2, 1.0))
            assert stream.source is ctx.source


# ------------------------------------------------------------------ #
#  SampleSet tests
# ------------------------------------------------------------------ #


class TestSampleSet:
    """Tests for the SampleSet container."""

    def test_mean(self) -> None:
        r = SampleSet(np.array([1.0, 2.0, 3.0, 4.0, 5.0]))
        assert r.mean() == pytest.approx(3.0)

    def test_variance_and_std(self) -> None:
        data = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        r = SampleSet(data)
        assert r.variance() == pytest.approx(float(np.var(data, ddof=1)))
        assert r.std() == pytest.approx(float(np.std(data, ddof=1)))

    def test_quantile(self) -> None:
        r = SampleSet(np.arange(1.0, 101.0))
        assert r.quantile(0.5) == pytest.approx(50.5)
        assert r.quantile(0.0) == pytest.approx(1.0)
        assert r.quantile(1.0) == pytest.approx(100.0)

    def test_quantile_invalid(self) -> None:
        r = SampleSet(np.array([1.0, 2.0]))
        with pytest.raises(ValueError, match="q must be in"):
            r.quantile(-0.1)
        with pytest.raises(ValueError, match="q must be in"):
            r.quantile(1.5)

    def test_len(self) -> None:
        assert len(SampleSet(np.ones(42))) == 42

    def test_repr(self) -> None:
        text = repr(SampleSet(np.array([1.0, 2.0, 3.0])))
        assert "SampleSet" in text
        assert "n=3" in text


# ------------------------------------------------------------------ #
#  draw tests
# ------------------------------------------------------------------ #


class TestDraw:
    """Tests for the draw helper."""

    def test_length_and_dtype(self) -> None:
        result = draw(Gamma(2.0, 1.0), 500, NumpySource(seed=1))
        assert len(result) == 500
        assert result.samples.dtype == np.float64

    def test_matches_sample_n(self) -> None:
        d = Chisquared(3)
        result = draw(d, 40, NumpySource(seed=17))
        np.testing.assert_array_equal(result.samples, d.sample_n(40, NumpySource(seed=17)))

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_n_raises(self, n: int) -> None:
        with pytest.raises(ValueError, match="n must be positive"):
            draw(Gamma(1.0, 1.0), n)

    def test_convergence(self) -> None:
        k, theta = 4.0, 1.5
        result = draw(Gamma(k, theta), 100_000, NumpySource(seed=2024))
        assert result.mean() == pytest.approx(k * theta, rel=0.02)
        assert result.variance() == pytest.approx(k * theta**2, rel=0.05)
        assert result.quantile(0.5) == pytest.approx(
            float(np.median(result.samples))
        )
