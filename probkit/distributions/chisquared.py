"""Chi-squared distribution as a reparameterised Gamma."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from ..core.source import Source
from ..core.types import (
    Continuous,
    Distribution,
    Entropy,
    Kurtosis,
    Mean,
    Median,
    Modes,
    Sample,
    Skewness,
    Variance,
)
from .gamma import Gamma
from .params import positive_integer

logger = logging.getLogger(__name__)


class Chisquared(
    Continuous,
    Distribution,
    Sample,
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Entropy,
    Median,
    Modes,
):
    """Chi-squared distribution with *k* degrees of freedom.

    Chi-squared(k) is Gamma(k / 2, 2). Every operation is forwarded to an
    owned :class:`Gamma` except :meth:`median`, which uses the
    Wilson-Hilferty approximation.

    Raises:
        InvalidParameter: If *k* is not a positive integer.
    """

    __slots__ = ("_gamma",)

    def __init__(self, k: int) -> None:
        k = positive_integer("k", k)
        self._gamma = Gamma(k / 2.0, 2.0)
        logger.debug("Chisquared(k=%d) backed by %r", k, self._gamma)

    @property
    def gamma(self) -> Gamma:
        """The equivalent Gamma distribution."""
        return self._gamma

    def k(self) -> int:
        """Return the degrees of freedom."""
        return round(self._gamma.k() * 2.0)

    # ---------- forwarded ----------

    def density(self, x: float | np.ndarray) -> float | np.ndarray:
        return self._gamma.density(x)

    def distribution(self, x: float | np.ndarray) -> float | np.ndarray:
        return self._gamma.distribution(x)

    def sample(self, source: Optional[Source] = None) -> float:
        return self._gamma.sample(source)

    def sample_n(self, n: int = 1, source: Optional[Source] = None) -> np.ndarray:
        return self._gamma.sample_n(n, source)

    def mean(self) -> float:
        return self._gamma.mean()

    def variance(self) -> float:
        return self._gamma.variance()

    def skewness(self) -> float:
        return self._gamma.skewness()

    def kurtosis(self) -> float:
        return self._gamma.kurtosis()

    def entropy(self) -> float:
        return self._gamma.entropy()

    def modes(self) -> List[float]:
        return self._gamma.modes()

    # ---------- own formulas ----------

    def median(self) -> float:
        """Approximate median ``k (1 - 2 / (9k))^3``."""
        k = float(self.k())
        return k * (1.0 - 2.0 / (9.0 * k)) ** 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chisquared):
            return NotImplemented
        return self._gamma == other._gamma

    def __hash__(self) -> int:
        return hash((Chisquared, self._gamma))

    def __repr__(self) -> str:
        return f"Chisquared(k={self.k()})"
