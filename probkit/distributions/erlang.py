"""Erlang distribution as a reparameterised Gamma."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from ..core.source import Source
from ..core.types import (
    Continuous,
    Distribution,
    Entropy,
    InvalidParameter,
    Kurtosis,
    Mean,
    Modes,
    Sample,
    Skewness,
    Variance,
)
from .gamma import Gamma
from .params import positive_integer, positive_real

logger = logging.getLogger(__name__)


class Erlang(
    Continuous,
    Distribution,
    Sample,
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Entropy,
    Modes,
):
    """Erlang distribution with integer shape *k* and rate *l*.

    Erlang(k, l) is Gamma(k, 1 / l); every operation is forwarded to the
    owned :class:`Gamma`.

    Raises:
        InvalidParameter: If *k* is not a positive integer or *l* is not a
            finite positive number whose reciprocal is also finite.
    """

    __slots__ = ("_gamma",)

    def __init__(self, k: int, l: float) -> None:  # noqa: E741
        k = positive_integer("k", k)
        l = positive_real("l", l)  # noqa: E741
        theta = 1.0 / l
        if not math.isfinite(theta):
            raise InvalidParameter(f"l must have a finite reciprocal, got {l}")
        self._gamma = Gamma(float(k), theta)
        logger.debug("Erlang(k=%d, l=%g) backed by %r", k, l, self._gamma)

    @property
    def gamma(self) -> Gamma:
        """The equivalent Gamma distribution."""
        return self._gamma

    def k(self) -> int:
        """Return the shape parameter."""
        return round(self._gamma.k())

    def l(self) -> float:  # noqa: E743
        """Return the rate parameter."""
        return 1.0 / self._gamma.theta()

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

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Erlang):
            return NotImplemented
        return self._gamma == other._gamma

    def __hash__(self) -> int:
        return hash((Erlang, self._gamma))

    def __repr__(self) -> str:
        return f"Erlang(k={self.k()}, l={self.l()})"
