"""Capability interfaces for probkit distributions.

Every statistic a distribution may offer is its own abstract base class.
A concrete distribution inherits exactly the capabilities it supports, so
``isinstance(d, Entropy)`` answers whether ``d.entropy()`` is available.
No behaviour is shared through these classes; they only fix the contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Union

import numpy as np

if TYPE_CHECKING:
    from .source import Source


class InvalidParameter(ValueError):
    """Raised when a distribution is constructed with an invalid parameter.

    This is the only failure a distribution can raise. Once constructed,
    every method is total over its domain.
    """


# ---------------------------------------------------------------------------
# Evaluation capabilities
# ---------------------------------------------------------------------------

class Continuous(ABC):
    """A distribution with a probability density function."""

    __slots__ = ()

    @abstractmethod
    def density(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Compute the probability density at x (0 outside the support)."""
        pass


class Discrete(ABC):
    """A distribution with a probability mass function."""

    __slots__ = ()

    @abstractmethod
    def mass(self, x: Union[int, np.ndarray]) -> Union[float, np.ndarray]:
        """Compute the probability mass at x (0 outside the support)."""
        pass


class Distribution(ABC):
    """A distribution with a cumulative distribution function."""

    __slots__ = ()

    @abstractmethod
    def distribution(self, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Compute the cumulative probability P(X <= x)."""
        pass


class Sample(ABC):
    """A distribution that can draw random variates from a source."""

    __slots__ = ()

    @abstractmethod
    def sample(self, source: Optional[Source] = None) -> float:
        """Draw one variate using *source* (or the active default source)."""
        pass


# ---------------------------------------------------------------------------
# Summary statistics
# ---------------------------------------------------------------------------

class Mean(ABC):
    __slots__ = ()

    @abstractmethod
    def mean(self) -> float:
        pass


class Variance(ABC):
    __slots__ = ()

    @abstractmethod
    def variance(self) -> float:
        pass


class Skewness(ABC):
    __slots__ = ()

    @abstractmethod
    def skewness(self) -> float:
        pass


class Kurtosis(ABC):
    __slots__ = ()

    @abstractmethod
    def kurtosis(self) -> float:
        """Return the excess kurtosis."""
        pass


class Entropy(ABC):
    __slots__ = ()

    @abstractmethod
    def entropy(self) -> float:
        """Return the differential (or Shannon) entropy in nats."""
        pass


class Median(ABC):
    __slots__ = ()

    @abstractmethod
    def median(self) -> float:
        pass


class Modes(ABC):
    __slots__ = ()

    @abstractmethod
    def modes(self) -> List[float]:
        """Return the modes; an empty list when there is no interior maximum."""
        pass
