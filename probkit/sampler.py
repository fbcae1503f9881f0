"""Drawing many variates from a distribution.

Provides:
- Independent: an endless iterator of independent draws
- SampleSet: container for drawn samples with summary statistics
- draw: collect n draws into a SampleSet
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterator

import numpy as np

from .core.context import resolve_source
from .core.source import Source
from .core.types import Sample

logger = logging.getLogger(__name__)


class Independent(Iterator[float]):
    """Iterator yielding independent variates of *distribution* from *source*.

    The iterator never ends; bound it with :func:`itertools.islice` or
    :func:`draw`.

    Args:
        distribution: Any object with the :class:`~probkit.core.types.Sample`
            capability.
        source: Source to draw from. Defaults to the active source at
            construction time.
    """

    def __init__(self, distribution: Sample, source: Source | None = None) -> None:
        self.distribution = distribution
        self.source = resolve_source(source)

    def __iter__(self) -> Independent:
        return self

    def __next__(self) -> float:
        return self.distribution.sample(self.source)


class SampleSet:
    """Container for drawn samples with summary statistics.

    Args:
        samples: 1-D array of draws.
    """

    def __init__(self, samples: np.ndarray) -> None:
        self._samples = np.asarray(samples, dtype=np.float64)

    @property
    def samples(self) -> np.ndarray:
        """Return the raw sample array."""
        return self._samples

    def mean(self) -> float:
        """Compute the sample mean."""
        return float(np.mean(self._samples))

    def variance(self) -> float:
        """Compute the unbiased sample variance."""
        return float(np.var(self._samples, ddof=1))

    def std(self) -> float:
        """Compute the sample standard deviation."""
        return float(np.std(self._samples, ddof=1))

    def quantile(self, q: float) -> float:
        """Compute the *q*-th quantile (0 ≤ q ≤ 1).

        Args:
            q: Quantile to compute.

        Returns:
            The quantile value.

        Raises:
            ValueError: If *q* is outside [0, 1].
        """
        if not 0.0 <= q <= 1.0:
            raise ValueError(f"q must be in [0, 1], got {q}")
        return float(np.quantile(self._samples, q))

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return (
            f"SampleSet(n={len(self)}, "
            f"mean={self.mean():.6g}, std={self.std():.6g})"
        )


def draw(distribution: Sample, n: int, source: Source | None = None) -> SampleSet:
    """Draw *n* independent variates of *distribution*.

    Args:
        distribution: The distribution to sample.
        n: Number of draws.
        source: Source to draw from; defaults to the active source.

    Returns:
        A :class:`SampleSet` holding the draws in order.

    Raises:
        ValueError: If *n* is not positive.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    stream = Independent(distribution, source)
    samples = np.fromiter(itertools.islice(stream, n), dtype=np.float64, count=n)
    logger.debug("Drew %d samples from %r", n, distribution)
    return SampleSet(samples)
