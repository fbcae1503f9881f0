"""Sources of uniform randomness consumed by the samplers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class Source(ABC):
    """A sequential stream of uniformly distributed raw values.

    Sources are stateful and not thread-safe. Distributions borrow a source
    for the duration of one ``sample`` call and never keep a reference.
    """

    @abstractmethod
    def read_f64(self) -> float:
        """Return a uniform float in [0, 1)."""
        pass

    @abstractmethod
    def read_u64(self) -> int:
        """Return a uniform integer in [0, 2**64)."""
        pass


class NumpySource(Source):
    """Source backed by a :class:`numpy.random.Generator`.

    Args:
        seed: Seed passed to :func:`numpy.random.default_rng`.
        generator: An existing generator to draw from. Mutually exclusive
            with *seed*.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        generator: Optional[np.random.Generator] = None,
    ) -> None:
        if generator is not None and seed is not None:
            raise ValueError("Pass either seed or generator, not both")
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def read_f64(self) -> float:
        return float(self._rng.random())

    def read_u64(self) -> int:
        return int(self._rng.integers(0, 2**64 - 1, dtype=np.uint64, endpoint=True))

    def __repr__(self) -> str:
        return f"NumpySource({type(self._rng.bit_generator).__name__})"


def default_source() -> NumpySource:
    """Create an unseeded source drawing from fresh OS entropy."""
    return NumpySource()
