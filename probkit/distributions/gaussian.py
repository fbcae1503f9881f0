"""Standard normal variates drawn from a :class:`~probkit.core.source.Source`."""

from __future__ import annotations

import math

from ..core.source import Source


def standard_normal(source: Source) -> float:
    """Draw one N(0, 1) variate with the Marsaglia polar method.

    The method yields two independent variates per accepted pair; the
    second is discarded so nothing is carried between calls.
    """
    while True:
        u = 2.0 * source.read_f64() - 1.0
        v = 2.0 * source.read_f64() - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return u * math.sqrt(-2.0 * math.log(s) / s)
