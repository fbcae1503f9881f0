"""Special functions used by the gamma family.

Log-gamma and digamma come from :mod:`scipy.special`. The regularized
incomplete gamma function is evaluated here with the classic split: a
power series below ``x = a + 1`` and a modified Lentz continued fraction
above it, each of which converges fast in its own regime. Very large
shapes go to :func:`scipy.special.gammainc`.
"""

from __future__ import annotations

import logging
import math

from scipy import special

logger = logging.getLogger(__name__)

EPSILON = 2.220446049250313e-16
TINY = 1e-300
MAX_ITERATIONS = 100_000

# shapes from which ln Gamma(a) is replaced by its Stirling series
STIRLING_SHAPE = 10.0
# shapes above which P(a, x) comes from the uniform asymptotic expansion
ASYMPTOTIC_SHAPE = 1000.0

_STIRLING_COEFFICIENTS = (
    1.0 / 12.0,
    -1.0 / 360.0,
    1.0 / 1260.0,
    -1.0 / 1680.0,
    1.0 / 1188.0,
    -691.0 / 360360.0,
    1.0 / 156.0,
    -3617.0 / 122400.0,
)


def ln_gamma(x: float) -> float:
    """Natural logarithm of the absolute value of the gamma function."""
    return float(special.gammaln(x))


def digamma(x: float) -> float:
    """Logarithmic derivative of the gamma function."""
    return float(special.digamma(x))


def _stirling_remainder(a: float) -> float:
    """ln Gamma(a) minus its Stirling approximation, as an asymptotic series."""
    inverse = 1.0 / a
    inverse_squared = inverse * inverse
    power = inverse
    total = 0.0
    for coefficient in _STIRLING_COEFFICIENTS:
        total += coefficient * power
        power *= inverse_squared
    return total


def _log1pmx(t: float) -> float:
    """ln(1 + t) - t for |t| <= 0.5, summed without cancellation."""
    if t == 0.0:
        return 0.0
    power = t
    total = 0.0
    for n in range(2, 200):
        power *= -t
        term = power / n
        total += term
        if abs(term) < abs(total) * EPSILON:
            break
    return total


def _log_prefactor(a: float, x: float) -> float:
    """ln(x^a e^-x / Gamma(a)).

    For large *a* the terms ``a ln x`` and ``ln Gamma(a)`` nearly cancel, so
    the Stirling form ``sqrt(a / 2 pi) (x/a)^a e^(a-x) e^-r(a)`` is used
    instead.
    """
    if a < STIRLING_SHAPE:
        return a * math.log(x) - x - ln_gamma(a)
    t = (x - a) / a
    if abs(t) <= 0.5:
        lead = a * _log1pmx(t)
    else:
        lead = a * math.log(x / a) + (a - x)
    return 0.5 * math.log(a / (2.0 * math.pi)) + lead - _stirling_remainder(a)


def _lower_series(a: float, x: float) -> float:
    """P(a, x) by the series sum x^n / (a (a+1) ... (a+n))."""
    term = 1.0 / a
    total = term
    denominator = a
    for _ in range(MAX_ITERATIONS):
        denominator += 1.0
        term *= x / denominator
        total += term
        if abs(term) < abs(total) * EPSILON:
            break
    else:
        logger.warning("Incomplete gamma series did not converge for a=%g, x=%g", a, x)
    return total * math.exp(_log_prefactor(a, x))


def _upper_fraction(a: float, x: float) -> float:
    """Q(a, x) by the Legendre continued fraction (modified Lentz)."""
    b = x + 1.0 - a
    c = 1.0 / TINY
    d = 1.0 / b
    h = d
    for i in range(1, MAX_ITERATIONS + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < TINY:
            d = TINY
        c = b + an / c
        if abs(c) < TINY:
            c = TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < EPSILON:
            break
    else:
        logger.warning(
            "Incomplete gamma continued fraction did not converge for a=%g, x=%g", a, x
        )
    return math.exp(_log_prefactor(a, x)) * h


def inc_gamma(a: float, x: float) -> float:
    """Regularized lower incomplete gamma function P(a, x).

    Defined for ``a > 0``; returns 0 for ``x <= 0`` and 1 for ``x = inf``.
    Above ``ASYMPTOTIC_SHAPE`` the series and continued fraction need
    O(sqrt(a)) terms and accumulate rounding, so scipy's uniform
    asymptotic (Temme) evaluation is used instead.
    """
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    if a > ASYMPTOTIC_SHAPE:
        return float(special.gammainc(a, x))
    if x < a + 1.0:
        return min(_lower_series(a, x), 1.0)
    return max(1.0 - _upper_fraction(a, x), 0.0)

