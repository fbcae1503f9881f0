"""Construction-time parameter checks shared by the distributions."""

from __future__ import annotations

import math
import operator

from ..core.types import InvalidParameter


def positive_real(name: str, value) -> float:
    """Return *value* as a float, raising InvalidParameter unless finite and > 0."""
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"{name} must be a real number, got {value!r}") from exc
    if not math.isfinite(number) or number <= 0:
        raise InvalidParameter(f"{name} must be > 0, got {value}")
    return number


def positive_integer(name: str, value) -> int:
    """Return *value* as an int, raising InvalidParameter unless an integer > 0."""
    if isinstance(value, bool):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}") from exc
    if number <= 0:
        raise InvalidParameter(f"{name} must be > 0, got {value}")
    return number
