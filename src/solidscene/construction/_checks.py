"""Argument checks shared by the geometry builders."""

from __future__ import annotations

import math
from numbers import Integral, Real


def _positive_real(name: str, value: object) -> float:
    """Return *value* as a float, rejecting non-positive or non-finite input.

    Raises:
        TypeError: If *value* is not a real number.
        ValueError: If *value* is not a finite positive number.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    f = float(value)
    if not math.isfinite(f) or f <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    return f


def _integer(name: str, value: object, *, minimum: int) -> int:
    """Return *value* as an int no smaller than *minimum*.

    Raises:
        TypeError: If *value* is not an integer (``bool`` is rejected).
        ValueError: If *value* is below *minimum*.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    i = int(value)
    if i < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {i}")
    return i
