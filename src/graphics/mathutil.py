from __future__ import annotations

"""Scalar helpers shared by color construction and palette transforms."""

import math


def constrain(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def lerp(start: float, stop: float, amt: float) -> float:
    """Linear interpolation; ``amt`` outside [0, 1] extrapolates."""
    return start + (stop - start) * amt


def fract(x: float) -> float:
    """Fractional part of ``x`` in [0, 1), also for negative input."""
    return x - math.floor(x)


__all__ = ["constrain", "lerp", "fract"]
