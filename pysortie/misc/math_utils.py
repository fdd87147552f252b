"""
Numeric helpers for database values.

Distances in the settings documents are expressed in nautical miles and
percentages as integers in [0, 100].
"""
import numpy as np
from typing import Union

Number = Union[int, float]

METERS_PER_NAUTICAL_MILE = 1852.0


def clamp(value: Number, min_value: Number, max_value: Number) -> Number:
    """
    Clamp value to [min_value, max_value], keeping its int/float type.

    Examples:
        >>> clamp(150, 0, 100)
        100
        >>> clamp(-3.5, 0.0, 1.0)
        0.0
    """
    clamped = np.clip(value, min_value, max_value)
    return int(clamped) if isinstance(value, (int, np.integer)) else float(clamped)


def clamp_min(value: Number, min_value: Number = 0) -> Number:
    """Clamp value to a lower bound only (distances can't be negative)."""
    return max(min_value, value)


def percent_to_fraction(percent: Number) -> float:
    """
    Clamp a percentage to [0, 100] and normalize it to [0.0, 1.0].

    Examples:
        >>> percent_to_fraction(150)
        1.0
        >>> percent_to_fraction(80)
        0.8
    """
    return clamp(percent, 0, 100) / 100.0


def nautical_miles_to_meters(distance_nm: Number) -> float:
    return float(distance_nm) * METERS_PER_NAUTICAL_MILE


def meters_to_nautical_miles(distance_m: Number) -> float:
    return float(distance_m) / METERS_PER_NAUTICAL_MILE
