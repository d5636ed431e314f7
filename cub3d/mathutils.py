"""Angle conversions and small trigonometric helpers."""

from __future__ import annotations

import math


def degrees_to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def radians_to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180 / math.pi


def has_fraction(value: float) -> bool:
    """Return True when ``value`` is positive and not a whole number."""
    if value < 1:
        return value > 0
    return value - math.floor(value) > 0


def find_y(degrees: float, length: float) -> float:
    """Return the adjacent side, ``cos(degrees) * length``."""
    return math.cos(degrees_to_radians(degrees)) * length


def find_x(degrees: float, length: float) -> float:
    """Return the opposite side, ``sin(degrees) * length``."""
    return math.sin(degrees_to_radians(degrees)) * length