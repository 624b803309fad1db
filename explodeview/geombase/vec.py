"""Small helpers for 3-component coordinates stored as tuples."""

from __future__ import annotations

import math
from typing import Iterable

X, Y, Z = 0, 1, 2
AXIS_NAMES = ("x", "y", "z")

Vec3Tuple = tuple[float, float, float]


def vec3(values: Iterable[float], name: str = "vector") -> Vec3Tuple:
    """
    Convert any 3-element iterable (tuple, list, numpy array) to a float tuple.

    Raises ValueError for wrong length or non-finite components.
    """
    items = tuple(float(v) for v in values)
    if len(items) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(items)}")
    if not all(math.isfinite(v) for v in items):
        raise ValueError(f"{name} must be finite, got {items}")
    return items
