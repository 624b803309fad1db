"""Box - immutable axis-aligned rectangular volume."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .vec import AXIS_NAMES, Vec3Tuple, vec3


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned box given by its center and full extents.

    Layout code usually builds boxes from face coordinates with from_bounds(),
    so that two parts sharing a face are computed from the same number.
    """

    center: Vec3Tuple
    size: Vec3Tuple

    def __post_init__(self):
        object.__setattr__(self, "center", vec3(self.center, "center"))
        object.__setattr__(self, "size", vec3(self.size, "size"))
        for axis, extent in enumerate(self.size):
            if extent <= 0.0:
                raise ValueError(
                    f"box extent along {AXIS_NAMES[axis]} must be positive, got {extent}"
                )

    @classmethod
    def from_bounds(cls, lo: Sequence[float], hi: Sequence[float]) -> "Box":
        """Build from min and max corners."""
        lo = vec3(lo, "lo")
        hi = vec3(hi, "hi")
        center = tuple((a + b) / 2.0 for a, b in zip(lo, hi))
        size = tuple(b - a for a, b in zip(lo, hi))
        return cls(center, size)

    def lo(self, axis: int) -> float:
        """Coordinate of the face on the negative side of axis."""
        return self.center[axis] - self.size[axis] / 2.0

    def hi(self, axis: int) -> float:
        """Coordinate of the face on the positive side of axis."""
        return self.center[axis] + self.size[axis] / 2.0

    def interval(self, axis: int) -> tuple[float, float]:
        return self.lo(axis), self.hi(axis)

    @property
    def min_corner(self) -> np.ndarray:
        return np.array([self.lo(a) for a in range(3)], dtype=np.float64)

    @property
    def max_corner(self) -> np.ndarray:
        return np.array([self.hi(a) for a in range(3)], dtype=np.float64)

    def moved_to(self, center: Sequence[float]) -> "Box":
        return Box(tuple(center), self.size)

    def overlap(self, other: "Box", axis: int) -> float:
        """Length of the common interval along axis (negative when apart)."""
        return min(self.hi(axis), other.hi(axis)) - max(self.lo(axis), other.lo(axis))

    def intersects(self, other: "Box", eps: float = 0.0) -> bool:
        """True if the interiors overlap by more than eps on every axis."""
        return all(self.overlap(other, axis) > eps for axis in range(3))
