"""Structural parameters of the window unit."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any

from explodeview.errors import ConfigurationError


@dataclass(frozen=True)
class StructuralParameters:
    """
    Dimensions (metres) the window-unit layout is derived from.

    The first six are the primary structure; the rest are secondary
    thicknesses of linings, cladding and the timber frame.
    """

    width: float = 2.8
    height: float = 1.9
    depth: float = 0.8
    member: float = 0.14
    explode_depth: float = 5.0
    explode_lateral: float = 2.5

    rail_overhang: float = 0.6
    rail_depth: float = 0.1
    lining: float = 0.05
    cladding: float = 0.03
    frame_thickness: float = 0.12
    frame_depth: float = 0.15
    frame_recess: float = 0.3
    frame_clearance: float = 0.1
    glass_thickness: float = 0.02

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{f.name} must be a positive number, got {value!r}")
            object.__setattr__(self, f.name, float(value))

        if self.inner_width <= 0 or self.inner_height <= 0:
            raise ConfigurationError(
                f"members of {self.member} leave no opening in {self.width} x {self.height}"
            )
        if self.lining >= self.member:
            raise ConfigurationError("lining must be thinner than the structural member")
        if self.frame_width <= 2 * self.frame_thickness or self.frame_height <= 2 * self.frame_thickness:
            raise ConfigurationError("timber frame does not fit inside the opening")
        if self.frame_recess - self.frame_depth / 2 < 0 or self.frame_recess + self.frame_depth / 2 > self.depth:
            raise ConfigurationError("timber frame must lie within the unit depth")
        if self.glass_thickness > self.frame_depth:
            raise ConfigurationError("glass is thicker than the frame")

    # Derived dimensions

    @property
    def inner_width(self) -> float:
        """Clear span between the left and right members."""
        return self.width - 2 * self.member

    @property
    def inner_height(self) -> float:
        """Clear span between the top and bottom members."""
        return self.height - 2 * self.member

    @property
    def frame_width(self) -> float:
        return self.inner_width - self.frame_clearance

    @property
    def frame_height(self) -> float:
        return self.inner_height - self.frame_clearance

    # Serialization

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StructuralParameters":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"unknown structural parameters: {sorted(unknown)}")
        return cls(**data)
