"""Part descriptors - immutable description of one rigid box of an assembly."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np

from explodeview.errors import ConfigurationError
from explodeview.geombase import Box, vec3
from explodeview.geombase.vec import Vec3Tuple
from explodeview.tween.ease import Ease, parse as parse_ease


class PartRole(Enum):
    """Construction tier a part belongs to."""

    RAIL = "rail"            # wall-anchored, does not move
    MEMBER = "member"        # structural corner members
    INFILL = "infill"        # panels fitted between members
    FRAME = "frame"          # inset secondary frame
    GLAZING = "glazing"      # transparent infill pane
    CLADDING = "cladding"    # outer skin, settles last
    BACKDROP = "backdrop"    # static scenery around the assembly


@dataclass(frozen=True)
class AnimationWindow:
    """
    Sub-interval [start, start + span] of global progress during which a
    part moves. start + span may exceed 1; the part then stops short of its
    assembled position at progress 1.
    """

    start: float
    span: float

    def __post_init__(self):
        start = float(self.start)
        span = float(self.span)
        if not math.isfinite(start) or not 0.0 <= start < 1.0:
            raise ConfigurationError(f"window start must lie in [0, 1), got {self.start}")
        if not math.isfinite(span) or span <= 0.0:
            raise ConfigurationError(f"window span must be positive, got {self.span}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "span", span)

    @property
    def end(self) -> float:
        return self.start + self.span

    @property
    def reaches_end(self) -> bool:
        """True if the part is fully assembled at progress 1."""
        return self.end <= 1.0


@dataclass(frozen=True)
class VisualHints:
    """Cosmetic surface parameters; no effect on layout or timing."""

    color: str = "#808080"
    opacity: float = 1.0
    metalness: float = 0.2
    roughness: float = 0.8

    def __post_init__(self):
        for name in ("opacity", "metalness", "roughness"):
            value = float(getattr(self, name))
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must lie in [0, 1], got {value}")
            object.__setattr__(self, name, value)

    @property
    def transparent(self) -> bool:
        return self.opacity < 1.0


@dataclass(frozen=True)
class PartDescriptor:
    """
    One rigid rectangular component.

    Attributes:
        id: Unique stable identifier within the assembly.
        name: Human-readable label.
        size: Positive extents (width, height, depth).
        assembled: Center at progress 1.
        exploded: Center at progress 0.
        window: When the part moves.
        role: Construction tier.
        hints: Cosmetic material parameters.
        rotation: Fixed Euler XYZ orientation (radians), never animated.
        ease: Curve applied to the part's local progress.
    """

    id: str
    name: str
    size: Vec3Tuple
    assembled: Vec3Tuple
    exploded: Vec3Tuple
    window: AnimationWindow
    role: PartRole = PartRole.MEMBER
    hints: VisualHints = field(default_factory=VisualHints)
    rotation: Optional[Vec3Tuple] = None
    ease: Ease = Ease.IN_OUT_CUBIC

    def __post_init__(self):
        if not self.id:
            raise ConfigurationError("part id must be a non-empty string")
        try:
            size = vec3(self.size, f"{self.id}.size")
            assembled = vec3(self.assembled, f"{self.id}.assembled")
            exploded = vec3(self.exploded, f"{self.id}.exploded")
            rotation = None if self.rotation is None else vec3(self.rotation, f"{self.id}.rotation")
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        if any(extent <= 0.0 for extent in size):
            raise ConfigurationError(f"part '{self.id}' has non-positive size {size}")
        if not isinstance(self.window, AnimationWindow):
            raise ConfigurationError(f"part '{self.id}' window must be an AnimationWindow")

        object.__setattr__(self, "size", size)
        object.__setattr__(self, "assembled", assembled)
        object.__setattr__(self, "exploded", exploded)
        object.__setattr__(self, "rotation", rotation)

    @classmethod
    def from_box(
        cls,
        id: str,
        name: str,
        box: Box,
        exploded: Vec3Tuple,
        window: AnimationWindow,
        role: PartRole,
        hints: VisualHints | None = None,
        ease: Ease = Ease.IN_OUT_CUBIC,
    ) -> "PartDescriptor":
        return cls(
            id=id,
            name=name,
            size=box.size,
            assembled=box.center,
            exploded=exploded,
            window=window,
            role=role,
            hints=hints or VisualHints(),
            ease=ease,
        )

    @property
    def assembled_box(self) -> Box:
        """Volume occupied at progress 1."""
        return Box(self.assembled, self.size)

    @property
    def exploded_box(self) -> Box:
        return Box(self.exploded, self.size)

    @property
    def is_static(self) -> bool:
        """True if the part never moves."""
        return self.assembled == self.exploded

    def assembled_vec(self) -> np.ndarray:
        return np.array(self.assembled, dtype=np.float64)

    def exploded_vec(self) -> np.ndarray:
        return np.array(self.exploded, dtype=np.float64)

    # Serialization

    def serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "size": list(self.size),
            "assembled": list(self.assembled),
            "exploded": list(self.exploded),
            "window": {"start": self.window.start, "span": self.window.span},
            "role": self.role.value,
            "hints": {
                "color": self.hints.color,
                "opacity": self.hints.opacity,
                "metalness": self.hints.metalness,
                "roughness": self.hints.roughness,
            },
            "ease": self.ease.name,
        }
        if self.rotation is not None:
            data["rotation"] = list(self.rotation)
        return data

    @classmethod
    def deserialize(cls, data: dict[str, Any]) -> "PartDescriptor":
        try:
            return cls(
                id=data["id"],
                name=data.get("name", data["id"]),
                size=data["size"],
                assembled=data["assembled"],
                exploded=data["exploded"],
                window=AnimationWindow(**data["window"]),
                role=PartRole(data.get("role", PartRole.MEMBER.value)),
                hints=VisualHints(**data.get("hints", {})),
                rotation=data.get("rotation"),
                ease=parse_ease(data.get("ease", Ease.IN_OUT_CUBIC.name)),
            )
        except ConfigurationError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"invalid part data: {e!r}") from e
