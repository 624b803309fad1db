"""Static wall behind the window unit: siding planks, joint strips, opening."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any

from explodeview.errors import ConfigurationError
from explodeview.geombase import Box
from explodeview.assembly import palette
from explodeview.assembly.params import StructuralParameters
from explodeview.assembly.part import AnimationWindow, PartDescriptor, PartRole, VisualHints

STATIC_WINDOW = AnimationWindow(0.0, 1.0)


@dataclass(frozen=True)
class WallParameters:
    width: float = 16.0
    height: float = 16.0
    plank_width: float = 0.4
    joint_gap: float = 0.02
    plank_depth: float = 0.2
    face_z: float = -0.2           # front face of the siding
    opening_margin_x: float = 0.4
    opening_margin_y: float = 0.5
    opening_depth: float = 0.01

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be a finite number, got {value!r}")
            if f.name != "face_z" and value <= 0:
                raise ConfigurationError(f"{f.name} must be a positive number, got {value!r}")
            object.__setattr__(self, f.name, float(value))

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WallParameters":
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(f"unknown wall parameters: {sorted(unknown)}")
        return cls(**data)


def build_wall_backdrop(
    params: StructuralParameters | None = None,
    wall: WallParameters | None = None,
) -> tuple[PartDescriptor, ...]:
    """
    Siding planks with recessed joint strips, plus a dark mask around the
    opening the unit protrudes from. Nothing here moves.
    """
    p = params or StructuralParameters()
    w = wall or WallParameters()

    parts: list[PartDescriptor] = []
    pitch = w.plank_width + w.joint_gap
    count = math.ceil(w.width / pitch)
    plank_z = w.face_z - w.plank_depth / 2
    strip_z = w.face_z - w.plank_depth * 3 / 4

    for i in range(count):
        x = -w.width / 2 + i * pitch
        color = palette.WALL_SIDING if i % 2 == 0 else palette.WALL_SIDING_ALT
        parts.append(_static(
            f"siding-{i}", f"Siding Plank {i + 1}",
            Box((x, 0.0, plank_z), (w.plank_width, w.height, w.plank_depth)),
            VisualHints(color, roughness=0.9),
        ))
        parts.append(_static(
            f"siding-joint-{i}", f"Siding Joint {i + 1}",
            Box((x + w.plank_width / 2 + w.joint_gap / 2, 0.0, strip_z),
                (w.joint_gap, w.height, w.plank_depth / 2)),
            VisualHints(palette.WALL_STRIP),
        ))

    parts.append(_static(
        "wall-opening", "Wall Opening",
        Box((0.0, 0.0, w.face_z + w.opening_depth / 2),
            (p.width + w.opening_margin_x, p.height + w.opening_margin_y, w.opening_depth)),
        VisualHints(palette.WALL_OPENING),
    ))
    return tuple(parts)


def _static(id: str, name: str, box: Box, hints: VisualHints) -> PartDescriptor:
    return PartDescriptor.from_box(
        id, name, box,
        exploded=box.center,
        window=STATIC_WINDOW,
        role=PartRole.BACKDROP,
        hints=hints,
    )
