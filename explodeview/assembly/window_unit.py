"""
Window unit layout generator.

Builds the parts of a box window protruding from a wall: wall rails, steel
corner members, insulation linings between the members, dark outer cladding,
an inset timber frame and a glass pane.

Coordinates: x to the right, y up, z out of the wall. The wall plane is
z = 0 and the unit occupies 0 <= z <= depth. Every box is built from face
coordinates, so parts that share a face are computed from the same number.
"""

from __future__ import annotations

from explodeview import log
from explodeview.errors import ConfigurationError, LayoutError
from explodeview.geombase import Box, X, Y, Z
from explodeview.assembly import palette
from explodeview.assembly.joints import Joint, JointKind, abut, coplanar, find_overlaps, verify_joints
from explodeview.assembly.params import StructuralParameters
from explodeview.assembly.part import AnimationWindow, PartDescriptor, PartRole, VisualHints

# (lateral, depth) multipliers of explode_lateral / explode_depth per tier.
EXPLOSION_SCALES: dict[PartRole, tuple[float, float]] = {
    PartRole.RAIL: (0.0, 0.0),
    PartRole.MEMBER: (0.0, 0.2),
    PartRole.INFILL: (0.5, 0.5),
    PartRole.FRAME: (0.025, 0.8),
    PartRole.GLAZING: (0.0, 0.9),
    PartRole.CLADDING: (1.0, 1.0),
}

# Foundational tiers settle first, the outer skin last.
RAIL_WINDOW = AnimationWindow(0.0, 0.1)
MEMBER_WINDOW = AnimationWindow(0.1, 0.4)
LINING_WINDOW = AnimationWindow(0.3, 0.5)
SIDE_LINING_WINDOW = AnimationWindow(0.35, 0.5)
FRAME_WINDOW = AnimationWindow(0.45, 0.5)
STILE_WINDOW = AnimationWindow(0.5, 0.5)
GLASS_WINDOW = AnimationWindow(0.55, 0.45)
CLADDING_WINDOW = AnimationWindow(0.6, 0.4)
SIDE_CLADDING_WINDOW = AnimationWindow(0.65, 0.35)

UP = (0.0, 1.0, 0.0)
DOWN = (0.0, -1.0, 0.0)
LEFT = (-1.0, 0.0, 0.0)
RIGHT = (1.0, 0.0, 0.0)
NOWHERE = (0.0, 0.0, 0.0)

STEEL = VisualHints(palette.STEEL_STRUCT)
INSULATION = VisualHints(palette.INSULATION)
CLADDING = VisualHints(palette.EXTERIOR_CLADDING)
TIMBER = VisualHints(palette.TIMBER_FRAME)
GLASS = VisualHints(palette.GLASS, opacity=0.3, metalness=0.9, roughness=0.05)


def exploded_position(box: Box, role: PartRole, outward, params: StructuralParameters):
    """
    Exploded center of a part: its assembled center pushed along its outward
    face direction and out of the wall, by amounts that depend on its tier.
    """
    lateral, depth = EXPLOSION_SCALES[role]
    x, y, z = (
        c + lateral * params.explode_lateral * o
        for c, o in zip(box.center, outward)
    )
    return (x, y, z + depth * params.explode_depth)


class _Builder:
    def __init__(self, params: StructuralParameters):
        self.params = params
        self.parts: list[PartDescriptor] = []

    def add(self, id, name, lo, hi, role, window, hints, outward=NOWHERE):
        box = Box.from_bounds(lo, hi)
        self.parts.append(PartDescriptor.from_box(
            id, name, box,
            exploded=exploded_position(box, role, outward, self.params),
            window=window,
            role=role,
            hints=hints,
        ))


def build_window_unit(params: StructuralParameters | None = None) -> tuple[PartDescriptor, ...]:
    """
    Generate the ordered parts of the window unit.

    Raises:
        ConfigurationError: Invalid parameters (raised by StructuralParameters).
        LayoutError: A designed joint does not meet, or parts interpenetrate.
    """
    p = params or StructuralParameters()
    b = _Builder(p)

    m = p.member
    depth = p.depth

    # Face coordinates of the structural section.
    x_out_l, x_in_l = -p.width / 2, -p.width / 2 + m
    x_in_r, x_out_r = p.width / 2 - m, p.width / 2
    y_out_b, y_in_b = -p.height / 2, -p.height / 2 + m
    y_in_t, y_out_t = p.height / 2 - m, p.height / 2

    # --- Wall rails: vertical tracks on the wall behind the side members ---
    rail_top = p.height / 2 + p.rail_overhang / 2
    for side, name, (lo_x, hi_x) in (
        ("left", "Left", (x_out_l, x_in_l)),
        ("right", "Right", (x_in_r, x_out_r)),
    ):
        b.add(f"rail-{side}", f"Wall Rail {name}",
              (lo_x, -rail_top, -p.rail_depth), (hi_x, rail_top, 0.0),
              PartRole.RAIL, RAIL_WINDOW, STEEL)

    # --- Steel corner members, full depth ---
    for corner, name, (lo_x, hi_x), (lo_y, hi_y) in (
        ("tl", "Top Left", (x_out_l, x_in_l), (y_in_t, y_out_t)),
        ("tr", "Top Right", (x_in_r, x_out_r), (y_in_t, y_out_t)),
        ("bl", "Bottom Left", (x_out_l, x_in_l), (y_out_b, y_in_b)),
        ("br", "Bottom Right", (x_in_r, x_out_r), (y_out_b, y_in_b)),
    ):
        b.add(f"beam-{corner}", f"Steel Beam {name}",
              (lo_x, lo_y, 0.0), (hi_x, hi_y, depth),
              PartRole.MEMBER, MEMBER_WINDOW, STEEL)

    # --- Insulation linings between the members ---
    # Ceiling lining: underside flush with the top members' underside.
    b.add("lining-top", "Insulation Top",
          (x_in_l, y_in_t, 0.0), (x_in_r, y_in_t + p.lining, depth),
          PartRole.INFILL, LINING_WINDOW, INSULATION, UP)
    # Sill: same cross-section as the bottom members.
    b.add("lining-sill", "Insulation Sill",
          (x_in_l, y_out_b, 0.0), (x_in_r, y_in_b, depth),
          PartRole.INFILL, LINING_WINDOW, INSULATION, DOWN)
    # Side linings: inner face flush with the members' inner face.
    b.add("lining-left", "Insulation Left",
          (x_in_l - p.lining, y_in_b, 0.0), (x_in_l, y_in_t, depth),
          PartRole.INFILL, SIDE_LINING_WINDOW, INSULATION, LEFT)
    b.add("lining-right", "Insulation Right",
          (x_in_r, y_in_b, 0.0), (x_in_r + p.lining, y_in_t, depth),
          PartRole.INFILL, SIDE_LINING_WINDOW, INSULATION, RIGHT)

    # --- Outer cladding; the side sheets cover the ends of top and bottom ---
    c = p.cladding
    b.add("clad-top", "Cladding Top",
          (x_out_l, y_out_t, 0.0), (x_out_r, y_out_t + c, depth),
          PartRole.CLADDING, CLADDING_WINDOW, CLADDING, UP)
    b.add("clad-bottom", "Cladding Bottom",
          (x_out_l, y_out_b - c, 0.0), (x_out_r, y_out_b, depth),
          PartRole.CLADDING, CLADDING_WINDOW, CLADDING, DOWN)
    b.add("clad-left", "Cladding Left",
          (x_out_l - c, y_out_b - c, 0.0), (x_out_l, y_out_t + c, depth),
          PartRole.CLADDING, SIDE_CLADDING_WINDOW, CLADDING, LEFT)
    b.add("clad-right", "Cladding Right",
          (x_out_r, y_out_b - c, 0.0), (x_out_r + c, y_out_t + c, depth),
          PartRole.CLADDING, SIDE_CLADDING_WINDOW, CLADDING, RIGHT)

    # --- Timber frame recessed in the lined tunnel ---
    f = p.frame_thickness
    fx, fy = p.frame_width / 2, p.frame_height / 2
    z_back, z_front = p.frame_recess - p.frame_depth / 2, p.frame_recess + p.frame_depth / 2
    b.add("frame-top", "Window Top",
          (-fx, fy - f, z_back), (fx, fy, z_front),
          PartRole.FRAME, FRAME_WINDOW, TIMBER, UP)
    b.add("frame-bottom", "Window Bottom",
          (-fx, -fy, z_back), (fx, -fy + f, z_front),
          PartRole.FRAME, FRAME_WINDOW, TIMBER, DOWN)
    b.add("frame-left", "Window Left",
          (-fx, -fy + f, z_back), (-fx + f, fy - f, z_front),
          PartRole.FRAME, STILE_WINDOW, TIMBER, LEFT)
    b.add("frame-right", "Window Right",
          (fx - f, -fy + f, z_back), (fx, fy - f, z_front),
          PartRole.FRAME, STILE_WINDOW, TIMBER, RIGHT)

    # --- Glass filling the frame opening ---
    g = p.glass_thickness / 2
    b.add("glass", "Glass",
          (-fx + f, -fy + f, p.frame_recess - g), (fx - f, fy - f, p.frame_recess + g),
          PartRole.GLAZING, GLASS_WINDOW, GLASS)

    parts = tuple(b.parts)
    check_layout(parts, WINDOW_UNIT_JOINTS)
    log.info(f"[window_unit] built {len(parts)} parts for {p.width} x {p.height} x {p.depth} unit")
    return parts


def check_layout(parts, joints) -> None:
    """Unique ids, designed joints flush, no interpenetration."""
    boxes = {}
    for part in parts:
        if part.id in boxes:
            raise ConfigurationError(f"duplicate part id '{part.id}'")
        boxes[part.id] = part.assembled_box

    verify_joints(joints, boxes)

    overlaps = find_overlaps(boxes)
    if overlaps:
        raise LayoutError(f"parts interpenetrate when assembled: {overlaps}")


def _mirrored(left: list[Joint]) -> list[Joint]:
    """Right-hand counterparts of left-hand joints."""
    def swap(part_id: str) -> str:
        return (part_id.replace("left", "right").replace("-tl", "-tr").replace("-bl", "-br"))

    result = []
    for j in left:
        if j.axis == X and j.kind is JointKind.ABUT:
            # Mirroring across x flips which part is on the negative side.
            result.append(Joint(swap(j.second), swap(j.first), j.axis, j.kind, j.side, j.matched))
        elif j.axis == X:
            result.append(Joint(swap(j.first), swap(j.second), j.axis, j.kind, -j.side, j.matched))
        else:
            result.append(Joint(swap(j.first), swap(j.second), j.axis, j.kind, j.side, j.matched))
    return result


_LEFT_JOINTS: list[Joint] = [
    abut("rail-left", "beam-tl", Z),
    abut("rail-left", "beam-bl", Z),
    coplanar("rail-left", "beam-tl", X, -1, matched=(X,)),
    # Linings between members.
    abut("beam-tl", "lining-top", X, matched=(Z,)),
    coplanar("lining-top", "beam-tl", Y, -1),
    abut("beam-bl", "lining-sill", X, matched=(Y, Z)),
    abut("beam-bl", "lining-left", Y, matched=(Z,)),
    abut("lining-left", "beam-tl", Y, matched=(Z,)),
    coplanar("lining-left", "beam-tl", X, 1),
    # Cladding over members and sill.
    abut("beam-tl", "clad-top", Y, matched=(Z,)),
    abut("clad-bottom", "beam-bl", Y, matched=(Z,)),
    abut("clad-left", "beam-tl", X, matched=(Z,)),
    abut("clad-left", "beam-bl", X, matched=(Z,)),
    abut("clad-left", "clad-top", X, matched=(Z,)),
    abut("clad-left", "clad-bottom", X, matched=(Z,)),
    coplanar("clad-left", "clad-top", Y, 1),
    coplanar("clad-left", "clad-bottom", Y, -1),
    # Timber frame and glass.
    abut("frame-left", "frame-top", Y, matched=(Z,)),
    abut("frame-bottom", "frame-left", Y, matched=(Z,)),
    coplanar("frame-left", "frame-top", X, -1),
    coplanar("frame-left", "frame-bottom", X, -1),
    abut("frame-left", "glass", X, matched=(Y,)),
]

WINDOW_UNIT_JOINTS: tuple[Joint, ...] = tuple(
    _LEFT_JOINTS
    + _mirrored(_LEFT_JOINTS)
    + [
        abut("clad-bottom", "lining-sill", Y, matched=(Z,)),
        abut("frame-bottom", "glass", Y),
        abut("glass", "frame-top", Y),
    ]
)


def window_unit_joints() -> list[Joint]:
    """Designed joints of the unit; the same set holds for any dimensions."""
    return list(WINDOW_UNIT_JOINTS)
