"""
Assembly - parts of an exploded view and the generators that lay them out.

- PartDescriptor, AnimationWindow, VisualHints, PartRole - part model
- StructuralParameters - dimensions of the window unit
- build_window_unit - parametric window unit generator
- build_wall_backdrop - static wall behind the unit
- Joint, verify_joints - flush-fit verification
"""

from .part import AnimationWindow, PartDescriptor, PartRole, VisualHints
from .params import StructuralParameters
from .joints import Joint, JointKind, FLUSH_TOLERANCE, check_joint, verify_joints, find_overlaps
from .window_unit import (
    WINDOW_UNIT_JOINTS,
    build_window_unit,
    check_layout,
    exploded_position,
    window_unit_joints,
)
from .backdrop import WallParameters, build_wall_backdrop

__all__ = [
    "AnimationWindow",
    "PartDescriptor",
    "PartRole",
    "VisualHints",
    "StructuralParameters",
    "Joint",
    "JointKind",
    "FLUSH_TOLERANCE",
    "check_joint",
    "verify_joints",
    "find_overlaps",
    "WINDOW_UNIT_JOINTS",
    "build_window_unit",
    "check_layout",
    "exploded_position",
    "window_unit_joints",
    "WallParameters",
    "build_wall_backdrop",
]
