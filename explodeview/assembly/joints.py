"""
Flush-fit verification.

A Joint declares that two parts of a layout are designed to meet. The
verifier checks the declaration against the assembled boxes, so a layout
change that opens a seam or makes parts overlap fails at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

from explodeview import log
from explodeview.errors import FlushFitError
from explodeview.geombase import AXIS_NAMES, Box

# Layout coordinates are sums of a handful of decimals; a real seam is
# orders of magnitude wider than the rounding error.
FLUSH_TOLERANCE = 1e-9


class JointKind(Enum):
    ABUT = "abut"          # first's +axis face touches second's -axis face
    COPLANAR = "coplanar"  # both parts' faces on `side` lie in one plane


@dataclass(frozen=True)
class Joint:
    """
    Designed contact between two parts.

    Attributes:
        first, second: Part ids.
        axis: Face normal axis (0, 1, 2).
        kind: ABUT or COPLANAR.
        side: For COPLANAR, -1 for the min faces, +1 for the max faces.
        matched: Axes along which both parts must have identical extents.
    """

    first: str
    second: str
    axis: int
    kind: JointKind = JointKind.ABUT
    side: int = 1
    matched: tuple[int, ...] = ()

    def __str__(self) -> str:
        axis = AXIS_NAMES[self.axis]
        if self.kind is JointKind.ABUT:
            return f"{self.first} |{axis}| {self.second}"
        face = "max" if self.side > 0 else "min"
        return f"{self.first} ={axis}.{face}= {self.second}"


def abut(first: str, second: str, axis: int, matched: Iterable[int] = ()) -> Joint:
    return Joint(first, second, axis, JointKind.ABUT, 1, tuple(matched))


def coplanar(first: str, second: str, axis: int, side: int, matched: Iterable[int] = ()) -> Joint:
    return Joint(first, second, axis, JointKind.COPLANAR, side, tuple(matched))


def _close(a: float, b: float) -> bool:
    return abs(a - b) <= FLUSH_TOLERANCE


def check_joint(joint: Joint, boxes: Mapping[str, Box]) -> None:
    """Raise FlushFitError unless the joint holds for the given boxes."""
    try:
        a = boxes[joint.first]
        b = boxes[joint.second]
    except KeyError as e:
        raise FlushFitError(joint, f"unknown part {e.args[0]!r}") from None

    axis = joint.axis
    if joint.kind is JointKind.ABUT:
        if not _close(a.hi(axis), b.lo(axis)):
            gap = b.lo(axis) - a.hi(axis)
            what = "gap" if gap > 0 else "overlap"
            raise FlushFitError(joint, f"{what} of {abs(gap):.6g} along {AXIS_NAMES[axis]}")
        # Faces that touch must also share area, otherwise they only meet at an edge.
        for other in range(3):
            if other != axis and a.overlap(b, other) <= FLUSH_TOLERANCE:
                raise FlushFitError(joint, f"faces do not overlap along {AXIS_NAMES[other]}")
    else:
        face_a = a.hi(axis) if joint.side > 0 else a.lo(axis)
        face_b = b.hi(axis) if joint.side > 0 else b.lo(axis)
        if not _close(face_a, face_b):
            raise FlushFitError(
                joint, f"faces differ by {abs(face_a - face_b):.6g} along {AXIS_NAMES[axis]}"
            )

    for other in joint.matched:
        lo_a, hi_a = a.interval(other)
        lo_b, hi_b = b.interval(other)
        if not (_close(lo_a, lo_b) and _close(hi_a, hi_b)):
            raise FlushFitError(
                joint,
                f"extents along {AXIS_NAMES[other]} differ: "
                f"[{lo_a:.6g}, {hi_a:.6g}] vs [{lo_b:.6g}, {hi_b:.6g}]",
            )


def verify_joints(joints: Iterable[Joint], boxes: Mapping[str, Box]) -> int:
    """Check every joint; returns the number checked."""
    count = 0
    for joint in joints:
        check_joint(joint, boxes)
        count += 1
    log.debug(f"[joints] verified {count} flush joints")
    return count


def find_overlaps(boxes: Mapping[str, Box]) -> list[tuple[str, str]]:
    """Pairs of parts whose assembled volumes interpenetrate."""
    items = list(boxes.items())
    result = []
    for i, (id_a, box_a) in enumerate(items):
        for id_b, box_b in items[i + 1:]:
            if box_a.intersects(box_b, FLUSH_TOLERANCE):
                result.append((id_a, id_b))
    return result
