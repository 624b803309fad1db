"""
Per-part interpolation between exploded and assembled positions.

Pure functions: the same (part, progress) always gives the same position.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from explodeview.assembly.part import AnimationWindow, PartDescriptor
from explodeview.tween.ease import evaluate as ease_evaluate


def local_t(window: AnimationWindow, progress: float) -> float:
    """
    Part's own progress within its window, clamped to [0, 1].

    0 before the window starts, 1 after it ends.
    """
    raw = (progress - window.start) / window.span
    return max(0.0, min(1.0, raw))


def eased_t(part: PartDescriptor, progress: float) -> float:
    return ease_evaluate(part.ease, local_t(part.window, progress))


def lerp(exploded: np.ndarray, assembled: np.ndarray, t: float) -> np.ndarray:
    """Exact at both ends: t == 0 gives exploded, t == 1 gives assembled."""
    return (1.0 - t) * exploded + t * assembled


def interpolate(part: PartDescriptor, progress: float) -> np.ndarray:
    """Center of the part at global progress (0 = exploded, 1 = assembled)."""
    if part.is_static:
        return part.assembled_vec()
    return lerp(part.exploded_vec(), part.assembled_vec(), eased_t(part, progress))


def interpolate_all(parts: Iterable[PartDescriptor], progress: float) -> dict[str, np.ndarray]:
    """Positions of all parts for one progress snapshot, keyed by part id."""
    return {part.id: interpolate(part, progress) for part in parts}


def interpolate_array(parts: list[PartDescriptor] | tuple[PartDescriptor, ...], progress: float) -> np.ndarray:
    """
    Positions as an (N, 3) array in part order, for renderers that upload
    all transforms at once.
    """
    if not parts:
        return np.zeros((0, 3), dtype=np.float64)
    exploded = np.array([p.exploded for p in parts], dtype=np.float64)
    assembled = np.array([p.assembled for p in parts], dtype=np.float64)
    t = np.array([eased_t(p, progress) for p in parts], dtype=np.float64)[:, None]
    return (1.0 - t) * exploded + t * assembled
