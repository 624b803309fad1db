"""
Animation - timeline state and per-part interpolation.

- TimelineController - owns progress, play/pause, speed
- AnimationState, advance - immutable state and pure per-frame update
- interpolate, interpolate_all - part positions for a progress value
- FrameClock - host timestamps to elapsed seconds
"""

from .timeline import (
    DEFAULT_SPEED,
    DEFAULT_TOTAL_DURATION,
    AnimationState,
    PlaybackState,
    TimelineController,
    TimelineSettings,
    advance,
    clamp01,
)
from .interpolate import eased_t, interpolate, interpolate_all, interpolate_array, lerp, local_t
from .frame_clock import FrameClock

__all__ = [
    "DEFAULT_SPEED",
    "DEFAULT_TOTAL_DURATION",
    "AnimationState",
    "PlaybackState",
    "TimelineController",
    "TimelineSettings",
    "advance",
    "clamp01",
    "eased_t",
    "interpolate",
    "interpolate_all",
    "interpolate_array",
    "lerp",
    "local_t",
    "FrameClock",
]
