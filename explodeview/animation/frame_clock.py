"""FrameClock - turns host frame timestamps into elapsed seconds."""

from __future__ import annotations

import math


class FrameClock:
    """
    Remembers the previous frame timestamp and returns the time since it.

    The first frame after construction or restart() has no predecessor and
    yields 0, so resuming playback after a pause never produces a jump.
    Timestamps that go backwards (or NaN) also yield 0.

    Args:
        scale: Multiplier converting host timestamps to seconds
            (0.001 for millisecond clocks).
    """

    def __init__(self, scale: float = 1.0):
        if not math.isfinite(scale) or scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.scale = scale
        self._last: float | None = None

    @property
    def started(self) -> bool:
        return self._last is not None

    def restart(self) -> None:
        """Forget the previous timestamp."""
        self._last = None

    def advance(self, timestamp: float) -> float:
        """
        Elapsed seconds since the previous call (never negative).

        A NaN timestamp yields 0 and is not remembered.
        """
        if math.isnan(timestamp):
            return 0.0
        last = self._last
        self._last = timestamp
        if last is None:
            return 0.0
        return max(timestamp - last, 0.0) * self.scale
