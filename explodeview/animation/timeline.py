"""
Timeline - the single progress value driving an exploded view.

AnimationState is an immutable snapshot; TimelineController owns the current
one and replaces it on every operation. advance() is the pure per-frame
update the controller delegates to, usable directly by hosts that keep state
themselves.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum, auto
from typing import Any

from explodeview import log
from explodeview.core.event import ChangeEvent
from explodeview.errors import ConfigurationError

# Real seconds a full 0 -> 1 traversal takes at speed 1.
DEFAULT_TOTAL_DURATION: float = 3.0
DEFAULT_SPEED: float = 0.8


class PlaybackState(Enum):
    """Timeline lifecycle state."""

    PAUSED = auto()
    PLAYING = auto()
    COMPLETED = auto()   # paused at progress 1; play rewinds first


@dataclass(frozen=True)
class AnimationState:
    progress: float = 0.0
    is_playing: bool = False
    speed: float = DEFAULT_SPEED

    @property
    def playback(self) -> PlaybackState:
        if self.is_playing:
            return PlaybackState.PLAYING
        if self.progress >= 1.0:
            return PlaybackState.COMPLETED
        return PlaybackState.PAUSED

    @property
    def percent(self) -> float:
        """Progress as a 0-100 display value."""
        return self.progress * 100.0


@dataclass(frozen=True)
class TimelineSettings:
    total_duration: float = DEFAULT_TOTAL_DURATION
    default_speed: float = DEFAULT_SPEED

    def __post_init__(self):
        object.__setattr__(self, "total_duration", _positive("total_duration", self.total_duration))
        object.__setattr__(self, "default_speed", _positive("default_speed", self.default_speed))

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimelineSettings":
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(f"unknown timeline settings: {sorted(unknown)}")
        return cls(**data)


def _positive(name: str, value) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def clamp01(value: float) -> float:
    """Clamp to [0, 1]. NaN is not a position on the timeline."""
    value = float(value)
    if math.isnan(value):
        raise ValueError("progress must be a number, got NaN")
    return max(0.0, min(1.0, value))


def advance(state: AnimationState, elapsed: float, total_duration: float = DEFAULT_TOTAL_DURATION) -> AnimationState:
    """
    Advance a playing state by elapsed wall-clock seconds.

    Paused states are returned unchanged. Negative (or NaN) elapsed counts
    as zero. Reaching progress 1 stops playback.
    """
    if not state.is_playing:
        return state

    if math.isnan(elapsed) or elapsed < 0.0:
        elapsed = 0.0

    progress = min(state.progress + elapsed * state.speed / total_duration, 1.0)
    if progress >= 1.0:
        return replace(state, progress=1.0, is_playing=False)
    return replace(state, progress=progress)


class TimelineController:
    """
    Owns the AnimationState of one view.

    Single writer: all mutating calls are expected from one thread (the
    host's UI/frame loop). Readers may take `state` at any time and get a
    consistent snapshot.

    Events:
        on_progress: current progress, published to listeners on change.
        on_playback: current PlaybackState, published to listeners on change.
    """

    def __init__(self, settings: TimelineSettings | None = None):
        self.settings = settings or TimelineSettings()
        self._state = AnimationState(speed=self.settings.default_speed)
        self.on_progress: ChangeEvent[float] = ChangeEvent(self._state.progress)
        self.on_playback: ChangeEvent[PlaybackState] = ChangeEvent(self._state.playback)

    # Readers

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def progress_percent(self) -> float:
        return self._state.percent

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def speed(self) -> float:
        return self._state.speed

    @property
    def playback(self) -> PlaybackState:
        return self._state.playback

    @property
    def total_duration(self) -> float:
        return self.settings.total_duration

    # Operations

    def tick(self, elapsed: float) -> bool:
        """
        Advance by elapsed seconds of wall-clock time.

        Returns:
            True if the host should keep delivering ticks, False once paused
            or completed.
        """
        if not self._state.is_playing:
            return False
        self._commit(advance(self._state, elapsed, self.settings.total_duration))
        return self._state.is_playing

    def seek(self, value: float) -> None:
        """Jump to normalized progress (clamped to [0, 1]) and pause."""
        self._commit(replace(self._state, progress=clamp01(value), is_playing=False))

    def seek_percent(self, percent: float) -> None:
        """Jump to a 0-100 slider value and pause."""
        self.seek(float(percent) / 100.0)

    def reset(self) -> None:
        self._commit(replace(self._state, progress=0.0, is_playing=False))

    def play(self) -> None:
        if self._state.is_playing:
            return
        progress = 0.0 if self._state.progress >= 1.0 else self._state.progress
        self._commit(replace(self._state, progress=progress, is_playing=True))

    def pause(self) -> None:
        if self._state.is_playing:
            self._commit(replace(self._state, is_playing=False))

    def play_pause(self) -> bool:
        """Toggle playback, rewinding first if at the end. Returns is_playing."""
        if self._state.is_playing:
            self.pause()
        else:
            self.play()
        return self._state.is_playing

    def set_speed(self, value: float) -> None:
        """Change the speed multiplier; affects only future ticks."""
        self._commit(replace(self._state, speed=_positive("speed", value)))

    def _commit(self, new_state: AnimationState) -> None:
        old_playback = self._state.playback
        self._state = new_state

        self.on_progress.publish(new_state.progress)
        if self.on_playback.publish(new_state.playback):
            log.debug(
                f"[Timeline] {old_playback.name} -> {new_state.playback.name} "
                f"at {new_state.percent:.1f}%"
            )
