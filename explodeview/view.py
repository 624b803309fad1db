"""
ExplodedView - the object a renderer and its control widgets talk to.

Bundles the immutable part tuple, the TimelineController and a FrameClock.
Each frame the host calls on_frame(timestamp) (or advance(elapsed)) and
draws the returned ViewSnapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

import numpy as np

from explodeview import log
from explodeview.animation.frame_clock import FrameClock
from explodeview.animation.interpolate import interpolate_all
from explodeview.animation.timeline import AnimationState, PlaybackState, TimelineController, TimelineSettings
from explodeview.assembly.backdrop import WallParameters, build_wall_backdrop
from explodeview.assembly.params import StructuralParameters
from explodeview.assembly.part import PartDescriptor
from explodeview.assembly.window_unit import build_window_unit
from explodeview.errors import ConfigurationError, ExplodeViewError


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything the presentation layer needs for one frame."""

    progress_percent: float
    is_playing: bool
    speed: float
    playback: PlaybackState
    positions: Mapping[str, np.ndarray]

    @classmethod
    def capture(cls, state: AnimationState, parts: Iterable[PartDescriptor]) -> "ViewSnapshot":
        return cls(
            progress_percent=state.percent,
            is_playing=state.is_playing,
            speed=state.speed,
            playback=state.playback,
            positions=interpolate_all(parts, state.progress),
        )


class ExplodedView:
    def __init__(
        self,
        parts: Iterable[PartDescriptor],
        controller: TimelineController | None = None,
        clock: FrameClock | None = None,
    ):
        self._parts = tuple(parts)
        self._by_id: dict[str, PartDescriptor] = {}
        for part in self._parts:
            if part.id in self._by_id:
                raise ConfigurationError(f"duplicate part id '{part.id}'")
            self._by_id[part.id] = part

        self.controller = controller or TimelineController()
        self.clock = clock or FrameClock()

    @property
    def parts(self) -> tuple[PartDescriptor, ...]:
        return self._parts

    def part(self, part_id: str) -> PartDescriptor:
        return self._by_id[part_id]

    def __len__(self) -> int:
        return len(self._parts)

    def __contains__(self, part_id: str) -> bool:
        return part_id in self._by_id

    # Frame delivery

    def on_frame(self, timestamp: float) -> ViewSnapshot:
        """Host frame notification with an absolute timestamp."""
        elapsed = self.clock.advance(timestamp)
        return self.advance(elapsed)

    def advance(self, elapsed: float) -> ViewSnapshot:
        """Host frame notification with elapsed seconds since the last one."""
        self.controller.tick(elapsed)
        return self.snapshot()

    # Controls

    def play_pause(self) -> bool:
        self.clock.restart()
        return self.controller.play_pause()

    def seek_percent(self, percent: float) -> None:
        self.controller.seek_percent(percent)

    def set_speed(self, speed: float) -> None:
        self.controller.set_speed(speed)

    def reset(self) -> None:
        self.controller.reset()

    # Readers

    def positions(self) -> dict[str, np.ndarray]:
        return interpolate_all(self._parts, self.controller.progress)

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot.capture(self.controller.state, self._parts)


def create_window_view(
    params: StructuralParameters | None = None,
    settings: TimelineSettings | None = None,
    wall: WallParameters | None = None,
    with_backdrop: bool = True,
) -> ExplodedView:
    """
    Build the window unit (and its wall) and wrap it in an ExplodedView.

    Setup errors are logged and re-raised: a misconfigured assembly is never
    displayed.
    """
    try:
        params = params or StructuralParameters()
        parts = list(build_window_unit(params))
        if with_backdrop:
            parts.extend(build_wall_backdrop(params, wall))
        view = ExplodedView(parts, TimelineController(settings))
    except ExplodeViewError as e:
        log.error(e, "Cannot set up window view")
        raise
    log.info(f"[ExplodedView] ready with {len(view)} parts")
    return view
