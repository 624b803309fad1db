"""Headless playback of the window unit assembly.

Steps a 60 fps clock through the whole timeline and prints progress and a
few part positions, the way a renderer would consume snapshots.
"""

from __future__ import annotations

import logging

from explodeview import TimelineSettings, create_window_view, log

WATCHED = ("beam-tl", "lining-top", "frame-top", "glass", "clad-top")


def main():
    log.setup_console(logging.DEBUG)

    view = create_window_view(settings=TimelineSettings(total_duration=3.0, default_speed=1.0))
    view.controller.on_playback += lambda state: print(f"-- {state.name.lower()}")
    view.play_pause()

    frame = 0
    snapshot = view.on_frame(0.0)
    while snapshot.is_playing:
        frame += 1
        snapshot = view.on_frame(frame / 60.0)
        if frame % 30 == 0 or not snapshot.is_playing:
            positions = ", ".join(
                f"{part_id}=({p[0]:+.2f}, {p[1]:+.2f}, {p[2]:+.2f})"
                for part_id, p in ((pid, snapshot.positions[pid]) for pid in WATCHED)
            )
            print(f"{snapshot.progress_percent:6.1f}%  {positions}")


if __name__ == "__main__":
    main()
