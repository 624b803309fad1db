"""Tests for the ExplodedView facade."""

import logging

import numpy as np
import pytest

from explodeview import (
    ConfigurationError,
    LayoutError,
    ExplodedView,
    PlaybackState,
    TimelineSettings,
    create_window_view,
)
from explodeview.assembly import AnimationWindow, PartDescriptor


def simple_part(id="a"):
    return PartDescriptor(
        id=id,
        name=id,
        size=(1.0, 1.0, 1.0),
        assembled=(0.0, 0.0, 0.0),
        exploded=(0.0, 0.0, 3.0),
        window=AnimationWindow(0.0, 1.0),
    )


@pytest.fixture
def view():
    return create_window_view(settings=TimelineSettings(total_duration=3.0, default_speed=1.0))


class TestCreate:
    def test_contains_unit_and_backdrop(self, view):
        assert "glass" in view
        assert "wall-opening" in view
        assert view.part("beam-tl").name == "Steel Beam Top Left"

    def test_without_backdrop(self):
        view = create_window_view(with_backdrop=False)
        assert len(view) == 19

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ConfigurationError):
            ExplodedView([simple_part(), simple_part()])

    def test_initial_snapshot_is_exploded(self, view):
        snap = view.snapshot()
        assert snap.progress_percent == 0.0
        assert not snap.is_playing
        assert snap.playback is PlaybackState.PAUSED
        for part in view.parts:
            assert np.array_equal(snap.positions[part.id], part.exploded_vec())

    def test_setup_error_logged(self, monkeypatch, caplog):
        def broken(params):
            raise LayoutError("gap between 'a' and 'b'")

        monkeypatch.setattr("explodeview.view.build_window_unit", broken)
        with caplog.at_level(logging.ERROR, logger="explodeview"):
            with pytest.raises(LayoutError):
                create_window_view()
        assert "Cannot set up window view" in caplog.text


class TestPlayback:
    def test_frames_drive_progress(self, view):
        view.play_pause()
        view.on_frame(10.0)          # first frame after play: no jump
        snap = view.on_frame(11.5)
        assert snap.progress_percent == pytest.approx(50.0)
        assert snap.is_playing

    def test_resume_does_not_jump(self, view):
        view.play_pause()
        view.on_frame(0.0)
        view.on_frame(0.3)
        view.play_pause()
        view.play_pause()
        snap = view.on_frame(60.0)
        assert snap.progress_percent == pytest.approx(10.0)

    def test_runs_to_completion(self, view):
        view.play_pause()
        snap = view.advance(5.0)
        assert snap.playback is PlaybackState.COMPLETED
        for part in view.parts:
            assert np.array_equal(snap.positions[part.id], part.assembled_vec()), part.id

    def test_controls(self, view):
        view.seek_percent(40)
        view.set_speed(1.5)
        snap = view.snapshot()
        assert snap.progress_percent == pytest.approx(40.0)
        assert snap.speed == pytest.approx(1.5)
        view.reset()
        assert view.snapshot().progress_percent == 0.0

    def test_positions_match_snapshot(self, view):
        view.seek_percent(62)
        positions = view.positions()
        snap = view.snapshot()
        for part_id, pos in positions.items():
            assert np.array_equal(pos, snap.positions[part_id])
