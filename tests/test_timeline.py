"""Tests for TimelineController."""

import pytest

from explodeview import ConfigurationError
from explodeview.animation import (
    AnimationState,
    PlaybackState,
    TimelineController,
    TimelineSettings,
    advance,
)


@pytest.fixture
def timeline():
    return TimelineController(TimelineSettings(total_duration=3.0, default_speed=1.0))


class TestInitialState:
    def test_defaults(self):
        tl = TimelineController()
        assert tl.progress == 0.0
        assert not tl.is_playing
        assert tl.speed == pytest.approx(0.8)
        assert tl.playback is PlaybackState.PAUSED
        assert tl.total_duration == pytest.approx(3.0)


class TestTick:
    def test_worked_example(self, timeline):
        timeline.play()
        timeline.tick(1.5)
        assert timeline.progress == pytest.approx(0.5)
        assert timeline.progress_percent == pytest.approx(50.0)

    def test_ignored_while_paused(self, timeline):
        assert timeline.tick(1.0) is False
        assert timeline.progress == 0.0

    def test_speed_scales_increment(self, timeline):
        timeline.set_speed(2.0)
        timeline.play()
        timeline.tick(0.75)
        assert timeline.progress == pytest.approx(0.5)

    def test_negative_elapsed_is_zero(self, timeline):
        timeline.play()
        timeline.tick(0.3)
        before = timeline.progress
        assert timeline.tick(-5.0) is True
        assert timeline.progress == before

    def test_completes_exactly_at_one(self, timeline):
        timeline.play()
        assert timeline.tick(10.0) is False
        assert timeline.progress == 1.0
        assert not timeline.is_playing
        assert timeline.playback is PlaybackState.COMPLETED

    def test_ticks_after_completion_are_noops(self, timeline):
        timeline.play()
        timeline.tick(10.0)
        timeline.tick(1.0)
        assert timeline.progress == 1.0

    def test_monotonic_and_bounded(self, timeline):
        timeline.play()
        seen = [timeline.progress]
        for elapsed in [0.1, 0.0, 0.4, -1.0, 0.25, 1.0, 0.7, 0.5, 0.5]:
            timeline.tick(elapsed)
            seen.append(timeline.progress)
        assert seen == sorted(seen)
        assert seen[-1] == 1.0

    def test_keeps_ticking_until_done(self, timeline):
        timeline.play()
        assert timeline.tick(1.0) is True


class TestSeek:
    def test_seek_pauses(self, timeline):
        timeline.play()
        timeline.seek(0.4)
        assert timeline.progress == pytest.approx(0.4)
        assert not timeline.is_playing

    def test_seek_percent(self, timeline):
        timeline.seek_percent(25)
        assert timeline.progress == pytest.approx(0.25)

    def test_out_of_range_clamps(self, timeline):
        timeline.seek_percent(150)
        assert timeline.progress == 1.0
        timeline.seek_percent(-20)
        assert timeline.progress == 0.0
        timeline.seek(3.0)
        assert timeline.progress == 1.0

    def test_idempotent(self, timeline):
        timeline.seek(0.37)
        once = timeline.state
        timeline.seek(0.37)
        assert timeline.state == once

    def test_nan_rejected(self, timeline):
        with pytest.raises(ValueError):
            timeline.seek(float("nan"))

    def test_seek_to_end_is_completed(self, timeline):
        timeline.seek(1.0)
        assert timeline.playback is PlaybackState.COMPLETED


class TestPlayPause:
    def test_toggle(self, timeline):
        assert timeline.play_pause() is True
        assert timeline.playback is PlaybackState.PLAYING
        assert timeline.play_pause() is False
        assert timeline.playback is PlaybackState.PAUSED

    def test_rewinds_when_complete(self, timeline):
        timeline.seek(1.0)
        assert timeline.play_pause() is True
        assert timeline.progress == 0.0

    def test_resume_keeps_progress(self, timeline):
        timeline.seek(0.3)
        timeline.play_pause()
        assert timeline.progress == pytest.approx(0.3)

    def test_reset(self, timeline):
        timeline.play()
        timeline.tick(1.0)
        timeline.reset()
        assert timeline.progress == 0.0
        assert not timeline.is_playing


class TestSpeed:
    @pytest.mark.parametrize("value", [0.0, -1.0, float("inf"), float("nan"), True, "fast"])
    def test_rejects_invalid(self, timeline, value):
        with pytest.raises(ConfigurationError):
            timeline.set_speed(value)
        assert timeline.speed == pytest.approx(1.0)

    def test_does_not_move_progress(self, timeline):
        timeline.seek(0.2)
        timeline.set_speed(1.7)
        assert timeline.progress == pytest.approx(0.2)
        assert timeline.speed == pytest.approx(1.7)


class TestEvents:
    def test_progress_event(self, timeline):
        values = []
        timeline.on_progress += values.append
        timeline.play()
        timeline.tick(0.3)
        timeline.tick(0.0)
        timeline.seek(0.5)
        assert values == [pytest.approx(0.1), pytest.approx(0.5)]

    def test_playback_event(self, timeline):
        states = []
        timeline.on_playback += states.append
        timeline.play()
        timeline.tick(5.0)
        timeline.play_pause()
        assert states == [PlaybackState.PLAYING, PlaybackState.COMPLETED, PlaybackState.PLAYING]

    def test_events_hold_current_values(self, timeline):
        timeline.seek(0.4)
        assert timeline.on_progress.value == pytest.approx(0.4)
        assert timeline.on_playback.value is PlaybackState.PAUSED
        timeline.play()
        assert timeline.on_playback.value is PlaybackState.PLAYING

    def test_speed_change_publishes_nothing(self, timeline):
        values, states = [], []
        timeline.on_progress += values.append
        timeline.on_playback += states.append
        timeline.set_speed(2.0)
        assert values == []
        assert states == []


class TestAdvance:
    def test_pure(self):
        state = AnimationState(progress=0.2, is_playing=True, speed=1.0)
        new = advance(state, 0.3, 3.0)
        assert state.progress == 0.2
        assert new.progress == pytest.approx(0.3)

    def test_paused_unchanged(self):
        state = AnimationState(progress=0.2)
        assert advance(state, 1.0) is state


class TestSettings:
    @pytest.mark.parametrize("kwargs", [{"total_duration": 0.0}, {"default_speed": -1.0}])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            TimelineSettings(**kwargs)

    def test_dict_roundtrip(self):
        settings = TimelineSettings(total_duration=5.0)
        assert TimelineSettings.from_dict(settings.to_dict()) == settings

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            TimelineSettings.from_dict({"duration": 5.0})
