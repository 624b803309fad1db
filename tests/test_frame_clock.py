"""Tests for FrameClock."""

import pytest

from explodeview.animation import FrameClock


class TestFrameClock:
    def test_first_frame_is_zero(self):
        clock = FrameClock()
        assert clock.advance(12.5) == 0.0
        assert clock.started

    def test_elapsed(self):
        clock = FrameClock()
        clock.advance(1.0)
        assert clock.advance(1.25) == pytest.approx(0.25)

    def test_backwards_clamped(self):
        clock = FrameClock()
        clock.advance(5.0)
        assert clock.advance(4.0) == 0.0
        assert clock.advance(4.5) == pytest.approx(0.5)

    def test_restart(self):
        clock = FrameClock()
        clock.advance(1.0)
        clock.restart()
        assert not clock.started
        assert clock.advance(100.0) == 0.0

    def test_milliseconds(self):
        clock = FrameClock(scale=0.001)
        clock.advance(1000.0)
        assert clock.advance(1016.0) == pytest.approx(0.016)

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            FrameClock(scale=0.0)

    def test_nan_timestamp_ignored(self):
        clock = FrameClock()
        clock.advance(1.0)
        assert clock.advance(float("nan")) == 0.0
        assert clock.advance(1.5) == pytest.approx(0.5)

    def test_nan_before_first_frame(self):
        clock = FrameClock()
        assert clock.advance(float("nan")) == 0.0
        assert not clock.started
