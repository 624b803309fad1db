"""Tests for per-part interpolation."""

import numpy as np
import pytest

from explodeview.animation import interpolate, interpolate_all, interpolate_array, local_t
from explodeview.assembly import AnimationWindow, PartDescriptor, build_window_unit
from explodeview.tween import Ease


def make_part(start=0.0, span=1.0, exploded=(0.0, 10.0, 5.0), assembled=(1.0, 0.0, 0.0), **kwargs):
    return PartDescriptor(
        id="p",
        name="Part",
        size=(1.0, 1.0, 1.0),
        assembled=assembled,
        exploded=exploded,
        window=AnimationWindow(start, span),
        **kwargs,
    )


class TestLocalT:
    def test_before_window(self):
        assert local_t(AnimationWindow(0.3, 0.5), 0.1) == 0.0

    def test_after_window(self):
        assert local_t(AnimationWindow(0.3, 0.5), 0.9) == 1.0

    def test_inside_window(self):
        assert local_t(AnimationWindow(0.3, 0.5), 0.5) == pytest.approx(0.4)


class TestInterpolate:
    def test_endpoints_exact(self):
        part = make_part()
        assert np.array_equal(interpolate(part, 0.0), np.array(part.exploded))
        assert np.array_equal(interpolate(part, 1.0), np.array(part.assembled))

    def test_endpoints_exact_for_generated_parts(self):
        for part in build_window_unit():
            if part.window.start == 0.0:
                assert np.array_equal(interpolate(part, 0.0), part.exploded_vec()), part.id
            if part.window.end >= 1.0:
                assert np.array_equal(interpolate(part, 1.0), part.assembled_vec()), part.id

    def test_pinned_outside_window(self):
        part = make_part(start=0.3, span=0.5)
        assert np.array_equal(interpolate(part, 0.1), np.array(part.exploded))
        assert np.array_equal(interpolate(part, 0.85), np.array(part.assembled))

    def test_window_past_one_stops_short(self):
        part = make_part(start=0.6, span=0.8)
        pos = interpolate(part, 1.0)
        assert not np.allclose(pos, part.assembled)

    def test_worked_example(self):
        # Window {0.3, 0.5} at progress 0.5: local t 0.4, eased 4 * 0.4^3 = 0.256.
        part = make_part(start=0.3, span=0.5)
        expected = np.array(part.exploded) + 0.256 * (np.array(part.assembled) - np.array(part.exploded))
        assert interpolate(part, 0.5) == pytest.approx(expected)

    def test_monotonic_no_overshoot(self):
        part = make_part(start=0.2, span=0.6)
        lo = np.minimum(part.exploded, part.assembled)
        hi = np.maximum(part.exploded, part.assembled)
        previous = interpolate(part, 0.0)
        direction = np.sign(np.array(part.assembled) - np.array(part.exploded))
        for g in np.linspace(0.0, 1.0, 101):
            pos = interpolate(part, g)
            assert np.all(pos >= lo - 1e-12) and np.all(pos <= hi + 1e-12)
            assert np.all((pos - previous) * direction >= -1e-12)
            previous = pos

    def test_pure(self):
        part = make_part(start=0.1, span=0.4)
        a = interpolate(part, 0.33)
        a[0] = 999.0
        assert np.array_equal(interpolate(part, 0.33), interpolate(part, 0.33))
        assert interpolate(part, 0.33)[0] != 999.0

    def test_per_part_ease(self):
        linear = make_part(ease=Ease.LINEAR)
        assert interpolate(linear, 0.25)[1] == pytest.approx(7.5)

    def test_static_part(self):
        part = make_part(exploded=(1.0, 0.0, 0.0))
        assert np.array_equal(interpolate(part, 0.5), np.array([1.0, 0.0, 0.0]))


class TestBatch:
    def test_all_uses_one_progress(self):
        parts = build_window_unit()
        positions = interpolate_all(parts, 0.5)
        assert list(positions) == [p.id for p in parts]
        for part in parts:
            assert np.array_equal(positions[part.id], interpolate(part, 0.5))

    def test_array_matches_per_part(self):
        parts = build_window_unit()
        array = interpolate_array(parts, 0.62)
        assert array.shape == (len(parts), 3)
        for row, part in zip(array, parts):
            assert row == pytest.approx(interpolate(part, 0.62))

    def test_array_empty(self):
        assert interpolate_array([], 0.5).shape == (0, 3)
