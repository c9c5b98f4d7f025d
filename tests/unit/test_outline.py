"""Tests for outline construction."""

import math

import pytest

from freehand.core.outline import (
    CAP_SNAP_DISTANCE,
    CORNER_FAN_STEPS,
    DOT_STEPS,
    END_CAP_STEPS,
    START_CAP_STEPS,
    get_stroke_outline_points,
)
from freehand.core.points import get_stroke_points
from freehand.core.vec import dist
from freehand.domain import StrokePoint


def _distance_to_segment(p, a, b) -> float:
    ax, ay = a
    bx, by = b
    dx, dy = bx - ax, by - ay
    seg2 = dx * dx + dy * dy
    if seg2 == 0:
        return dist(p, a)
    t = max(0.0, min(1.0, ((p[0] - ax) * dx + (p[1] - ay) * dy) / seg2))
    return dist(p, (ax + dx * t, ay + dy * t))


def _distance_to_polyline(p, polyline) -> float:
    return min(_distance_to_segment(p, a, b) for a, b in zip(polyline, polyline[1:]))


def _outline(points, **options):
    opts = {"streamline": 0, "last": True, **options}
    return get_stroke_outline_points(get_stroke_points(points, opts), opts)


@pytest.fixture
def horizontal_line() -> list[tuple[float, float]]:
    """Straight stroke from (0, 0) to (100, 0)."""
    return [(x * 5.0, 0.0) for x in range(21)]


class TestEmptyAndDot:
    """Tests for empty input and dot strokes."""

    def test_empty(self):
        """Test empty input gives an empty outline."""
        assert get_stroke_outline_points([]) == []

    def test_single_point_is_dot(self):
        """Test a single point becomes a circle around it."""
        outline = get_stroke_outline_points(get_stroke_points([(10, 10)]))
        assert len(outline) == DOT_STEPS
        for vertex in outline:
            assert dist(vertex, (10, 10)) == pytest.approx(8.0)

    def test_repeated_point_is_dot(self):
        """Test a stroke that never moves still gets a dot."""
        outline = get_stroke_outline_points(get_stroke_points([(3, 3)] * 5))
        assert len(outline) == DOT_STEPS
        assert all(dist(v, (3, 3)) == pytest.approx(8.0) for v in outline)

    def test_lone_stroke_point(self):
        """Test a single StrokePoint passed directly draws a dot."""
        outline = get_stroke_outline_points([StrokePoint(point=(0.0, 0.0), pressure=0.5)])
        assert len(outline) == DOT_STEPS

    def test_short_stroke_is_dot(self):
        """Test a stroke shorter than half its size collapses to a dot."""
        outline = _outline([(0, 0), (1, 0), (2, 0), (3, 0)])
        assert len(outline) == DOT_STEPS

    def test_dot_radius_floor(self):
        """Test zero-size dots still have distinct vertices."""
        outline = get_stroke_outline_points(get_stroke_points([(0, 0)]), {"size": 0})
        assert len(outline) == DOT_STEPS
        assert all(math.isfinite(x) and math.isfinite(y) for x, y in outline)


class TestStraightStroke:
    """Tests for a straight stroke with constant width."""

    def test_within_radius(self, horizontal_line):
        """Test every vertex lies within the radius of the stroke path."""
        outline = _outline(horizontal_line, thinning=0)
        assert len(outline) > 20
        for vertex in outline:
            assert _distance_to_polyline(vertex, horizontal_line) <= 8.0 + 1e-9

    def test_full_width(self, horizontal_line):
        """Test both sides reach the full radius."""
        outline = _outline(horizontal_line, thinning=0)
        assert max(y for _, y in outline) == pytest.approx(8.0)
        assert min(y for _, y in outline) == pytest.approx(-8.0)

    def test_round_caps_extend_past_ends(self, horizontal_line):
        """Test rounded caps bulge beyond the first and last points."""
        outline = _outline(horizontal_line, thinning=0)
        assert min(x for x, _ in outline) < -7.0
        assert max(x for x, _ in outline) > 107.0

    def test_flat_caps_stay_within_ends(self, horizontal_line):
        """Test flat caps do not extend past the stroke's ends."""
        outline = _outline(
            horizontal_line,
            thinning=0,
            start={"cap": False},
            end={"cap": False},
        )
        assert min(x for x, _ in outline) >= -1e-9
        assert max(x for x, _ in outline) <= 100.0 + 1e-9
        assert max(y for _, y in outline) == pytest.approx(8.0)

    def test_curve_within_radius(self):
        """Test a curved stroke stays within its radius."""
        curve = [(x * 4.0, 30 * math.sin(x / 5)) for x in range(40)]
        outline = _outline(curve, thinning=0)
        for vertex in outline:
            assert _distance_to_polyline(vertex, curve) <= 8.0 + 1e-9


class TestPressure:
    """Tests for pressure-driven width."""

    def test_recorded_pressure_sets_width(self, horizontal_line):
        """Test recorded full pressure widens the stroke."""
        points = [(x, y, 1.0) for x, y in horizontal_line]
        outline = _outline(points, thinning=0.5, simulate_pressure=False)
        assert max(abs(y) for _, y in outline) == pytest.approx(12.0)

    def test_light_pressure_narrows(self, horizontal_line):
        """Test recorded zero pressure narrows the stroke."""
        points = [(x, y, 0.0) for x, y in horizontal_line]
        outline = _outline(points, thinning=0.5, simulate_pressure=False)
        assert max(abs(y) for _, y in outline) == pytest.approx(4.0)

    def test_simulated_pressure_thins_fast_strokes(self):
        """Test widely spaced (fast) input draws thinner than dense input."""
        fast = [(x * 20.0, 0.0) for x in range(11)]
        slow = [(float(x), 0.0) for x in range(201)]

        def middle_width(outline):
            return max(abs(y) for x, y in outline if 50 <= x <= 150)

        fast_outline = _outline(fast, thinning=0.5)
        slow_outline = _outline(slow, thinning=0.5)
        assert middle_width(fast_outline) < middle_width(slow_outline)


class TestTaper:
    """Tests for tapered ends."""

    def test_tapered_ends_meet_at_points(self, horizontal_line):
        """Test tapered ends close on the first and last points."""
        outline = _outline(
            horizontal_line,
            thinning=0,
            start={"taper": 50},
            end={"taper": 50},
        )
        assert (0.0, 0.0) in outline
        assert (100.0, 0.0) in outline

    def test_taper_narrows_ends(self, horizontal_line):
        """Test the stroke is narrower near a tapered start."""
        outline = _outline(horizontal_line, thinning=0, start={"taper": 60})
        near_start = max(abs(y) for x, y in outline if x < 15)
        assert near_start < 8.0
        assert max(abs(y) for _, y in outline) == pytest.approx(8.0)

    def test_custom_taper_easing(self, horizontal_line):
        """Test a taper easing given by name is applied."""
        default = _outline(horizontal_line, thinning=0, start={"taper": 60})
        custom = _outline(horizontal_line, thinning=0, start={"taper": 60, "easing": "easeInCubic"})
        assert default != custom


class TestCorners:
    """Tests for sharp turns."""

    def test_reversal_gets_fan(self):
        """Test a full reversal is wrapped in a rounded fan."""
        path = [(x * 10.0, 0.0) for x in range(6)] + [(x * 10.0, 0.0) for x in range(4, -1, -1)]
        outline = _outline(path, thinning=0)
        assert len(outline) >= CORNER_FAN_STEPS * 2
        for x, y in outline:
            assert abs(y) <= 8.0 + 1e-9
            assert -8.0 - 1e-9 <= x <= 58.0 + 1e-9

    def test_right_angle_stays_within_radius(self):
        """Test a right-angle corner keeps every vertex near the path."""
        path = [(x * 5.0, 0.0) for x in range(11)] + [(50.0, y * 5.0) for y in range(1, 11)]
        outline = _outline(path, thinning=0)
        for vertex in outline:
            assert _distance_to_polyline(vertex, path) <= 8.0 + 1e-9


class TestSmoothing:
    """Tests for the minimum spacing of accepted outline points."""

    def test_smoothing_drops_close_points(self):
        """Test higher smoothing keeps fewer outline vertices."""
        curve = [(x * 4.0, 30 * math.sin(x / 5)) for x in range(40)]
        rough = _outline(curve, thinning=0, smoothing=0)
        smooth = _outline(curve, thinning=0, smoothing=1)
        assert len(smooth) < len(rough)


class TestWindingOrder:
    """Tests for the order of the outline's parts."""

    def test_parts_in_order(self, horizontal_line):
        """Test left chain, end cap, reversed right chain, then start cap."""
        outline = _outline(horizontal_line, thinning=0)

        # Offsets are accepted every 10 units; the first pair goes to the start cap
        side = 9
        end_cap_size = END_CAP_STEPS + 1
        left = outline[:side]
        end_cap = outline[side:side + end_cap_size]
        right = outline[side + end_cap_size:2 * side + end_cap_size]
        start_cap = outline[2 * side + end_cap_size:]

        assert left == [(x * 10.0, -8.0) for x in range(1, 10)]
        assert right == [(x * 10.0, 8.0) for x in range(9, 0, -1)]
        assert len(start_cap) == START_CAP_STEPS + 1

        for vertex in end_cap:
            assert dist(vertex, (100.0, 0.0)) == pytest.approx(8.0)
        for vertex in start_cap:
            assert dist(vertex, (0.0, 0.0)) == pytest.approx(8.0)

    def test_end_cap_turn_and_a_half(self, horizontal_line):
        """Test the rounded end cap sweeps three half turns from the left side."""
        outline = _outline(horizontal_line, thinning=0)
        end_cap = outline[9:9 + END_CAP_STEPS + 1]

        assert end_cap[0] == pytest.approx((100.0, -8.0))
        assert end_cap[-1] == pytest.approx((100.0, 8.0))
        assert max(x for x, _ in end_cap) == pytest.approx(108.0, abs=0.1)

    def test_end_cap_stops_near_right_chain(self):
        """Test the end cap arc stops once it reaches the right chain."""
        path = [(x * 5.0, 0.0) for x in range(19)] + [(91.0, 0.0)]
        outline = _outline(path, thinning=0)

        # Both chains hold x = 10 .. 90 after the start cap takes the first pair
        start_cap = outline[-(START_CAP_STEPS + 1):]
        right = outline[-(START_CAP_STEPS + 1) - 9:-(START_CAP_STEPS + 1)]
        end_cap = outline[9:-(START_CAP_STEPS + 1) - 9]

        assert right[0] == (90.0, 8.0)
        assert len(start_cap) == START_CAP_STEPS + 1
        assert len(end_cap) == 10
        assert dist(end_cap[-1], right[0]) > CAP_SNAP_DISTANCE
