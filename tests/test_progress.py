"""Tests for resolving distance to a segment and position."""

import math

import pytest

from rowtrack.routes.progress import (
    Segment,
    clamp_distance,
    interpolate,
    resolve_position,
    resolve_segment,
)
from rowtrack.routes.route import Point, Route, Stop


class TestClampDistance:

    @pytest.mark.parametrize("value", [-5, math.nan, math.inf, -math.inf, None, "abc"])
    def test_invalid_becomes_zero(self, value):
        assert clamp_distance(value) == 0.0

    def test_upper_bound_is_route_length(self, route):
        assert clamp_distance(999, route) == 50.0
        assert clamp_distance(12.5, route) == 12.5

    def test_no_upper_bound_without_route(self):
        assert clamp_distance(999) == 999.0


class TestResolveSegment:

    def test_exact_stop_match_starts_next_segment(self, route, stops):
        for i in range(len(stops) - 1):
            segment = resolve_segment(stops[i].cum_km, route)
            assert segment.start is stops[i]
            assert segment.end is stops[i + 1]
            assert segment.progress == 0

    @pytest.mark.parametrize("km, index", [(0.1, 0), (9.99, 0), (10.5, 1), (24.9, 1), (30, 2), (49.9, 2)])
    def test_between_stops(self, route, stops, km, index):
        segment = resolve_segment(km, route)
        assert segment.start is stops[index]
        assert segment.end is stops[index + 1]
        assert 0 < segment.progress < 1

    def test_example_progress_fraction(self, route, stops):
        segment = resolve_segment(15, route)
        assert segment.start is stops[1]
        assert segment.end is stops[2]
        assert segment.progress == pytest.approx(1 / 3)

    @pytest.mark.parametrize("km", [50, 50.0001, 999])
    def test_at_or_past_end_pins_final_segment(self, route, stops, km):
        segment = resolve_segment(km, route)
        assert segment.start is stops[2]
        assert segment.end is stops[3]
        assert segment.progress == 1

    def test_zero_resolves_to_first_segment(self, route, stops):
        segment = resolve_segment(0, route)
        assert segment == Segment(stops[0], stops[1], 0.0)

    @pytest.mark.parametrize("value", [-3, math.nan, math.inf])
    def test_invalid_distance_treated_as_zero(self, route, stops, value):
        segment = resolve_segment(value, route)
        assert segment.start is stops[0]
        assert segment.progress == 0

    def test_unresolvable_routes(self, stops):
        assert resolve_segment(5, None) is None
        assert resolve_segment(5, Route.empty()) is None
        assert resolve_segment(5, Route("one", stops[:1])) is None
        assert resolve_segment(5, Route("bad", [stops[0], stops[2], stops[1]])) is None

    def test_before_route_start(self):
        route = Route("late start", [Stop("a", 0, 0, 5), Stop("b", 1, 1, 15)])
        assert resolve_segment(2, route) is None
        assert resolve_segment(5, route).progress == 0

    def test_label(self, route):
        assert resolve_segment(15, route).label == "Island → Strait"


class TestInterpolate:

    def test_endpoints(self, stops):
        a, b = stops[1], stops[2]
        assert interpolate(a, b, 0) == Point(a.lat, a.lon)
        assert interpolate(a, b, 1) == Point(b.lat, b.lon)

    def test_midpoint(self, stops):
        a, b = stops[0], stops[3]
        mid = interpolate(a, b, 0.5)
        assert mid.lat == pytest.approx((a.lat + b.lat) / 2)
        assert mid.lon == pytest.approx((a.lon + b.lon) / 2)

    def test_linear_in_progress(self):
        a = Point(0.0, 0.0)
        b = Point(10.0, -20.0)
        assert interpolate(a, b, 0.25) == Point(2.5, -5.0)

    def test_resolve_position(self, route, stops):
        point = resolve_position(15, route)
        expected = interpolate(stops[1], stops[2], 1 / 3)
        assert point.lat == pytest.approx(expected.lat)
        assert point.lon == pytest.approx(expected.lon)

    def test_resolve_position_past_end_is_finish(self, route, stops):
        assert resolve_position(999, route) == stops[3].point

    def test_resolve_position_unresolvable(self):
        assert resolve_position(10, Route.empty()) is None
