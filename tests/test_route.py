"""Tests for the route model and route loading."""

import json

import pytest

from rowtrack.routes.route import DEFAULT_ROUTE_LENGTH_KM, Point, Route, Stop
from rowtrack.routes.route_loader import (
    DEMO_ROUTE,
    RouteFormatError,
    create_demo_route,
    load_route,
    load_route_from_file,
    parse_route,
)


class TestRoute:

    def test_total_length_is_last_cum_km(self, route):
        assert route.total_length_km == 50.0
        assert route.length_is_fallback is False

    def test_empty_route_uses_fallback_length(self):
        route = Route.empty()
        assert route.total_length_km == DEFAULT_ROUTE_LENGTH_KM
        assert route.length_is_fallback is True
        assert route.start is None
        assert route.finish is None

    def test_stops_stored_as_tuple(self, stops):
        route = Route(name="r", stops=stops)
        assert isinstance(route.stops, tuple)
        assert route.stops[0] is stops[0]

    def test_resolvable_needs_two_monotonic_stops(self, stops):
        assert Route("r", stops).is_resolvable
        assert not Route("r", stops[:1]).is_resolvable
        assert not Route("r", [stops[0], stops[2], stops[1]]).is_resolvable

    def test_equal_cum_km_is_not_monotonic(self):
        route = Route("r", [Stop("a", 0, 0, 0), Stop("b", 1, 1, 5), Stop("c", 2, 2, 5)])
        assert not route.is_monotonic()

    def test_coordinates(self, route, stops):
        assert route.coordinates() == [Point(s.lat, s.lon) for s in stops]
        assert route.start is stops[0]
        assert route.finish is stops[-1]


class TestRouteLoader:

    def test_parse_route(self):
        route = parse_route(DEMO_ROUTE)
        assert route.name == "Österled"
        assert route.total_length_km == 330
        assert route.stops[0].info

    def test_missing_stops(self):
        with pytest.raises(RouteFormatError):
            parse_route({"name": "x"})

    def test_too_few_stops(self):
        with pytest.raises(RouteFormatError):
            parse_route({"stops": [{"name": "a", "lat": 0, "lon": 0, "cum_km": 0}]})

    def test_non_increasing_cum_km(self):
        data = {"stops": [
            {"name": "a", "lat": 0, "lon": 0, "cum_km": 0},
            {"name": "b", "lat": 1, "lon": 1, "cum_km": 20},
            {"name": "c", "lat": 2, "lon": 2, "cum_km": 10},
        ]}
        with pytest.raises(RouteFormatError):
            parse_route(data)

    def test_malformed_stop(self):
        data = {"stops": [
            {"name": "a", "lat": 0, "lon": 0, "cum_km": 0},
            {"name": "b", "lat": "north", "lon": 1, "cum_km": 20},
        ]}
        with pytest.raises(RouteFormatError, match="index 1"):
            parse_route(data)

    def test_demo_route_roundtrip_on_disk(self, tmp_path):
        path = tmp_path / "route.json"
        create_demo_route(path)
        assert load_route_from_file(path) == parse_route(DEMO_ROUTE)

    def test_create_demo_route_keeps_existing_file(self, tmp_path):
        path = tmp_path / "route.json"
        path.write_text("{}")
        create_demo_route(path)
        assert path.read_text() == "{}"

    def test_load_route_returns_none_on_failure(self, tmp_path):
        assert load_route(tmp_path / "missing.json") is None

        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        assert load_route(bad) is None

        invalid = tmp_path / "invalid.json"
        invalid.write_text(json.dumps({"stops": []}))
        assert load_route(invalid) is None
