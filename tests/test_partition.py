"""Tests for splitting the route into completed and remaining parts."""

import pytest

from rowtrack.routes.partition import partition_route
from rowtrack.routes.progress import resolve_position
from rowtrack.routes.route import Route


class TestPartitionRoute:

    def test_mid_segment(self, route, stops):
        partition = partition_route(15, route)
        current = resolve_position(15, route)

        assert partition.current == current
        assert partition.completed == (stops[0].point, stops[1].point, current)
        assert partition.remaining == (current, stops[2].point, stops[3].point)

    @pytest.mark.parametrize("km", [0.5, 10, 12, 25, 33.3, 49.99])
    def test_seam_is_shared(self, route, km):
        partition = partition_route(km, route)
        assert partition.completed[-1] == partition.remaining[0] == partition.current

    def test_start_has_no_duplicate_point(self, route, stops):
        partition = partition_route(0, route)

        assert partition.completed == (stops[0].point,)
        assert partition.remaining == tuple(s.point for s in stops)
        assert not partition.drawable_completed
        assert partition.drawable_remaining

    def test_exact_stop_match_has_no_zero_length_leg(self, route, stops):
        partition = partition_route(10, route)

        assert partition.completed == (stops[0].point, stops[1].point)
        assert partition.remaining == (stops[1].point, stops[2].point, stops[3].point)

    def test_overshoot(self, route, stops):
        partition = partition_route(999, route)

        assert partition.completed == tuple(s.point for s in stops)
        assert partition.remaining == ()
        assert partition.current == stops[3].point
        assert not partition.drawable_remaining

    def test_no_consecutive_duplicates(self, route):
        for km in [0, 5, 10, 25, 40, 50, 60]:
            partition = partition_route(km, route)
            for line in (partition.completed, partition.remaining):
                assert all(a != b for a, b in zip(line, line[1:]))

    def test_empty_route(self):
        partition = partition_route(10, Route.empty())
        assert partition.completed == ()
        assert partition.remaining == ()
        assert partition.current is None

    def test_unresolvable_route_is_split_without_current_point(self, stops):
        route = Route("bad", [stops[0], stops[2], stops[1]])
        partition = partition_route(12, route)

        assert partition.current is None
        assert partition.completed == (stops[0].point, stops[1].point)
        assert partition.remaining == (stops[2].point,)

    def test_idempotent(self, route):
        assert partition_route(17, route) == partition_route(17, route)
