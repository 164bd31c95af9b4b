"""Progress snapshot computed from the route and total distance."""

from dataclasses import dataclass

from rowtrack.routes.partition import RoutePartition, partition_route
from rowtrack.routes.progress import Segment, clamp_distance, resolve_segment
from rowtrack.routes.route import Point, Route

FINISHED_LABEL = "Finished!"
UNKNOWN_POSITION_LABEL = "Position unknown"


@dataclass(frozen=True)
class ProgressSnapshot:
    """Everything the UI needs to show progress at one moment.

    Snapshots are rebuilt from (total_km, route) on every refresh and hold no
    state between refreshes.
    """

    total_km: float
    route_length_km: float
    length_is_fallback: bool
    segment: Segment | None
    partition: RoutePartition

    @property
    def position(self) -> Point | None:
        """Get the boat's interpolated position."""
        return self.partition.current

    @property
    def is_finished(self) -> bool:
        return (
            self.segment is not None
            and self.segment.progress >= 1
        )

    @property
    def km_to_next_stop(self) -> float:
        if self.segment is None:
            return 0.0
        return max(0.0, self.segment.end.cum_km - self.total_km)

    @property
    def km_remaining(self) -> float:
        return max(0.0, self.route_length_km - self.total_km)

    @property
    def percent_complete(self) -> float:
        if self.route_length_km <= 0:
            return 0.0
        return min(100.0, self.total_km / self.route_length_km * 100)

    @property
    def segment_label(self) -> str:
        if self.segment is None:
            return UNKNOWN_POSITION_LABEL
        if self.is_finished:
            return FINISHED_LABEL
        return self.segment.label


def build_snapshot(total_km: float, route: Route | None) -> ProgressSnapshot:
    """Resolve progress along the route.

    Args:
        total_km: Cumulative distance rowed, in kilometers
        route: The challenge route (None or empty for degraded mode)

    Returns:
        ProgressSnapshot for display
    """
    if route is None:
        route = Route.empty()

    return ProgressSnapshot(
        total_km=clamp_distance(total_km),
        route_length_km=route.total_length_km,
        length_is_fallback=route.length_is_fallback,
        segment=resolve_segment(total_km, route),
        partition=partition_route(total_km, route),
    )
