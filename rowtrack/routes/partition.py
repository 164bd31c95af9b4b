"""Split the route into completed and remaining polylines."""

from dataclasses import dataclass

from rowtrack.routes.progress import clamp_distance, resolve_position
from rowtrack.routes.route import Point, Route

# A polyline needs at least this many points to be drawn
MIN_POLYLINE_POINTS = 2


@dataclass(frozen=True)
class RoutePartition:
    """Completed and remaining coordinate sequences.

    When both are non-empty, completed[-1] == remaining[0] == current.
    """
    completed: tuple[Point, ...]
    remaining: tuple[Point, ...]
    current: Point | None = None

    @property
    def drawable_completed(self) -> bool:
        return len(self.completed) >= MIN_POLYLINE_POINTS

    @property
    def drawable_remaining(self) -> bool:
        return len(self.remaining) >= MIN_POLYLINE_POINTS


def partition_route(total_km: float, route: Route | None) -> RoutePartition:
    """Partition the route at the current position.

    Args:
        total_km: Cumulative distance in kilometers
        route: The route to partition

    Returns:
        RoutePartition whose two sequences meet at the current position
    """
    if route is None or not route.stops:
        return RoutePartition(completed=(), remaining=())

    km = clamp_distance(total_km, route)
    current = resolve_position(km, route)

    completed: list[Point] = []
    remaining: list[Point] = []

    for stop in route.stops:
        if stop.cum_km <= km:
            completed.append(stop.point)
        else:
            if not remaining and current is not None:
                # Current position starts the unfinished part of the route
                remaining.append(current)
            remaining.append(stop.point)

    # Skip when the boat sits exactly on the last completed stop
    if current is not None and completed and completed[-1] != current:
        completed.append(current)

    return RoutePartition(
        completed=tuple(completed),
        remaining=tuple(remaining),
        current=current,
    )
