"""Resolve a cumulative distance to a position along the route."""

import math
from dataclasses import dataclass

from rowtrack.log import get_logger
from rowtrack.routes.route import Point, Route, Stop

logger = get_logger(__name__)


@dataclass(frozen=True)
class Segment:
    """The pair of consecutive stops bracketing the current distance."""
    start: Stop
    end: Stop
    progress: float

    @property
    def label(self) -> str:
        """Get a display label such as 'Birka → Stockholm'."""
        return f"{self.start.name} → {self.end.name}"

    @property
    def point(self) -> Point:
        """Get the interpolated position within the segment."""
        return interpolate(self.start, self.end, self.progress)


def clamp_distance(total_km: float, route: Route | None = None) -> float:
    """Clamp a distance to [0, route length].

    Negative, non-finite or non-numeric input is treated as 0.

    Args:
        total_km: Cumulative distance in kilometers
        route: Route whose length is the upper bound (no upper bound if None)

    Returns:
        The clamped distance
    """
    try:
        km = float(total_km)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(km) or km < 0:
        return 0.0

    if route is not None:
        km = min(km, route.total_length_km)
    return km


def resolve_segment(total_km: float, route: Route | None) -> Segment | None:
    """Find the segment containing a cumulative distance.

    Each segment covers [start.cum_km, end.cum_km). A distance at or past the
    final stop resolves to the last segment with progress 1.

    Args:
        total_km: Cumulative distance in kilometers
        route: The route to resolve against

    Returns:
        The bracketing segment, or None if the route can't be resolved
    """
    if route is None or not route.is_resolvable:
        logger.debug("Route not resolvable, no current segment")
        return None

    stops = route.stops
    km = clamp_distance(total_km, route)

    # At or past the end
    if km >= stops[-1].cum_km:
        return Segment(start=stops[-2], end=stops[-1], progress=1.0)

    for i in range(len(stops) - 1):
        s1 = stops[i]
        s2 = stops[i + 1]

        if s1.cum_km <= km < s2.cum_km:
            progress = (km - s1.cum_km) / (s2.cum_km - s1.cum_km)
            return Segment(start=s1, end=s2, progress=progress)

    # Before the first stop
    logger.debug(f"{km:.3f} km lies before route start at {stops[0].cum_km} km")
    return None


def interpolate(start: Stop | Point, end: Stop | Point, progress: float) -> Point:
    """Linearly interpolate between two coordinates.

    Latitude and longitude are blended independently; no great-circle
    correction is applied.

    Args:
        start: Coordinate at progress 0
        end: Coordinate at progress 1
        progress: Fraction between 0 and 1

    Returns:
        The interpolated point
    """
    if progress <= 0:
        return Point(start.lat, start.lon)
    if progress >= 1:
        return Point(end.lat, end.lon)

    return Point(
        lat=start.lat + (end.lat - start.lat) * progress,
        lon=start.lon + (end.lon - start.lon) * progress,
    )


def resolve_position(total_km: float, route: Route | None) -> Point | None:
    """Get the interpolated position for a cumulative distance."""
    segment = resolve_segment(total_km, route)
    if segment is None:
        return None
    return segment.point
