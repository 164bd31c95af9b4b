"""Route data model."""

from dataclasses import dataclass

# Challenge length shown when no route is loaded
DEFAULT_ROUTE_LENGTH_KM = 330.0


@dataclass(frozen=True)
class Point:
    """A geographic coordinate in degrees."""
    lat: float
    lon: float


@dataclass(frozen=True)
class Stop:
    """A named checkpoint on the route."""
    name: str
    lat: float
    lon: float
    cum_km: float
    info: str | None = None

    @property
    def point(self) -> Point:
        """Get the stop's coordinate."""
        return Point(self.lat, self.lon)


@dataclass(frozen=True)
class Route:
    """The challenge route: an ordered, immutable sequence of stops."""
    name: str
    stops: tuple[Stop, ...] = ()

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def empty(cls) -> "Route":
        """Create a stopless route for degraded mode."""
        return cls(name="", stops=())

    @property
    def start(self) -> Stop | None:
        """Get the first stop."""
        return self.stops[0] if self.stops else None

    @property
    def finish(self) -> Stop | None:
        """Get the last stop."""
        return self.stops[-1] if self.stops else None

    @property
    def length_is_fallback(self) -> bool:
        """True when total_length_km is the default rather than a real length."""
        return not self.stops

    @property
    def total_length_km(self) -> float:
        """Get total route length in kilometers.

        Falls back to DEFAULT_ROUTE_LENGTH_KM for a route without stops.
        """
        if not self.stops:
            return DEFAULT_ROUTE_LENGTH_KM
        return self.stops[-1].cum_km

    def is_monotonic(self) -> bool:
        """Check that cum_km strictly increases along the route."""
        return all(
            a.cum_km < b.cum_km
            for a, b in zip(self.stops, self.stops[1:])
        )

    @property
    def is_resolvable(self) -> bool:
        """True if a position along the route can be computed."""
        return len(self.stops) >= 2 and self.is_monotonic()

    def coordinates(self) -> list[Point]:
        """Get all stop coordinates in route order."""
        return [stop.point for stop in self.stops]
