"""Route loading from JSON files."""

import json
from pathlib import Path

from rowtrack.log import get_logger
from rowtrack.routes.route import Route, Stop

logger = get_logger(__name__)


class RouteFormatError(ValueError):
    """Raised when a route file doesn't describe a usable route."""


def parse_route(data: dict) -> Route:
    """Build a validated Route from decoded JSON.

    Args:
        data: Mapping with a "stops" list and an optional "name"

    Returns:
        The route

    Raises:
        RouteFormatError: If stops are missing, malformed or not increasing
    """
    if not isinstance(data, dict) or not isinstance(data.get("stops"), list):
        raise RouteFormatError("Route must contain a 'stops' list")

    stops = []
    for index, s in enumerate(data["stops"]):
        try:
            stop = Stop(
                name=str(s["name"]),
                lat=float(s["lat"]),
                lon=float(s["lon"]),
                cum_km=float(s["cum_km"]),
                info=s.get("info") or None,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RouteFormatError(f"Invalid stop at index {index}: {e}") from e
        stops.append(stop)

    if len(stops) < 2:
        raise RouteFormatError(f"Route needs at least 2 stops, got {len(stops)}")

    if stops[0].cum_km < 0:
        raise RouteFormatError("First stop has a negative cum_km")

    route = Route(name=str(data.get("name", "")), stops=stops)
    if not route.is_monotonic():
        raise RouteFormatError("Stop cum_km values must be strictly increasing")

    return route


def load_route_from_file(filepath: Path) -> Route:
    """Load a single route from a JSON file."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_route(data)


def load_route(filepath: Path) -> Route | None:
    """Load the route, logging instead of raising on failure.

    Returns:
        The route, or None if it couldn't be loaded
    """
    try:
        route = load_route_from_file(filepath)
    except (OSError, json.JSONDecodeError, RouteFormatError) as e:
        logger.error(f"Failed to load route from {filepath}: {e}")
        return None

    logger.info(f"Loaded route '{route.name}' with {len(route.stops)} stops, {route.total_length_km} km")
    return route


DEMO_ROUTE = {
    "name": "Österled",
    "stops": [
        {"name": "Sigtuna", "lat": 59.6173, "lon": 17.7236, "cum_km": 0,
         "info": "Viking-age town on Lake Mälaren"},
        {"name": "Birka", "lat": 59.3349, "lon": 17.5431, "cum_km": 35},
        {"name": "Stockholm", "lat": 59.3293, "lon": 18.0686, "cum_km": 65},
        {"name": "Vaxholm", "lat": 59.4024, "lon": 18.3511, "cum_km": 85},
        {"name": "Arholma", "lat": 59.8510, "lon": 19.1180, "cum_km": 150},
        {"name": "Mariehamn", "lat": 60.0973, "lon": 19.9348, "cum_km": 205,
         "info": "Crossing of the Sea of Åland"},
        {"name": "Kökar", "lat": 59.9206, "lon": 20.9111, "cum_km": 265},
        {"name": "Turku", "lat": 60.4518, "lon": 22.2666, "cum_km": 330},
    ],
}


def create_demo_route(filepath: Path) -> None:
    """Create the demo route file if it doesn't exist."""
    if filepath.exists():
        return

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(DEMO_ROUTE, f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote demo route to {filepath}")
