"""Renderer interface and the drawing of route progress onto it."""

from typing import Protocol, Sequence

from rowtrack.routes.route import Point, Route, Stop
from rowtrack.state.state import ProgressSnapshot

# Marker kinds
MARKER_START = "start"
MARKER_STOP = "stop"
MARKER_FINISH = "finish"
MARKER_BOAT = "boat"

# Polyline kinds
LINE_COMPLETED = "completed"
LINE_REMAINING = "remaining"


class Renderer(Protocol):
    """Drawing surface for route progress."""

    def draw_marker(self, point: Point, kind: str, label: str | None = None) -> None:
        ...

    def draw_polyline(self, points: Sequence[Point], kind: str) -> None:
        ...

    def set_text(self, key: str, text: str) -> None:
        ...


def stop_label(stop: Stop, is_start: bool, is_finish: bool) -> str:
    """Build the popup text for a stop marker."""
    lines = [stop.name, f"{stop.cum_km:g} km from start"]
    if is_start:
        lines.append("(Start)")
    if is_finish:
        lines.append("(Finish)")
    if stop.info:
        lines.append(stop.info)
    return "\n".join(lines)


def draw_route(renderer: Renderer, route: Route, snapshot: ProgressSnapshot) -> None:
    """Draw route lines, stop markers and the boat position.

    Lines with fewer than two points are skipped.
    """
    partition = snapshot.partition

    if partition.drawable_completed:
        renderer.draw_polyline(partition.completed, LINE_COMPLETED)
    if partition.drawable_remaining:
        renderer.draw_polyline(partition.remaining, LINE_REMAINING)

    last = len(route.stops) - 1
    for i, stop in enumerate(route.stops):
        is_start = i == 0
        is_finish = i == last
        if is_start:
            kind = MARKER_START
        elif is_finish:
            kind = MARKER_FINISH
        else:
            kind = MARKER_STOP
        renderer.draw_marker(stop.point, kind, stop_label(stop, is_start, is_finish))

    # Boat goes last so it's drawn on top
    if snapshot.position is not None:
        renderer.draw_marker(snapshot.position, MARKER_BOAT, "Your position")


def progress_texts(snapshot: ProgressSnapshot) -> dict[str, str]:
    """Format the progress figures shown alongside the map."""
    return {
        "total-km": f"{snapshot.total_km:.1f}",
        "km-to-next": f"{snapshot.km_to_next_stop:.1f}",
        "km-remaining": f"{snapshot.km_remaining:.1f}",
        "current-segment": snapshot.segment_label,
        "progress-percent": f"{snapshot.percent_complete:.1f}%",
    }


def render_progress(renderer: Renderer, route: Route, snapshot: ProgressSnapshot) -> None:
    """Draw the route and set every progress text on a renderer."""
    draw_route(renderer, route, snapshot)
    for key, text in progress_texts(snapshot).items():
        renderer.set_text(key, text)
