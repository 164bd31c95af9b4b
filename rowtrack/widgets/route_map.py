"""Route map widget drawing the route and boat position in the terminal."""

from typing import Sequence

from rich.console import RenderableType
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from rowtrack.render.renderer import (
    LINE_COMPLETED,
    LINE_REMAINING,
    MARKER_BOAT,
    MARKER_FINISH,
    MARKER_START,
    MARKER_STOP,
    draw_route,
)
from rowtrack.routes.route import Point, Route
from rowtrack.state.state import ProgressSnapshot


class MapCanvas:
    """Character-grid renderer using a flat lat/lon projection.

    The route's bounding box is stretched to fill the grid, north up.
    """

    LINE_CHARS = {
        LINE_COMPLETED: ("•", "green"),
        LINE_REMAINING: ("·", "red"),
    }

    MARKER_CHARS = {
        MARKER_START: ("S", "bold dark_green"),
        MARKER_STOP: ("o", "white"),
        MARKER_FINISH: ("F", "bold red"),
        MARKER_BOAT: ("●", "bold yellow"),
    }

    # Higher priority wins when two things land on the same cell
    PRIORITY = {
        LINE_REMAINING: 1,
        LINE_COMPLETED: 2,
        MARKER_STOP: 3,
        MARKER_START: 4,
        MARKER_FINISH: 4,
        MARKER_BOAT: 5,
    }

    def __init__(self, width: int, height: int, route: Route, margin: int = 1):
        self.width = max(width, 1)
        self.height = max(height, 1)
        self.margin = margin if min(self.width, self.height) > 2 * margin else 0
        self.texts: dict[str, str] = {}
        self._cells: dict[tuple[int, int], tuple[str, str, int]] = {}

        coords = route.coordinates()
        if coords:
            lats = [p.lat for p in coords]
            lons = [p.lon for p in coords]
            self.min_lat, self.max_lat = min(lats), max(lats)
            self.min_lon, self.max_lon = min(lons), max(lons)
        else:
            self.min_lat = self.max_lat = 0.0
            self.min_lon = self.max_lon = 0.0

    def project(self, point: Point) -> tuple[int, int]:
        """Convert a coordinate to a (column, row) cell."""
        inner_w = self.width - 1 - 2 * self.margin
        inner_h = self.height - 1 - 2 * self.margin

        lon_span = self.max_lon - self.min_lon
        lat_span = self.max_lat - self.min_lat

        if lon_span > 0:
            x = self.margin + round((point.lon - self.min_lon) / lon_span * inner_w)
        else:
            x = self.width // 2

        if lat_span > 0:
            y = self.margin + round((self.max_lat - point.lat) / lat_span * inner_h)
        else:
            y = self.height // 2

        x = max(0, min(x, self.width - 1))
        y = max(0, min(y, self.height - 1))
        return x, y

    def _plot(self, x: int, y: int, char: str, style: str, priority: int) -> None:
        existing = self._cells.get((x, y))
        if existing is None or priority >= existing[2]:
            self._cells[(x, y)] = (char, style, priority)

    def _line_cells(self, x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
        """Bresenham line between two cells, inclusive."""
        cells = []
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy

        while True:
            cells.append((x0, y0))
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy
        return cells

    def draw_polyline(self, points: Sequence[Point], kind: str) -> None:
        if len(points) < 2:
            return

        char, style = self.LINE_CHARS.get(kind, ("·", "white"))
        priority = self.PRIORITY.get(kind, 0)

        for p1, p2 in zip(points, points[1:]):
            x0, y0 = self.project(p1)
            x1, y1 = self.project(p2)
            for x, y in self._line_cells(x0, y0, x1, y1):
                self._plot(x, y, char, style, priority)

    def draw_marker(self, point: Point, kind: str, label: str | None = None) -> None:
        char, style = self.MARKER_CHARS.get(kind, ("?", "white"))
        x, y = self.project(point)
        self._plot(x, y, char, style, self.PRIORITY.get(kind, 0))

    def set_text(self, key: str, text: str) -> None:
        self.texts[key] = text

    def char_at(self, x: int, y: int) -> str:
        """Get the character drawn at a cell (space if empty)."""
        cell = self._cells.get((x, y))
        return cell[0] if cell else " "

    def to_text(self) -> Text:
        """Render the grid as styled Rich text."""
        text = Text()
        for y in range(self.height):
            for x in range(self.width):
                cell = self._cells.get((x, y))
                if cell is None:
                    text.append(" ")
                else:
                    text.append(cell[0], style=cell[1])
            if y < self.height - 1:
                text.append("\n")
        return text


class RouteMapWidget(Widget):
    """Widget that shows the route, completed part and boat position."""

    # Reactive property for the latest progress
    snapshot: reactive[ProgressSnapshot | None] = reactive(None)

    def __init__(self, route: Route | None = None, **kwargs):
        super().__init__(**kwargs)
        self.route = route or Route.empty()

    def render(self) -> RenderableType:
        """Render the map."""
        width = self.size.width
        height = self.size.height

        if width == 0 or height == 0:
            return Text("")

        if not self.route.stops:
            return Text("No route data", style="dim")

        if self.snapshot is None:
            return Text("Loading...", style="dim")

        canvas = MapCanvas(width, height, self.route)
        draw_route(canvas, self.route, self.snapshot)
        return canvas.to_text()
