"""Stats panel widget for displaying challenge progress."""

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from rowtrack.render.renderer import progress_texts
from rowtrack.state.state import ProgressSnapshot

PROGRESS_BAR_WIDTH = 24


def progress_bar(percent: float, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Build a text progress bar such as '██████░░░░'."""
    percent = max(0.0, min(100.0, percent))
    filled = int(round(percent / 100 * width))
    return "█" * filled + "░" * (width - filled)


def format_stats(snapshot: ProgressSnapshot, data_source: str = "") -> str:
    """Format the stats panel content."""
    texts = progress_texts(snapshot)

    lines = [
        f"Rowed: {texts['total-km']} km",
        f"To next stop: {texts['km-to-next']} km",
        f"Remaining: {texts['km-remaining']} km",
        "",
        f"Leg: {texts['current-segment']}",
        "",
        f"{progress_bar(snapshot.percent_complete)} {texts['progress-percent']}",
    ]

    if snapshot.length_is_fallback:
        lines.append("")
        lines.append(f"No route loaded - assuming {snapshot.route_length_km:g} km")

    if data_source:
        lines.append("")
        lines.append(f"Data source: {data_source}")

    return "\n".join(lines)


class StatsPanel(Widget):
    """Widget that displays challenge statistics."""

    # Reactive properties that trigger re-render
    snapshot: reactive[ProgressSnapshot | None] = reactive(None)
    data_source: reactive[str] = reactive("")

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Static(id="stats-content", markup=False)

    def on_mount(self) -> None:
        """Show any snapshot set before mounting."""
        self._refresh_content()

    def watch_snapshot(self, snapshot: ProgressSnapshot | None) -> None:
        """Called when the snapshot changes - update the display."""
        self._refresh_content()

    def watch_data_source(self, data_source: str) -> None:
        self._refresh_content()

    def _refresh_content(self) -> None:
        if self.snapshot is None or not self.is_mounted:
            return

        stats_widget = self.query_one("#stats-content", Static)
        stats_widget.update(format_stats(self.snapshot, self.data_source))
