"""Progress screen showing the route map, stats and sessions."""

import asyncio
from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Label, Static

from rowtrack.log import get_logger
from rowtrack.routes.route import Route
from rowtrack.screens.add_session import AddSessionModal
from rowtrack.sessions.session import Session, total_km
from rowtrack.sessions.session_loader import SessionLoadResult, load_sessions, save_local_entry
from rowtrack.state.state import ProgressSnapshot, build_snapshot
from rowtrack.widgets.route_map import RouteMapWidget
from rowtrack.widgets.sessions_list import SessionsList
from rowtrack.widgets.stats_panel import StatsPanel

logger = get_logger(__name__)


class HelpModal(ModalScreen):
    """Modal screen showing keyboard shortcuts."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("h", "dismiss", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
        background: transparent;
    }

    #help-dialog {
        width: 50;
        height: auto;
        border: round white;
        background: $background 60%;
        padding: 1;
    }

    #header {
        width: 100%;
        height: auto;
        content-align: center middle;
        padding-bottom: 1;
        border-bottom: solid white;
    }

    #help-content {
        width: 100%;
        height: auto;
        padding: 1 2;
    }

    #buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    Button {
        margin: 0 1;
        background: transparent;
        border: round $surface;
        color: white;
    }
    """

    def compose(self) -> ComposeResult:
        """Create the help dialog."""
        with Container(id="help-dialog"):
            yield Label("Keyboard Shortcuts", id="header")
            yield Static(self._build_help_text(), id="help-content", markup=False)
            with Horizontal(id="buttons"):
                yield Button("Close", id="close-btn")

    def on_button_pressed(self, event) -> None:
        """Handle button press."""
        self.dismiss()

    def _build_help_text(self) -> str:
        """Build the help text content."""
        return """
  r     Reload sessions
  a     Add a session on this machine
  h     Show this help
  q     Quit

Map
  S     Start
  F     Finish
  o     Stop
  ●     Your position
  •     Completed route
  ·     Remaining route
"""


class ProgressScreen(Screen):
    """Screen showing progress along the challenge route."""

    BINDINGS = [
        ("r", "reload", "Reload"),
        ("a", "add_session", "Add session"),
        ("h", "show_help", "Help"),
    ]

    CSS = """
    ProgressScreen {
        layout: vertical;
    }

    #main-container {
        width: 100%;
        height: 1fr;
    }

    #map-panel {
        width: 65%;
        height: 100%;
        border: round white;
        border-title-align: center;
        margin: 0 1;
    }

    #side-panel {
        width: 35%;
        height: 100%;
    }

    StatsPanel {
        height: auto;
        border: round white;
        padding: 0 1;
    }

    SessionsList {
        height: 1fr;
        border: round white;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        route: Route,
        sheet_url: str | None,
        sessions_path: Path,
        entries_path: Path,
        sheet_timeout_s: float = 10.0,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.route = route
        self.sheet_url = sheet_url
        self.sessions_path = sessions_path
        self.entries_path = entries_path
        self.sheet_timeout_s = sheet_timeout_s
        self.sessions: list[Session] = []
        self.snapshot: ProgressSnapshot = build_snapshot(0.0, route)

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header(show_clock=True)
        with Horizontal(id="main-container"):
            yield RouteMapWidget(route=self.route, id="map-panel")
            with Vertical(id="side-panel"):
                yield StatsPanel(id="stats-panel")
                yield SessionsList(id="sessions-list")
        yield Footer()

    def on_mount(self) -> None:
        """Set titles and load sessions."""
        map_panel = self.query_one("#map-panel", RouteMapWidget)
        map_panel.border_title = self.route.name or "Route"
        self.query_one("#stats-panel", StatsPanel).border_title = "Progress"
        self.query_one("#sessions-list", SessionsList).border_title = "Latest sessions"

        self.run_worker(self.reload_sessions(), exclusive=True)

    async def reload_sessions(self) -> None:
        """Load sessions off the event loop and refresh the display."""
        result = await asyncio.to_thread(
            load_sessions,
            self.sheet_url,
            self.sessions_path,
            self.entries_path,
            self.sheet_timeout_s,
        )
        self.apply_sessions(result)

    def apply_sessions(self, result: SessionLoadResult) -> None:
        """Recompute progress from loaded sessions and update widgets."""
        self.sessions = result.sessions
        self.snapshot = build_snapshot(total_km(self.sessions), self.route)
        logger.debug(
            f"{self.snapshot.total_km:.2f} km, {self.snapshot.percent_complete:.1f}%, "
            f"{self.snapshot.segment_label}"
        )

        self.query_one("#map-panel", RouteMapWidget).snapshot = self.snapshot
        stats = self.query_one("#stats-panel", StatsPanel)
        stats.snapshot = self.snapshot
        stats.data_source = result.source
        self.query_one("#sessions-list", SessionsList).sessions = self.sessions

        if result.error:
            self.notify(result.error, severity="error")

    def action_reload(self) -> None:
        """Reload session data."""
        self.run_worker(self.reload_sessions(), exclusive=True)
        self.notify("Reloading sessions...")

    def action_add_session(self) -> None:
        """Show the add session modal."""
        self.app.push_screen(AddSessionModal(), self.handle_new_session)

    def handle_new_session(self, session: Session | None) -> None:
        """Save a session entered in the modal.

        Args:
            session: The new session, or None if cancelled
        """
        if session is None:
            return

        try:
            save_local_entry(self.entries_path, session)
        except OSError as e:
            logger.error(f"Failed to save local entry: {e}")
            self.notify("Could not save session", severity="error")
            return

        self.notify(f"Saved {session.km:.1f} km on {session.date}")
        self.run_worker(self.reload_sessions(), exclusive=True)

    def action_show_help(self) -> None:
        """Show the help modal."""
        self.app.push_screen(HelpModal())
