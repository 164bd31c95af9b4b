"""Main application entry point."""

import argparse
from pathlib import Path

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from rowtrack.config import (
    get_local_entries_path,
    get_route_path,
    get_sessions_path,
    get_sheet_timeout_s,
    get_sheet_url,
)
from rowtrack.log import get_logger, setup_logging
from rowtrack.routes.route import Route
from rowtrack.routes.route_loader import create_demo_route, load_route
from rowtrack.screens.progress import ProgressScreen
from rowtrack.sessions.session_loader import create_demo_sessions

logger = get_logger(__name__)


class ConfirmQuitScreen(ModalScreen[bool]):
    """Modal dialog to confirm quitting the app."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("left", "navigate_left", "Left"),
        ("right", "navigate_right", "Right"),
    ]

    CSS = """
    ConfirmQuitScreen {
        align: center middle;
    }

    #dialog {
        width: 50;
        height: 9;
        border: round white;
        background: $surface;
        padding: 1 2;
    }

    #question {
        width: 100%;
        height: auto;
        content-align: center middle;
        margin-bottom: 1;
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

    Button:focus {
        border: round white;
    }
    """

    def compose(self) -> ComposeResult:
        """Create dialog widgets."""
        with Container(id="dialog"):
            yield Label("Quit rowtrack?", id="question")
            with Horizontal(id="buttons"):
                yield Button("No", id="no")
                yield Button("Yes", id="yes")

    def action_cancel(self) -> None:
        self.dismiss(False)

    def action_navigate_left(self) -> None:
        """Navigate to No button (left side)."""
        self.query_one("#no", Button).focus()

    def action_navigate_right(self) -> None:
        """Navigate to Yes button (right side)."""
        self.query_one("#yes", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press."""
        self.dismiss(event.button.id == "yes")


class RowTrack(App):
    """A Textual app tracking a rowing challenge along a route."""

    TITLE = "rowtrack"

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        route_path: Path,
        sessions_path: Path,
        entries_path: Path,
        sheet_url: str | None = None,
        sheet_timeout_s: float = 10.0,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.route_path = route_path
        self.sessions_path = sessions_path
        self.entries_path = entries_path
        self.sheet_url = sheet_url
        self.sheet_timeout_s = sheet_timeout_s

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        # Empty main screen - the progress screen is pushed on top
        yield Static("")

    def action_quit(self) -> None:
        """Override quit action to show confirmation dialog."""
        self.push_screen(ConfirmQuitScreen(), self.handle_quit_confirmation)

    def handle_quit_confirmation(self, confirmed: bool) -> None:
        """Handle the quit confirmation result."""
        if confirmed:
            self.exit()

    def on_mount(self) -> None:
        """Load the route and show the progress screen."""
        route = load_route(self.route_path)
        if route is None:
            self.notify("Could not load the route", severity="error")
            route = Route.empty()

        self.sub_title = route.name
        self.push_screen(
            ProgressScreen(
                route=route,
                sheet_url=self.sheet_url,
                sessions_path=self.sessions_path,
                entries_path=self.entries_path,
                sheet_timeout_s=self.sheet_timeout_s,
            )
        )


def main():
    """Run the application."""
    parser = argparse.ArgumentParser(description="rowtrack - Rowing challenge progress along a route")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging to rowtrack-debug.log")
    parser.add_argument("--route", type=Path, help="Route JSON file (default: from config)")
    parser.add_argument("--sessions", type=Path, help="Local sessions JSON file (default: from config)")
    parser.add_argument("--sheet-url", help="Published spreadsheet CSV URL (default: from config)")
    args = parser.parse_args()

    setup_logging(debug=args.debug)

    route_path = args.route or get_route_path()
    sessions_path = args.sessions or get_sessions_path()

    # Seed sample data on first run
    if args.route is None:
        create_demo_route(route_path)
    if args.sessions is None:
        create_demo_sessions(sessions_path)

    logger.info(f"Route file: {route_path}, sessions file: {sessions_path}")

    app = RowTrack(
        route_path=route_path,
        sessions_path=sessions_path,
        entries_path=get_local_entries_path(),
        sheet_url=args.sheet_url or get_sheet_url(),
        sheet_timeout_s=get_sheet_timeout_s(),
    )
    app.run()


if __name__ == "__main__":
    main()
