"""Modal for adding a session saved on this machine."""

from datetime import date

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Input, Label, Static

from rowtrack.sessions.session import Session, parse_session_date

MAX_SESSION_METERS = 200_000


def validate_session_input(date_str: str, meters_str: str, note: str) -> tuple[Session | None, str | None]:
    """Validate the form fields.

    Returns:
        Tuple of (session, None) if valid, or (None, error message)
    """
    date_str = date_str.strip()
    if parse_session_date(date_str) is None:
        return None, "Date must be YYYY-MM-DD"

    try:
        meters = int(meters_str.strip())
    except ValueError:
        return None, "Meters must be a whole number"

    if meters <= 0 or meters > MAX_SESSION_METERS:
        return None, f"Meters must be between 1 and {MAX_SESSION_METERS}"

    return Session(date=date_str, meters=meters, note=note.strip() or None), None


class AddSessionModal(ModalScreen[Session | None]):
    """Modal screen for entering a rowing session."""

    BINDINGS = [
        ("escape", "close_modal", "Close"),
    ]

    CSS = """
    AddSessionModal {
        align: center middle;
    }

    #session-dialog {
        width: 60;
        height: auto;
        border: round white;
        background: $background 60%;
        padding: 1 2;
    }

    #header {
        width: 100%;
        height: auto;
        content-align: center middle;
        padding-bottom: 1;
        border-bottom: solid white;
        text-style: bold;
    }

    #session-content {
        width: 100%;
        height: auto;
        padding: 1 1;
    }

    .field-row {
        width: 100%;
        height: auto;
        margin-bottom: 1;
    }

    #status-message {
        width: 100%;
        height: auto;
        content-align: center middle;
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
        with Container(id="session-dialog"):
            yield Label("Add Session", id="header")
            with Vertical(id="session-content"):
                with Vertical(classes="field-row"):
                    yield Label("Date")
                    yield Input(value=date.today().isoformat(), placeholder="YYYY-MM-DD", id="date-input")
                with Vertical(classes="field-row"):
                    yield Label("Meters")
                    yield Input(placeholder="10000", id="meters-input")
                with Vertical(classes="field-row"):
                    yield Label("Note (optional)")
                    yield Input(id="note-input")
            yield Static("", id="status-message")
            with Horizontal(id="buttons"):
                yield Button("Save", id="save-btn")
                yield Button("Cancel", id="cancel-btn")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the meters input when mounted."""
        self.query_one("#meters-input", Input).focus()

    def action_close_modal(self) -> None:
        """Close without saving."""
        self.dismiss(None)

    def save_session(self) -> None:
        """Validate the form and return the session."""
        status_message = self.query_one("#status-message", Static)

        session, error = validate_session_input(
            self.query_one("#date-input", Input).value,
            self.query_one("#meters-input", Input).value,
            self.query_one("#note-input", Input).value,
        )

        if error:
            status_message.update(error)
            status_message.styles.color = "red"
            return

        self.dismiss(session)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.save_session()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press."""
        if event.button.id == "save-btn":
            self.save_session()
        elif event.button.id == "cancel-btn":
            self.dismiss(None)
