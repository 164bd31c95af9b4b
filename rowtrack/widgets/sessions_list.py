"""Session list widget showing the most recent rows."""

from rich.markup import escape
from textual.reactive import reactive
from textual.widgets import Static

from rowtrack.sessions.session import Session, format_session_date, recent_sessions

EMPTY_MESSAGE = "No sessions recorded"


def format_sessions(sessions: list[Session]) -> str:
    """Format the latest sessions as Rich markup, newest first."""
    latest = recent_sessions(sessions)
    if not latest:
        return f"[dim]{EMPTY_MESSAGE}[/dim]"

    lines = []
    for session in latest:
        date_str = escape(format_session_date(session.date))
        lines.append(f"[bold]{date_str}[/bold]  {session.km:.1f} km")
        if session.note:
            # Notes come from user data
            lines.append(f"  [dim]{escape(session.note)}[/dim]")
    return "\n".join(lines)


class SessionsList(Static):
    """Widget listing the latest sessions."""

    sessions: reactive[list[Session]] = reactive(list, always_update=True)

    def watch_sessions(self, sessions: list[Session]) -> None:
        self.update(format_sessions(sessions))
