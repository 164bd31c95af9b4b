"""Rowing session data model."""

from dataclasses import dataclass
from datetime import datetime

# Number of sessions shown in the session list
RECENT_SESSIONS_LIMIT = 10


def _parse_meters(value) -> int:
    """Parse meters leniently; anything invalid or negative counts as 0."""
    try:
        meters = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(meters, 0)


@dataclass(frozen=True)
class Session:
    """A single rowing session."""
    date: str
    meters: int
    note: str | None = None

    @property
    def km(self) -> float:
        """Get session distance in kilometers."""
        return self.meters / 1000

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        """Create a session from a JSON row.

        Missing or invalid meters are treated as 0.
        """
        note = str(data.get("note") or "").strip()
        return cls(
            date=str(data.get("date") or "").strip(),
            meters=_parse_meters(data.get("meters")),
            note=note or None,
        )

    def to_dict(self) -> dict:
        data = {"date": self.date, "meters": self.meters}
        if self.note:
            data["note"] = self.note
        return data


def total_km(sessions: list[Session]) -> float:
    """Sum all session distances in kilometers."""
    return sum(s.meters for s in sessions) / 1000


def parse_session_date(date_str: str) -> datetime | None:
    """Parse an ISO date or datetime string.

    Returns:
        The parsed datetime, or None if it can't be parsed
    """
    if not date_str:
        return None
    try:
        return datetime.fromisoformat(date_str.strip())
    except ValueError:
        return None


def recent_sessions(sessions: list[Session], limit: int = RECENT_SESSIONS_LIMIT) -> list[Session]:
    """Get the most recent sessions, newest first.

    Sessions with unparsable dates sort after all dated sessions.
    """
    dated = []
    undated = []
    for session in sessions:
        parsed = parse_session_date(session.date)
        if parsed is None:
            undated.append(session)
        else:
            dated.append((parsed.replace(tzinfo=None), session))

    dated.sort(key=lambda item: item[0], reverse=True)
    ordered = [session for _, session in dated] + undated
    return ordered[:limit]


def format_session_date(date_str: str) -> str:
    """Format a session date like '12 Jan 2025', or return it unchanged."""
    parsed = parse_session_date(date_str)
    if parsed is None:
        return date_str
    return f"{parsed.day} {parsed.strftime('%b %Y')}"
