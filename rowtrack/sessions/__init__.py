"""Rowing session data and loading."""

from rowtrack.sessions.session import Session, recent_sessions, total_km
from rowtrack.sessions.session_loader import SessionLoadResult, load_sessions, save_local_entry

__all__ = ["Session", "SessionLoadResult", "load_sessions", "recent_sessions", "save_local_entry", "total_km"]
