"""Session loading from a published spreadsheet, local files and local entries."""

import csv
import io
import json
import re
from dataclasses import dataclass, field
from pathlib import Path

import requests

from rowtrack.log import get_logger
from rowtrack.sessions.session import Session

logger = get_logger(__name__)

SOURCE_SHEET = "Google Sheets"
SOURCE_LOCAL_FILE = "local file"

# Accepted header names per column (lowercase)
DATE_HEADERS = ("date", "datum")
METERS_HEADERS = ("meters", "meter")
NOTE_HEADERS = ("note", "not", "anteckning")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class SheetFormatError(ValueError):
    """Raised when spreadsheet CSV lacks the required columns."""


@dataclass
class SessionLoadResult:
    """Outcome of loading sessions from all sources."""
    sessions: list[Session] = field(default_factory=list)
    source: str = ""
    error: str | None = None


def _find_column(headers: list[str], names: tuple[str, ...]) -> int:
    for i, header in enumerate(headers):
        if header in names:
            return i
    return -1


def _parse_leading_int(value: str) -> int:
    """Parse the integer at the start of a cell, e.g. '5000 m' -> 5000."""
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0


def parse_sheet_csv(text: str) -> list[Session]:
    """Parse spreadsheet CSV export into sessions.

    Rows without a date or with no positive meters are skipped.

    Args:
        text: CSV text with a header row

    Returns:
        List of sessions in sheet order

    Raises:
        SheetFormatError: If the date or meters column is missing
    """
    rows = [row for row in csv.reader(io.StringIO(text.strip())) if row]
    if len(rows) < 2:
        return []

    headers = [h.strip().lower() for h in rows[0]]
    date_idx = _find_column(headers, DATE_HEADERS)
    meters_idx = _find_column(headers, METERS_HEADERS)
    note_idx = _find_column(headers, NOTE_HEADERS)

    if date_idx == -1 or meters_idx == -1:
        raise SheetFormatError("Invalid CSV format: missing date or meters column")

    sessions = []
    for row in rows[1:]:
        if len(row) <= max(date_idx, meters_idx):
            continue

        date = row[date_idx].strip()
        meters = _parse_leading_int(row[meters_idx])
        note = None
        if note_idx != -1 and note_idx < len(row) and row[note_idx].strip():
            note = row[note_idx].strip()

        if date and meters > 0:
            sessions.append(Session(date=date, meters=meters, note=note))

    return sessions


def fetch_sheet_sessions(url: str, timeout: float = 10.0) -> list[Session]:
    """Download and parse sessions from a published spreadsheet CSV URL.

    Raises:
        requests.RequestException: On network or HTTP errors
        SheetFormatError: If the CSV lacks required columns
    """
    logger.debug(f"Fetching sheet {url}")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return parse_sheet_csv(response.text)


def _read_session_list(filepath: Path) -> list[Session]:
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of sessions in {filepath}")

    return [Session.from_dict(row) for row in data if isinstance(row, dict)]


def load_local_sessions(filepath: Path) -> list[Session]:
    """Load sessions from a local JSON file.

    Raises:
        OSError, ValueError: If the file can't be read or decoded
    """
    return _read_session_list(filepath)


def load_local_entries(filepath: Path) -> list[Session]:
    """Load sessions saved on this machine; missing or broken files give []."""
    if not filepath.exists():
        return []
    try:
        return _read_session_list(filepath)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable local entries {filepath}: {e}")
        return []


def save_local_entry(filepath: Path, session: Session) -> None:
    """Append a session to the local entries file.

    Raises:
        OSError: If the file can't be written
    """
    entries = load_local_entries(filepath)
    entries.append(session)

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump([e.to_dict() for e in entries], f, indent=2, ensure_ascii=False)
    logger.info(f"Saved local entry {session.date} ({session.meters} m)")


def load_sessions(
    sheet_url: str | None,
    sessions_path: Path,
    entries_path: Path,
    timeout: float = 10.0,
) -> SessionLoadResult:
    """Load sessions from the sheet, falling back to the local file.

    Local entries are always merged on top. Errors are reported in the
    result, never raised.
    """
    result = SessionLoadResult(source=SOURCE_LOCAL_FILE)
    base: list[Session] = []

    # Try the spreadsheet first
    if sheet_url:
        try:
            base = fetch_sheet_sessions(sheet_url, timeout=timeout)
            if base:
                result.source = SOURCE_SHEET
        except (requests.RequestException, SheetFormatError) as e:
            logger.warning(f"Sheet failed, trying local fallback: {e}")
            base = []

    # Fall back to the local file if the sheet gave nothing
    if not base:
        try:
            base = load_local_sessions(sessions_path)
            result.source = SOURCE_LOCAL_FILE
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load sessions from {sessions_path}: {e}")
            result.error = "Could not load rowing data"
            base = []

    local_entries = load_local_entries(entries_path)
    if local_entries:
        result.source += f" + {len(local_entries)} local"

    result.sessions = base + local_entries
    logger.info(f"Loaded {len(result.sessions)} sessions from {result.source}")
    return result


DEMO_SESSIONS = [
    {"date": "2025-01-04", "meters": 8200, "note": "First row of the challenge"},
    {"date": "2025-01-06", "meters": 10000},
    {"date": "2025-01-09", "meters": 12500},
    {"date": "2025-01-11", "meters": 6000, "note": "Easy recovery"},
    {"date": "2025-01-14", "meters": 15000},
    {"date": "2025-01-18", "meters": 21097, "note": "Half marathon"},
]


def create_demo_sessions(filepath: Path) -> None:
    """Create the sample sessions file if it doesn't exist."""
    if filepath.exists():
        return

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(DEMO_SESSIONS, f, indent=2)
    logger.info(f"Wrote demo sessions to {filepath}")
