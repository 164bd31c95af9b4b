"""Configuration management for rowtrack."""

import json
from pathlib import Path

from rowtrack.log import get_logger

logger = get_logger(__name__)

DEFAULT_SHEET_TIMEOUT_S = 10.0


def get_config_dir() -> Path:
    """Get the config directory path."""
    config_dir = Path.home() / ".local" / "share" / "rowtrack"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.json"


def load_config() -> dict:
    """Load configuration from file."""
    config_file = get_config_file()
    if config_file.exists():
        try:
            with open(config_file, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable config {config_file}: {e}")
            return {}
        return data if isinstance(data, dict) else {}
    return {}


def save_config(config: dict) -> None:
    """Save configuration to file."""
    config_file = get_config_file()
    try:
        with open(config_file, "w") as f:
            json.dump(config, f, indent=2)
    except OSError as e:
        logger.error(f"Failed to save config: {e}")


def get_sheet_url() -> str | None:
    """Get the published spreadsheet CSV URL, if one is configured."""
    return load_config().get("sheet_url") or None


def set_sheet_url(url: str | None) -> None:
    """Save or clear the published spreadsheet CSV URL.

    Args:
        url: CSV export URL, or None to fall back to local data only
    """
    config = load_config()
    if url:
        config["sheet_url"] = url
    else:
        config.pop("sheet_url", None)
    save_config(config)


def get_sheet_timeout_s() -> float:
    """Get the spreadsheet request timeout in seconds."""
    value = load_config().get("sheet_timeout_s", DEFAULT_SHEET_TIMEOUT_S)
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_SHEET_TIMEOUT_S
    return timeout if timeout > 0 else DEFAULT_SHEET_TIMEOUT_S


def _get_path(key: str, default_name: str) -> Path:
    value = load_config().get(key)
    if value:
        return Path(value).expanduser()
    return get_config_dir() / default_name


def get_route_path() -> Path:
    """Get the route JSON path."""
    return _get_path("route_path", "route.json")


def get_sessions_path() -> Path:
    """Get the local sessions JSON path (used when no sheet is available)."""
    return _get_path("sessions_path", "rows.json")


def get_local_entries_path() -> Path:
    """Get the path of sessions saved on this machine only."""
    return _get_path("local_entries_path", "local_rows.json")
