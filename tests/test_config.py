"""Tests for configuration storage."""

import pytest

from rowtrack import config


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(config.Path, "home", lambda: tmp_path)
    return tmp_path


class TestConfig:

    def test_defaults(self, home):
        base = home / ".local" / "share" / "rowtrack"
        assert config.load_config() == {}
        assert config.get_sheet_url() is None
        assert config.get_route_path() == base / "route.json"
        assert config.get_sessions_path() == base / "rows.json"
        assert config.get_local_entries_path() == base / "local_rows.json"
        assert config.get_sheet_timeout_s() == config.DEFAULT_SHEET_TIMEOUT_S

    def test_sheet_url_roundtrip(self):
        config.set_sheet_url("https://example.com/pub?output=csv")
        assert config.get_sheet_url() == "https://example.com/pub?output=csv"

        config.set_sheet_url(None)
        assert config.get_sheet_url() is None
        assert "sheet_url" not in config.load_config()

    def test_custom_paths(self, tmp_path):
        config.save_config({"route_path": str(tmp_path / "my_route.json")})
        assert config.get_route_path() == tmp_path / "my_route.json"

    def test_corrupt_config_reads_empty(self):
        config.get_config_file().write_text("{not json")
        assert config.load_config() == {}

    def test_bad_timeout_uses_default(self):
        config.save_config({"sheet_timeout_s": "soon"})
        assert config.get_sheet_timeout_s() == config.DEFAULT_SHEET_TIMEOUT_S

        config.save_config({"sheet_timeout_s": 3})
        assert config.get_sheet_timeout_s() == 3.0
