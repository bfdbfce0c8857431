"""Unit tests for notes.config — environment-driven settings."""

from pathlib import Path

import pytest

from notes.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.web_port == 5000
        assert s.greeting_port == 3000
        assert s.log_level == "WARNING"
        assert s.template_path.is_file()

    def test_db_path_relative_to_working_directory(self) -> None:
        s = Settings(_env_file=None)
        assert s.db_path == Path("db.json")
        assert not s.db_path.is_absolute()

    @pytest.mark.parametrize("raw", ["info", "Info", " INFO "])
    def test_log_level_case_insensitive(self, raw: str) -> None:
        assert Settings(_env_file=None, log_level=raw).log_level == "INFO"

    def test_log_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("NOTES_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_db_path_from_environment(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("NOTES_DB_PATH", str(tmp_path / "mine.json"))
        assert Settings(_env_file=None).db_path == tmp_path / "mine.json"
