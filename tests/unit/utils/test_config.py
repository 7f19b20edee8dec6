"""Unit tests for configuration utilities."""

import pytest

from srtkit.utils.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    """Test cases for Settings class."""

    def test_defaults(self, monkeypatch, no_env_file):
        """Should use defaults when nothing is configured."""
        for name in ("ENCODING", "OUTPUT_ENCODING", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(f"SRTKIT_{name}", raising=False)

        settings = get_settings()

        assert settings.encoding == "utf-8-sig"
        assert settings.output_encoding == "utf-8"
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_settings_load_from_prefixed_env(self, monkeypatch):
        """Should load SRTKIT_-prefixed variables."""
        monkeypatch.setenv("SRTKIT_ENCODING", "latin-1")
        monkeypatch.setenv("SRTKIT_LOG_JSON", "true")

        settings = get_settings()

        assert settings.encoding == "latin-1"
        assert settings.log_json is True

    def test_env_names_are_case_insensitive(self, monkeypatch):
        """Lower-case variable names are accepted."""
        monkeypatch.setenv("srtkit_log_level", "DEBUG")

        assert get_settings().log_level == "DEBUG"

    def test_settings_load_from_env_file(self, monkeypatch, tmp_path):
        """Should read a .env file in the working directory."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SRTKIT_OUTPUT_ENCODING", raising=False)
        (tmp_path / ".env").write_text("SRTKIT_OUTPUT_ENCODING=utf-16\n")

        assert get_settings().output_encoding == "utf-16"

    def test_get_settings_is_cached(self, monkeypatch):
        """Should return cached settings on subsequent calls."""
        monkeypatch.setenv("SRTKIT_LOG_LEVEL", "WARNING")

        settings1 = get_settings()
        monkeypatch.setenv("SRTKIT_LOG_LEVEL", "ERROR")
        settings2 = get_settings()

        assert settings1 is settings2
        assert settings1.log_level == "WARNING"

    def test_cache_clear_reloads_settings(self, monkeypatch):
        """Should reload settings after cache clear."""
        monkeypatch.setenv("SRTKIT_LOG_LEVEL", "WARNING")
        settings1 = get_settings()

        get_settings.cache_clear()
        monkeypatch.setenv("SRTKIT_LOG_LEVEL", "ERROR")
        settings2 = get_settings()

        assert settings1.log_level == "WARNING"
        assert settings2.log_level == "ERROR"
        assert settings1 is not settings2

    def test_direct_construction_overrides_env(self, monkeypatch):
        """Keyword arguments win over the environment."""
        monkeypatch.setenv("SRTKIT_ENCODING", "latin-1")

        assert Settings(encoding="cp1252").encoding == "cp1252"
