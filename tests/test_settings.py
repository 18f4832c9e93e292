"""Tests for application settings."""

import os
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError
from trackbridge.config import ResolverConfig
from trackbridge.settings import Settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from .env file and shell environment."""
    for key in list(os.environ.keys()):
        if key.startswith("TRACKBRIDGE_"):
            monkeypatch.delenv(key, raising=False)
    # Change to temp dir so Settings won't find .env file
    monkeypatch.chdir(tmp_path)


class TestLogLevel:
    """Tests for LogLevel type validation."""

    @pytest.mark.parametrize(
        ("input_level", "expected"),
        [
            ("debug", "DEBUG"),
            ("Info", "INFO"),
            ("WARNING", "WARNING"),
            ("error", "ERROR"),
        ],
    )
    def test_normalizes_case(self, input_level: str, expected: str) -> None:
        """Should accept log levels in any case."""
        assert Settings(log_level=input_level).log_level == expected

    @pytest.mark.parametrize("level", ["TRACE", "verbose", ""])
    def test_rejects_unknown_levels(self, level: str) -> None:
        """Should reject levels logging does not know."""
        with pytest.raises(ValidationError):
            Settings(log_level=level)


class TestSettingsFields:
    """Tests for field defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults should run oEmbed-only on localhost."""
        settings = Settings()
        assert settings.youtube_api_key is None
        assert settings.host == "127.0.0.1"
        assert settings.port == 8000
        assert settings.request_timeout == 10.0
        assert settings.service_base_url == "https://open.spotify.com"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        """Timeout must be positive."""
        with pytest.raises(ValidationError):
            Settings(request_timeout=timeout)

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read TRACKBRIDGE_ prefixed variables."""
        monkeypatch.setenv("TRACKBRIDGE_YOUTUBE_API_KEY", "env-key")
        monkeypatch.setenv("TRACKBRIDGE_PORT", "9000")
        monkeypatch.setenv("TRACKBRIDGE_CORS_ORIGINS", '["http://localhost:5173"]')

        settings = Settings()

        assert settings.youtube_api_key == "env-key"
        assert settings.port == 9000
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_reads_env_file(self, tmp_path: Path) -> None:
        """Should read a .env file in the working directory."""
        (tmp_path / ".env").write_text("TRACKBRIDGE_YOUTUBE_API_KEY=file-key\n")
        assert Settings().youtube_api_key == "file-key"


class TestResolverConfig:
    """Tests for Settings.resolver_config."""

    def test_maps_fields(self) -> None:
        """Should carry key, base URL and timeout into the library config."""
        settings = Settings(
            youtube_api_key="key",
            service_base_url="https://music.example.com",
            request_timeout=3.0,
        )

        config = settings.resolver_config()

        assert config == ResolverConfig(
            api_key="key",
            service_base_url="https://music.example.com",
            request_timeout=3.0,
        )

    def test_empty_key_disables_api(self) -> None:
        """An empty key should behave like no key."""
        kwargs: dict[str, Any] = {"youtube_api_key": ""}
        assert Settings(**kwargs).resolver_config().api_key is None
