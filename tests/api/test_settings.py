"""Tests for application settings."""

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from ytmproxy_api.__main__ import main
from ytmproxy_api.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from .env file and shell environment."""
    for key in list(os.environ.keys()):
        if key.startswith("YTMPROXY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 8000
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ["*"]
        assert settings.metadata_provider == "ytmusicapi"
        assert settings.provider_timeout_seconds == 20.0
        assert settings.extraction_timeout_seconds == 60.0
        assert settings.ytdlp_player_clients == []


class TestLogLevel:
    @pytest.mark.parametrize(
        ("input_level", "expected"),
        [
            ("debug", "DEBUG"),
            ("Info", "INFO"),
            ("WaRnInG", "WARNING"),
            ("ERROR", "ERROR"),
        ],
    )
    def test_case_insensitive(self, input_level: str, expected: str) -> None:
        assert Settings(log_level=input_level).log_level == expected

    @pytest.mark.parametrize("level", ["TRACE", "verbose", ""])
    def test_rejects_unknown_levels(self, level: str) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level=level)


class TestEnvironment:
    def test_reads_prefixed_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YTMPROXY_PORT", "9000")
        monkeypatch.setenv("YTMPROXY_LOG_LEVEL", "debug")
        monkeypatch.setenv("YTMPROXY_CORS_ORIGINS", '["https://a.example"]')

        settings = Settings()

        assert settings.port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["https://a.example"]

    def test_reads_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("YTMPROXY_LANGUAGE=de\n")

        assert Settings().language == "de"


class TestValidation:
    def test_unknown_provider(self) -> None:
        with pytest.raises(ValidationError, match="Unknown metadata provider"):
            Settings(metadata_provider="spotify")

    @pytest.mark.parametrize(
        "field", ["provider_timeout_seconds", "extraction_timeout_seconds"]
    )
    @pytest.mark.parametrize("value", [0, -1.5])
    def test_timeouts_must_be_positive(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            Settings(**{field: value})


class TestMain:
    @pytest.fixture(autouse=True)
    def _fresh_settings(self) -> Any:
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_invalid_setting_exits_before_serving(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("YTMPROXY_METADATA_PROVIDER", "spotify")

        with patch("ytmproxy_api.__main__.uvicorn.run") as run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        run.assert_not_called()
        err = capsys.readouterr().err
        assert "YTMPROXY_METADATA_PROVIDER" in err
        assert "Unknown metadata provider: spotify" in err

    def test_serves_with_configured_options(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("YTMPROXY_PORT", "9100")
        monkeypatch.setenv("YTMPROXY_LOG_LEVEL", "warning")

        with patch("ytmproxy_api.__main__.uvicorn.run") as run:
            main()

        run.assert_called_once_with(
            "ytmproxy_api.api.app:app",
            host="127.0.0.1",
            port=9100,
            reload=False,
            log_level="warning",
        )
