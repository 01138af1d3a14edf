"""Tests for environment-driven settings."""

import pytest

from taskboard.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKBOARD_APP_NAME",
        "TASKBOARD_LOG_LEVEL",
        "TASKBOARD_HOST",
        "TASKBOARD_PORT",
        "TASKBOARD_CORS_ORIGINS",
        "TASKBOARD_SEED_SAMPLE",
        "TASKBOARD_LIST_DELAY_MS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.cors_origins == ["http://localhost:3000"]
    assert settings.seed_sample is True
    assert settings.list_delay_seconds == pytest.approx(0.1)


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKBOARD_PORT", "9001")
    monkeypatch.setenv("TASKBOARD_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("TASKBOARD_SEED_SAMPLE", "no")
    monkeypatch.setenv("TASKBOARD_LIST_DELAY_MS", "0")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.port == 9001
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.seed_sample is False
    assert settings.list_delay_seconds == 0


def test_malformed_int_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOARD_PORT", "eighty")
    assert Settings.from_env().port == 8000
