"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from dorry.config import Settings


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WEATHER_API_KEY",
        "OPENWEATHERMAP_API_KEY",
        "TTS_API_KEY",
        "TTS_ENDPOINT",
        "TTS_AUDIO_DIR",
        "HTTP_TIMEOUT_SECONDS",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.is_tts_configured() is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_API_KEY", "wa")
    monkeypatch.setenv("TTS_API_KEY", "tts")
    monkeypatch.setenv("TTS_ENDPOINT", "https://tts.example.com")
    monkeypatch.setenv("TTS_AUDIO_DIR", "/var/dorry/audio")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    settings = Settings.from_env()

    assert settings.weather_api_key == "wa"
    assert settings.tts_audio_dir == Path("/var/dorry/audio")
    assert settings.http_timeout_seconds == 2.5
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.is_tts_configured() is True


def test_tts_needs_key_and_endpoint() -> None:
    assert Settings(tts_api_key="k").is_tts_configured() is False
    assert Settings(tts_endpoint="https://x").is_tts_configured() is False
