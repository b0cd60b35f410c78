"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Provider credentials and service options.

    Empty API keys mean the matching provider is skipped and its fallback
    values are used.
    """

    weather_api_key: str = ""
    openweathermap_api_key: str = ""
    tts_api_key: str = ""
    tts_endpoint: str = ""
    tts_audio_dir: Path = Path("audio")
    http_timeout_seconds: float = 10.0
    cors_origins: tuple[str, ...] = field(default=("http://localhost:5173",))

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        return cls(
            weather_api_key=os.getenv("WEATHER_API_KEY", ""),
            openweathermap_api_key=os.getenv("OPENWEATHERMAP_API_KEY", ""),
            tts_api_key=os.getenv("TTS_API_KEY", ""),
            tts_endpoint=os.getenv("TTS_ENDPOINT", ""),
            tts_audio_dir=Path(os.getenv("TTS_AUDIO_DIR", "audio")),
            http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")),
            cors_origins=_split_csv(
                os.getenv("CORS_ORIGINS", "http://localhost:5173")
            ),
        )

    def is_tts_configured(self) -> bool:
        return bool(self.tts_api_key and self.tts_endpoint)
