"""Text-to-speech client for assistant replies.

Synthesis is optional: without ``TTS_API_KEY`` and ``TTS_ENDPOINT`` every
call returns ``None``, and upstream failures are logged and also return
``None``.  Chat turns never fail because audio could not be produced.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from pathlib import Path

    from dorry.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "ar-EG"
AUDIO_URL_PREFIX = "/api/tts"

_VOICES: dict[str, str] = {
    "ar-EG": "ar-EG-SalmaNeural",
}
_DEFAULT_VOICE = "en-US-JennyNeural"

# Cairene pronunciation: qaf is a glottal stop, jim is a hard g.
_EGYPTIAN_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("ق", "ء"),
    ("ج", "g"),
)


def apply_egyptian_arabic_pronunciation(text: str) -> str:
    for letter, replacement in _EGYPTIAN_SUBSTITUTIONS:
        text = text.replace(letter, replacement)
    return text


class SpeechSynthesizer:
    """Posts reply text to the configured TTS endpoint and stores the mp3.

    Args:
        settings: Supplies the endpoint, API key, audio directory and timeout.
        client: Optional shared ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client

    @property
    def audio_dir(self) -> Path:
        return self._settings.tts_audio_dir

    def is_available(self) -> bool:
        return self._settings.is_tts_configured()

    async def synthesize_speech(
        self, text: str, language: str = DEFAULT_LANGUAGE
    ) -> str | None:
        """Return a URL for the spoken ``text``, or ``None`` if unavailable."""
        if not self.is_available():
            logger.info("TTS service unavailable - no API credentials configured")
            return None

        if language == DEFAULT_LANGUAGE:
            text = apply_egyptian_arabic_pronunciation(text)

        payload = {
            "text": text,
            "language": language,
            "voice": _VOICES.get(language, _DEFAULT_VOICE),
            "outputFormat": "mp3",
        }
        headers = {"Authorization": f"Bearer {self._settings.tts_api_key}"}

        try:
            if self._client is not None:
                audio = await self._post(self._client, payload, headers)
            else:
                async with httpx.AsyncClient(
                    timeout=self._settings.http_timeout_seconds
                ) as client:
                    audio = await self._post(client, payload, headers)
            filename = f"speech_{time.time_ns()}.mp3"
            self.audio_dir.mkdir(parents=True, exist_ok=True)
            (self.audio_dir / filename).write_bytes(audio)
        except (httpx.HTTPError, OSError):
            logger.exception("Error synthesizing speech")
            return None

        return f"{AUDIO_URL_PREFIX}/{filename}"

    async def _post(
        self,
        client: httpx.AsyncClient,
        payload: dict[str, str],
        headers: dict[str, str],
    ) -> bytes:
        response = await client.post(self._settings.tts_endpoint, json=payload, headers=headers)
        response.raise_for_status()
        return response.content
