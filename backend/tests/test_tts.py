"""Tests for the speech synthesizer."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
import pytest

from dorry.config import Settings
from dorry.services.tts import SpeechSynthesizer, apply_egyptian_arabic_pronunciation

if TYPE_CHECKING:
    from pathlib import Path

_ENDPOINT = "https://tts.example.com/v1/speak"


def _synthesizer(tmp_path: Path, handler: object) -> SpeechSynthesizer:
    settings = Settings(
        tts_api_key="secret",
        tts_endpoint=_ENDPOINT,
        tts_audio_dir=tmp_path / "audio",
    )
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))  # type: ignore[arg-type]
    return SpeechSynthesizer(settings, client=client)


class TestPronunciation:
    def test_qaf_and_jim(self) -> None:
        assert apply_egyptian_arabic_pronunciation("قمر") == "ءمر"
        assert apply_egyptian_arabic_pronunciation("جميل") == "gميل"

    def test_other_text_untouched(self) -> None:
        assert apply_egyptian_arabic_pronunciation("kitchen") == "kitchen"


class TestSpeechSynthesizer:
    @pytest.mark.asyncio
    async def test_unconfigured_returns_none(self, settings: Settings) -> None:
        synthesizer = SpeechSynthesizer(settings)
        assert synthesizer.is_available() is False
        assert await synthesizer.synthesize_speech("hello") is None

    @pytest.mark.asyncio
    async def test_writes_audio_and_returns_url(self, tmp_path: Path) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, content=b"ID3-fake-mp3")

        synthesizer = _synthesizer(tmp_path, handler)
        url = await synthesizer.synthesize_speech("قال")

        assert url is not None
        assert url.startswith("/api/tts/speech_")
        assert url.endswith(".mp3")
        filename = url.rsplit("/", 1)[-1]
        assert (tmp_path / "audio" / filename).read_bytes() == b"ID3-fake-mp3"

        payload = json.loads(requests[0].content)
        assert payload == {
            "text": "ءال",
            "language": "ar-EG",
            "voice": "ar-EG-SalmaNeural",
            "outputFormat": "mp3",
        }
        assert requests[0].headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_other_language_uses_default_voice(self, tmp_path: Path) -> None:
        payloads: list[dict[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            payloads.append(json.loads(request.content))
            return httpx.Response(200, content=b"mp3")

        synthesizer = _synthesizer(tmp_path, handler)
        await synthesizer.synthesize_speech("Bigger kitchen", language="en-US")

        assert payloads[0]["voice"] == "en-US-JennyNeural"
        assert payloads[0]["text"] == "Bigger kitchen"

    @pytest.mark.asyncio
    async def test_upstream_error_returns_none(self, tmp_path: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        synthesizer = _synthesizer(tmp_path, handler)
        assert await synthesizer.synthesize_speech("hello") is None
        assert not (tmp_path / "audio").exists()
