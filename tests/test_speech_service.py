"""
Speech transcription tests
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from excel_ai.core.exceptions import TranscriptionError
from excel_ai.services.speech_service import OpenAITranscriber, append_transcript


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.audio.transcriptions.create = AsyncMock(
        return_value=SimpleNamespace(text="  ගිය මාසේ වියදම් ටික  ")
    )
    return client


class TestAppendTranscript:

    @pytest.mark.parametrize("existing, transcript, expected", [
        ("", "hello", "hello"),
        (None, "hello", "hello"),
        ("Budget", "for March", "Budget for March"),
        ("Budget  ", " for March", "Budget for March"),
        ("Budget", "", "Budget"),
    ])
    def test_append(self, existing, transcript, expected):
        assert append_transcript(existing, transcript) == expected


class TestOpenAITranscriber:

    @pytest.mark.asyncio
    async def test_transcribe(self, mock_client):
        transcriber = OpenAITranscriber(client=mock_client, model="whisper-1", language="si")

        text = await transcriber.transcribe(b"audio-bytes", "voice.webm", "audio/webm")

        assert text == "ගිය මාසේ වියදම් ටික"
        kwargs = mock_client.audio.transcriptions.create.call_args.kwargs
        assert kwargs["model"] == "whisper-1"
        assert kwargs["language"] == "si"
        assert kwargs["file"] == ("voice.webm", b"audio-bytes", "audio/webm")

    @pytest.mark.asyncio
    async def test_language_hint_optional(self, mock_client):
        transcriber = OpenAITranscriber(client=mock_client, language="")

        await transcriber.transcribe(b"audio-bytes", "voice.webm")

        kwargs = mock_client.audio.transcriptions.create.call_args.kwargs
        assert "language" not in kwargs
        assert kwargs["file"] == ("voice.webm", b"audio-bytes")

    @pytest.mark.asyncio
    async def test_empty_upload(self, mock_client):
        transcriber = OpenAITranscriber(client=mock_client)

        with pytest.raises(TranscriptionError) as exc_info:
            await transcriber.transcribe(b"", "voice.webm")

        assert exc_info.value.code == "EMPTY_AUDIO"
        mock_client.audio.transcriptions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_too_large(self, mock_client):
        transcriber = OpenAITranscriber(client=mock_client, max_upload_size=4)

        with pytest.raises(TranscriptionError) as exc_info:
            await transcriber.transcribe(b"12345", "voice.webm")

        assert exc_info.value.code == "AUDIO_TOO_LARGE"

    @pytest.mark.asyncio
    async def test_provider_failure(self, mock_client):
        request = httpx.Request("POST", "https://api.openai.com/v1/audio/transcriptions")
        mock_client.audio.transcriptions.create.side_effect = openai.APITimeoutError(request=request)
        transcriber = OpenAITranscriber(client=mock_client)

        with pytest.raises(TranscriptionError) as exc_info:
            await transcriber.transcribe(b"audio-bytes", "voice.webm")

        assert exc_info.value.code == "TRANSCRIPTION_FAILED"
