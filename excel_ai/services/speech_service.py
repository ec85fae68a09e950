"""
Speech to text for voice prompts
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import openai

from ..core.config import settings
from ..core.exceptions import TranscriptionError
from .openai_client import create_openai_client

logger = logging.getLogger(__name__)


def append_transcript(existing: Optional[str], transcript: str) -> str:
    """Append dictated text to whatever the user already typed"""
    transcript = transcript.strip()
    existing = (existing or "").rstrip()
    if not existing:
        return transcript
    if not transcript:
        return existing
    return f"{existing} {transcript}"


class SpeechTranscriber(ABC):
    """Turns recorded audio into prompt text"""

    @abstractmethod
    async def transcribe(self, audio: bytes, filename: str, content_type: Optional[str] = None) -> str:
        pass


class OpenAITranscriber(SpeechTranscriber):
    """Transcription through the OpenAI audio API"""

    def __init__(
        self,
        client: Optional[openai.AsyncOpenAI] = None,
        model: Optional[str] = None,
        language: Optional[str] = None,
        max_upload_size: Optional[int] = None,
    ):
        self._client = client
        self.model = model or settings.TRANSCRIPTION_MODEL
        self.language = language if language is not None else settings.TRANSCRIPTION_LANGUAGE
        self.max_upload_size = max_upload_size or settings.MAX_AUDIO_UPLOAD_SIZE

    @property
    def client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            self._client = create_openai_client()
        if self._client is None:
            raise TranscriptionError(
                "No model API credential is configured",
                code="MODEL_NOT_CONFIGURED",
            )
        return self._client

    async def transcribe(self, audio: bytes, filename: str, content_type: Optional[str] = None) -> str:
        if not audio:
            raise TranscriptionError("Audio upload is empty", code="EMPTY_AUDIO")
        if len(audio) > self.max_upload_size:
            raise TranscriptionError(
                f"Audio upload of {len(audio)} bytes exceeds {self.max_upload_size} bytes",
                code="AUDIO_TOO_LARGE",
                details={"size": len(audio), "max_size": self.max_upload_size},
            )

        upload_name = filename or "recording.webm"
        upload = (upload_name, audio, content_type) if content_type else (upload_name, audio)
        kwargs = {"model": self.model, "file": upload}
        if self.language:
            kwargs["language"] = self.language

        try:
            result = await self.client.audio.transcriptions.create(**kwargs)
        except openai.OpenAIError as e:
            logger.error(f"Transcription failed: {str(e)}")
            raise TranscriptionError(f"Transcription failed: {e}") from e

        text = (result.text or "").strip()
        logger.info(f"Transcribed {len(audio)} bytes into {len(text)} characters")
        return text
