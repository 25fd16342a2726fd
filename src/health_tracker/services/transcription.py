"""Audio validation and speech-to-text."""

import logging
from dataclasses import dataclass
from typing import Protocol

from health_tracker.domain.errors import EmptyTranscriptionError, InvalidAudioError

MAX_AUDIO_BYTES = 25 * 1024 * 1024
ALLOWED_AUDIO_TYPES: tuple[str, ...] = (
    "audio/webm",
    "audio/mp3",
    "audio/mpeg",
    "audio/wav",
    "audio/wave",
    "audio/x-wav",
    "audio/m4a",
    "audio/mp4",
)

_logger = logging.getLogger(__name__)


class TranscriptionClient(Protocol):
    """Interface for a speech-to-text provider."""

    async def transcribe(self, audio_bytes: bytes, mime_type: str) -> str:
        """Return the transcript for the audio."""


def validate_audio(
    audio_bytes: bytes, mime_type: str, max_bytes: int = MAX_AUDIO_BYTES
) -> None:
    """Raise InvalidAudioError when the payload is too large or of the wrong type."""
    if len(audio_bytes) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise InvalidAudioError(
            f"Audio file too large. Maximum size is {limit_mb}MB"
        )
    if mime_type not in ALLOWED_AUDIO_TYPES:
        raise InvalidAudioError(
            "Unsupported audio format. Allowed formats: "
            + ", ".join(ALLOWED_AUDIO_TYPES)
        )


@dataclass
class TranscriptionService:
    """Validates audio and delegates transcription to the configured client."""

    client: TranscriptionClient
    max_bytes: int = MAX_AUDIO_BYTES

    async def transcribe(self, audio_bytes: bytes, mime_type: str) -> str:
        """Return a non-empty transcript for valid audio."""
        validate_audio(audio_bytes, mime_type, self.max_bytes)
        transcript = (await self.client.transcribe(audio_bytes, mime_type)).strip()
        if not transcript:
            raise EmptyTranscriptionError()
        _logger.info("Transcribed %s bytes of audio", len(audio_bytes))
        return transcript
