"""Tests for audio validation and transcription."""

import asyncio

import pytest

from health_tracker.domain.errors import InvalidAudioError
from health_tracker.services.transcription import (
    ALLOWED_AUDIO_TYPES,
    TranscriptionService,
    validate_audio,
)
from tests.conftest import FakeTranscriptionClient


@pytest.mark.parametrize("mime_type", ALLOWED_AUDIO_TYPES)
def test_validate_audio_accepts_allowed_types(mime_type: str) -> None:
    validate_audio(b"audio", mime_type)


def test_validate_audio_accepts_exact_size_limit() -> None:
    validate_audio(b"\x00" * 10, "audio/webm", max_bytes=10)


def test_validate_audio_rejects_oversized_payload() -> None:
    with pytest.raises(InvalidAudioError, match="Maximum size"):
        validate_audio(b"\x00" * 11, "audio/webm", max_bytes=10)


def test_transcription_service_strips_transcript() -> None:
    service = TranscriptionService(FakeTranscriptionClient(transcript="  ate toast \n"))

    assert asyncio.run(service.transcribe(b"audio", "audio/mp4")) == "ate toast"
