"""OpenAI audio transcription client."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from health_tracker.domain.errors import AIProcessingError
from health_tracker.services.transcription import TranscriptionClient

_MIME_EXTENSIONS = {
    "audio/webm": "webm",
    "audio/mp3": "mp3",
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
    "audio/wave": "wav",
    "audio/x-wav": "wav",
    "audio/m4a": "m4a",
    "audio/mp4": "m4a",
}


@dataclass
class OpenAITranscriptionClient(TranscriptionClient):
    """Transcription client backed by the OpenAI audio API."""

    client: AsyncOpenAI
    model: str = "whisper-1"

    @classmethod
    def create(
        cls, api_key: str, model: str = "whisper-1", timeout_seconds: float = 30.0
    ) -> "OpenAITranscriptionClient":
        """Create an OpenAI transcription client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, timeout=timeout_seconds),
            model=model,
        )

    async def transcribe(self, audio_bytes: bytes, mime_type: str) -> str:
        """Transcribe English speech and return plain text."""
        filename = f"audio.{file_extension(mime_type)}"
        try:
            response = await self.client.audio.transcriptions.create(
                file=(filename, audio_bytes, mime_type),
                model=self.model,
                language="en",
                response_format="text",
            )
        except openai.RateLimitError as exc:
            raise AIProcessingError(
                "Rate limit exceeded", "whisper", reason="rate_limited"
            ) from exc
        except openai.BadRequestError as exc:
            raise AIProcessingError(
                "Invalid audio format", "whisper", reason="bad_audio"
            ) from exc
        except openai.OpenAIError as exc:
            raise AIProcessingError("Failed to transcribe audio", "whisper") from exc
        text = response if isinstance(response, str) else getattr(response, "text", "")
        return text.strip()


def file_extension(mime_type: str) -> str:
    """Map an audio mime type to a file extension, defaulting to webm."""
    return _MIME_EXTENSIONS.get(mime_type, "webm")
