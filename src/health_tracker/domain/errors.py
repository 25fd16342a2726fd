"""Error types raised by the extraction and dispatch pipeline."""


class InvalidAudioError(ValueError):
    """Audio payload failed size or format validation before any network call."""


class AIProcessingError(RuntimeError):
    """Failure in an AI provider call or in interpreting its output."""

    def __init__(self, message: str, service: str, reason: str = "failed") -> None:
        super().__init__(f"AI processing failed: {message}")
        self.service = service
        self.reason = reason

    @property
    def code(self) -> str:
        """Machine-readable error code, e.g. ``AI_CLAUDE_ERROR``."""
        return f"AI_{self.service.upper()}_ERROR"


class EmptyTranscriptionError(AIProcessingError):
    """Transcription succeeded but produced no text."""

    def __init__(self) -> None:
        super().__init__("Empty transcription received", service="whisper")


class UnexpectedResponseTypeError(ValueError):
    """Completion provider returned a non-text primary content block."""


class ExtractionFormatError(ValueError):
    """Completion text does not contain a JSON object span."""


class ExtractionParseError(ValueError):
    """JSON object span in the completion text could not be decoded."""
