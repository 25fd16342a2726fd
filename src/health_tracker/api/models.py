"""Request and response models for the voice API."""

from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field


class QuickLogRequest(BaseModel):
    """Text input to extract and optionally persist."""

    user_id: UUID
    transcription: str = Field(min_length=1)
    auto_create: bool = True


class CreatedEntryModel(BaseModel):
    """Created or previewed entry."""

    type: Literal["food", "workout", "habit"]
    id: UUID | None = None
    name: str
    details: dict[str, Any] = Field(default_factory=dict)


class QuickLogResponse(BaseModel):
    """Entries produced from text input."""

    created_entries: list[CreatedEntryModel]
    message: str


class TranscribeResponse(BaseModel):
    """Transcript with the extracted data view."""

    transcription: str
    extracted_data: dict[str, Any]
    alternatives: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned for handled failures."""

    error: str
    code: str
