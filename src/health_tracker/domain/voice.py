"""Results of the voice and text dispatch operations."""

from dataclasses import dataclass, field
from typing import Literal
from uuid import UUID

EntryKind = Literal["food", "workout", "habit"]


@dataclass(frozen=True)
class CreatedEntry:
    """An extracted item, persisted or previewed, tagged by kind."""

    kind: EntryKind
    name: str
    id: UUID | None = None
    details: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class ProcessingOutcome:
    """Entries produced from a text input and a human-readable summary."""

    created_entries: list[CreatedEntry]
    message: str


@dataclass(frozen=True)
class TranscriptionOutcome:
    """Transcript plus a context-specific view of what was extracted."""

    transcription: str
    extracted_data: dict[str, object]
    alternatives: list[dict[str, object]] = field(default_factory=list)
