"""Dispatch of voice and text input into health records."""

import logging
from dataclasses import asdict, dataclass
from typing import Literal
from uuid import UUID

from health_tracker.domain.extraction import ExtractionResult
from health_tracker.domain.voice import (
    CreatedEntry,
    ProcessingOutcome,
    TranscriptionOutcome,
)
from health_tracker.services.extraction import ExtractionService
from health_tracker.services.food import FoodService
from health_tracker.services.habits import HabitService
from health_tracker.services.transcription import TranscriptionService
from health_tracker.services.workouts import WorkoutService

ExtractionContext = Literal["food", "workout", "general"]

WORKOUT_SUGGESTION_CONFIDENCE = 0.9
PREVIEW_MESSAGE = "Text analyzed successfully"
NOTHING_DETECTED_MESSAGE = "No health data detected in your input"

_logger = logging.getLogger(__name__)


@dataclass
class VoiceService:
    """Runs extraction on voice or text and commits the results."""

    transcription_service: TranscriptionService
    extraction_service: ExtractionService
    food_service: FoodService
    workout_service: WorkoutService
    habit_service: HabitService

    async def transcribe_and_extract(
        self,
        audio_bytes: bytes,
        mime_type: str,
        context: ExtractionContext | None = None,
    ) -> TranscriptionOutcome:
        """Transcribe audio and return what it describes, shaped by context."""
        transcription = await self.transcription_service.transcribe(
            audio_bytes, mime_type
        )
        result = await self.extraction_service.parse_health_data(transcription)
        extracted_data, alternatives = shape_extraction(result, context)
        _logger.info("Processed voice input for context: %s", context or "general")
        return TranscriptionOutcome(
            transcription=transcription,
            extracted_data=extracted_data,
            alternatives=alternatives,
        )

    async def process_text_input(
        self, user_id: UUID, text: str, auto_create: bool = True
    ) -> ProcessingOutcome:
        """Extract health data from text and persist it unless previewing.

        Food entries, workouts and habit completions are written in that order.
        A failure part-way leaves earlier writes in place.
        """
        result = await self.extraction_service.parse_health_data(text)
        if not auto_create:
            return ProcessingOutcome(
                created_entries=preview_entries(result),
                message=PREVIEW_MESSAGE,
            )

        created: list[CreatedEntry] = []
        if result.food_entries:
            foods = await self.food_service.create_many_from_parsed(
                user_id, list(result.food_entries)
            )
            created.extend(
                CreatedEntry(
                    kind="food",
                    id=food.id,
                    name=food.name,
                    details={"calories": food.calories, "protein": food.protein},
                )
                for food in foods
            )
        if result.workouts:
            workouts = await self.workout_service.create_many_from_parsed(
                user_id, list(result.workouts)
            )
            created.extend(
                CreatedEntry(
                    kind="workout",
                    id=workout.id,
                    name=workout.name,
                    details={
                        "duration": workout.duration,
                        "calories": workout.calories,
                    },
                )
                for workout in workouts
            )
        if result.habits:
            completed = await self.habit_service.complete_from_parsed(
                user_id, list(result.habits)
            )
            created.extend(
                CreatedEntry(
                    kind="habit",
                    id=item.habit.id,
                    name=item.habit.name,
                    details={"date": item.completion.date.isoformat()},
                )
                for item in completed
            )

        _logger.info(
            "Created %s entries from text input for user %s", len(created), user_id
        )
        return ProcessingOutcome(
            created_entries=created, message=creation_message(created)
        )


def shape_extraction(
    result: ExtractionResult, context: str | None
) -> tuple[dict[str, object], list[dict[str, object]]]:
    """Select a read-only view of the result for the requested context."""
    if context == "food" and result.food_entries:
        first, *rest = result.food_entries
        return (
            {
                "type": "food",
                "confidence": first.confidence,
                "suggested_entry": {
                    "name": first.name,
                    "meal": first.meal,
                    "calories": first.calories,
                    "protein": first.protein,
                    "description": first.description,
                },
            },
            [
                {"name": food.name, "calories": food.calories, "protein": food.protein}
                for food in rest
            ],
        )
    if context == "workout" and result.workouts:
        first, *rest = result.workouts
        return (
            {
                "type": "workout",
                "confidence": WORKOUT_SUGGESTION_CONFIDENCE,
                "suggested_entry": asdict(first),
            },
            [asdict(workout) for workout in rest],
        )
    return (
        {
            "type": "mixed",
            "food_count": len(result.food_entries),
            "workout_count": len(result.workouts),
            "habit_count": len(result.habits),
            "data": extraction_payload(result),
        },
        [],
    )


def extraction_payload(result: ExtractionResult) -> dict[str, object]:
    """Plain-data form of an extraction result, including metadata."""
    return {
        "food_entries": [asdict(food) for food in result.food_entries],
        "workouts": [asdict(workout) for workout in result.workouts],
        "habits": [asdict(habit) for habit in result.habits],
        "metadata": asdict(result.metadata),
    }


def preview_entries(result: ExtractionResult) -> list[CreatedEntry]:
    """Flat preview: food, then workouts, then completed habits."""
    entries = [
        CreatedEntry(
            kind="food",
            name=food.name,
            details={"calories": food.calories, "protein": food.protein},
        )
        for food in result.food_entries
    ]
    entries.extend(
        CreatedEntry(
            kind="workout",
            name=workout.name,
            details={"duration": workout.duration, "calories": workout.calories},
        )
        for workout in result.workouts
    )
    entries.extend(
        CreatedEntry(kind="habit", name=habit.name)
        for habit in result.habits
        if habit.completed
    )
    return entries


def creation_message(entries: list[CreatedEntry]) -> str:
    """Summarize created entries, e.g. "Created 2 food entries and 1 workout"."""
    counts = {"food": 0, "workout": 0, "habit": 0}
    for entry in entries:
        counts[entry.kind] += 1

    parts: list[str] = []
    if counts["food"]:
        parts.append(_pluralize(counts["food"], "food entry", "food entries"))
    if counts["workout"]:
        parts.append(_pluralize(counts["workout"], "workout", "workouts"))
    if counts["habit"]:
        parts.append(_pluralize(counts["habit"], "habit", "habits"))

    if not parts:
        return NOTHING_DETECTED_MESSAGE
    if len(parts) == 1:
        return f"Created {parts[0]} from your input"
    joined = ", ".join(parts[:-1]) + f" and {parts[-1]}"
    return f"Created {joined} from your voice note"


def _pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"
