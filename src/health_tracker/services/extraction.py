"""Health data extraction via a text-completion model."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from health_tracker.domain.errors import AIProcessingError, UnexpectedResponseTypeError
from health_tracker.domain.extraction import (
    ExtractionResult,
    ParsedFoodItem,
    ParsedHabitMention,
    ParsedWorkoutItem,
)
from health_tracker.services.classifiers import (
    DEFAULT_WORKOUT_DURATION,
    calculate_workout_calories,
    determine_meal_type,
    validate_workout_type,
)
from health_tracker.services.completion_parser import extract_json_object
from health_tracker.services.prompts import HEALTH_DATA_EXTRACTION_PROMPT
from health_tracker.services.sanitize import (
    non_negative_int,
    round_half_up,
    sanitize_text,
    to_number,
)

DEFAULT_CONFIDENCE = 0.7

_logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Interface for a text-completion provider."""

    async def complete(
        self, *, prompt: str, max_tokens: int, temperature: float
    ) -> list[dict[str, object]]:
        """Return the content blocks of a single completion."""


@dataclass
class ExtractionService:
    """Turns free text into normalized food, workout and habit items."""

    client: CompletionClient
    max_tokens: int = 2000
    temperature: float = 0.2

    async def parse_health_data(self, text: str) -> ExtractionResult:
        """Extract health data from text with one completion call."""
        prompt = f"{HEALTH_DATA_EXTRACTION_PROMPT}\n\n{text}"
        try:
            blocks = await self.client.complete(
                prompt=prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
            raw = extract_json_object(_first_text_block(blocks))
            return normalize_extraction(raw)
        except Exception as exc:
            _logger.exception("Health data extraction failed")
            raise AIProcessingError("Failed to parse health data", "claude") from exc


def _first_text_block(blocks: object) -> str:
    if not isinstance(blocks, list) or not blocks:
        raise UnexpectedResponseTypeError("Completion returned no content blocks")
    first = blocks[0]
    if (
        not isinstance(first, Mapping)
        or first.get("type") != "text"
        or not isinstance(first.get("text"), str)
    ):
        raise UnexpectedResponseTypeError("Unexpected response type from completion")
    return first["text"]


def normalize_extraction(data: Mapping[str, object]) -> ExtractionResult:
    """Build a normalized result from raw completion JSON.

    Every field has a default, so partially malformed output degrades to fewer
    or default-valued items instead of failing.
    """
    return ExtractionResult(
        food_entries=tuple(
            _normalize_food(item) for item in _mappings(data.get("foodEntries"))
        ),
        workouts=tuple(
            _normalize_workout(item) for item in _mappings(data.get("workouts"))
        ),
        habits=tuple(
            _normalize_habit(item) for item in _mappings(data.get("habits"))
        ),
    )


def _mappings(value: object) -> list[Mapping[str, object]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _normalize_food(entry: Mapping[str, object]) -> ParsedFoodItem:
    raw_name = entry.get("name")
    raw_description = entry.get("description") or raw_name
    components = entry.get("components")
    return ParsedFoodItem(
        name=sanitize_text(raw_name),
        meal=determine_meal_type(
            entry.get("meal"), raw_name, entry.get("description")
        ),
        calories=non_negative_int(entry.get("calories")),
        protein=non_negative_int(entry.get("protein")),
        description=sanitize_text(raw_description),
        confidence=_confidence(entry.get("confidence")),
        components=dict(components) if isinstance(components, Mapping) else None,
    )


def _confidence(value: object) -> float:
    number = to_number(value)
    if number is None:
        return DEFAULT_CONFIDENCE
    return min(1.0, max(0.0, number))


def _normalize_workout(workout: Mapping[str, object]) -> ParsedWorkoutItem:
    raw_type = workout.get("type")
    raw_duration = to_number(workout.get("duration"))
    duration = (
        max(1, round_half_up(raw_duration))
        if raw_duration
        else DEFAULT_WORKOUT_DURATION
    )
    notes = sanitize_text(workout.get("notes"))
    return ParsedWorkoutItem(
        name=sanitize_text(workout.get("name")),
        type=validate_workout_type(raw_type),
        duration=duration,
        calories=calculate_workout_calories(
            raw_type, duration, workout.get("calories")
        ),
        notes=notes or None,
    )


def _normalize_habit(habit: Mapping[str, object]) -> ParsedHabitMention:
    return ParsedHabitMention(
        name=sanitize_text(habit.get("name")),
        completed=habit.get("completed") is True,
    )
