"""Domain models for health data extracted from free text."""

from dataclasses import dataclass, field
from typing import Literal

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
WorkoutType = Literal["cardio", "strength", "flexibility", "sports", "other"]
ParseQuality = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class ParsedFoodItem:
    """Food item estimated from the user's description."""

    name: str
    meal: MealType
    calories: int
    protein: int
    description: str
    confidence: float = 0.7
    components: dict[str, dict[str, float]] | None = None


@dataclass(frozen=True)
class ParsedWorkoutItem:
    """Workout mentioned by the user."""

    name: str
    type: WorkoutType
    duration: int
    calories: int
    notes: str | None = None


@dataclass(frozen=True)
class ParsedHabitMention:
    """Habit the user mentioned, with whether it was completed."""

    name: str
    completed: bool


@dataclass(frozen=True)
class ExtractionMetadata:
    """Totals and coarse quality signal over an extraction."""

    total_calories_consumed: int
    total_protein: int
    total_calories_burned: int
    parse_quality: ParseQuality


@dataclass(frozen=True)
class ExtractionResult:
    """Normalized output of a single extraction call."""

    food_entries: tuple[ParsedFoodItem, ...] = field(default_factory=tuple)
    workouts: tuple[ParsedWorkoutItem, ...] = field(default_factory=tuple)
    habits: tuple[ParsedHabitMention, ...] = field(default_factory=tuple)

    @property
    def item_count(self) -> int:
        return len(self.food_entries) + len(self.workouts) + len(self.habits)

    @property
    def metadata(self) -> ExtractionMetadata:
        """Totals derived from the item lists."""
        count = self.item_count
        if count == 0:
            quality: ParseQuality = "low"
        elif count >= 3:
            quality = "high"
        else:
            quality = "medium"
        return ExtractionMetadata(
            total_calories_consumed=sum(item.calories for item in self.food_entries),
            total_protein=sum(item.protein for item in self.food_entries),
            total_calories_burned=sum(item.calories for item in self.workouts),
            parse_quality=quality,
        )
