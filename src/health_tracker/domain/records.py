"""Persisted health records returned by repositories."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from health_tracker.domain.extraction import MealType, WorkoutType


@dataclass(frozen=True)
class FoodEntryRecord:
    """Food entry row."""

    id: UUID
    user_id: UUID
    name: str
    meal: MealType
    calories: int
    protein: int
    description: str | None
    analysis_confidence: float | None
    nutrition_breakdown: dict[str, object] | None
    timestamp: datetime


@dataclass(frozen=True)
class WorkoutRecord:
    """Workout row."""

    id: UUID
    user_id: UUID
    name: str
    type: WorkoutType
    duration: int
    calories: int
    completed: bool
    notes: str | None
    timestamp: datetime


@dataclass(frozen=True)
class HabitRecord:
    """Habit in a user's catalog."""

    id: UUID
    name: str
    active: bool = True


@dataclass(frozen=True)
class HabitCompletion:
    """A habit marked as done on a given day."""

    id: UUID
    habit_id: UUID
    user_id: UUID
    date: date


@dataclass(frozen=True)
class CompletedHabit:
    """A catalog habit together with its new completion."""

    habit: HabitRecord
    completion: HabitCompletion
