"""Workout service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.domain.extraction import ParsedWorkoutItem
from health_tracker.domain.records import WorkoutRecord


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def create_many(
        self, user_id: UUID, workouts: list[ParsedWorkoutItem]
    ) -> list[WorkoutRecord]:
        """Insert completed workouts and return the stored rows."""


@dataclass
class WorkoutService:
    """Application service for workouts."""

    repository: WorkoutRepository

    async def create_many_from_parsed(
        self, user_id: UUID, workouts: list[ParsedWorkoutItem]
    ) -> list[WorkoutRecord]:
        """Persist a batch of extracted workouts."""
        if not workouts:
            return []
        return self.repository.create_many(user_id, workouts)
