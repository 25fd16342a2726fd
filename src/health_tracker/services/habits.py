"""Habit catalog access and reconciliation of spoken habit mentions."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from health_tracker.domain.extraction import ParsedHabitMention
from health_tracker.domain.records import (
    CompletedHabit,
    HabitCompletion,
    HabitRecord,
)

_logger = logging.getLogger(__name__)


class HabitRepository(Protocol):
    """Persistence interface for habits and their completions."""

    def list_active(self, user_id: UUID) -> list[HabitRecord]:
        """Return the user's active habits, oldest first."""

    def list_completed_habit_ids(
        self, user_id: UUID, habit_ids: list[UUID], on_date: date
    ) -> set[UUID]:
        """Return which of the habits already have a completion on the date."""

    def create_completions(
        self, user_id: UUID, habit_ids: list[UUID], on_date: date
    ) -> list[HabitCompletion]:
        """Insert completions for the habits on the date."""


def reconcile_habits(
    parsed_habits: Iterable[ParsedHabitMention], catalog: Sequence[HabitRecord]
) -> list[UUID]:
    """Match completed mentions to catalog habits by substring, either direction.

    Returns unique habit ids in first-match order. Mentions without a match
    are dropped.
    """
    matched: dict[UUID, None] = {}
    for mention in parsed_habits:
        if mention.completed is not True:
            continue
        spoken = mention.name.strip().lower()
        if not spoken:
            continue
        for habit in catalog:
            stored = habit.name.strip().lower()
            if stored and (spoken in stored or stored in spoken):
                matched.setdefault(habit.id, None)
                break
    return list(matched)


@dataclass
class HabitService:
    """Application service for habit completion."""

    repository: HabitRepository

    def list_active_habits(self, user_id: UUID) -> list[HabitRecord]:
        """Return the user's active habit catalog."""
        return self.repository.list_active(user_id)

    def complete_habits(
        self, user_id: UUID, habit_ids: list[UUID], on_date: date | None = None
    ) -> list[HabitCompletion]:
        """Complete habits for a day, skipping ones already completed."""
        if not habit_ids:
            return []
        target = on_date or datetime.now(tz=UTC).date()
        existing = self.repository.list_completed_habit_ids(user_id, habit_ids, target)
        new_ids = [habit_id for habit_id in habit_ids if habit_id not in existing]
        if not new_ids:
            return []
        return self.repository.create_completions(user_id, new_ids, target)

    async def complete_from_parsed(
        self, user_id: UUID, parsed_habits: Sequence[ParsedHabitMention]
    ) -> list[CompletedHabit]:
        """Reconcile mentions against the current catalog and complete matches."""
        catalog = self.list_active_habits(user_id)
        habit_ids = reconcile_habits(parsed_habits, catalog)
        _logger.info(
            "Matched %s of %s habit mentions for user %s",
            len(habit_ids),
            len(parsed_habits),
            user_id,
        )
        by_id = {habit.id: habit for habit in catalog}
        return [
            CompletedHabit(habit=by_id[completion.habit_id], completion=completion)
            for completion in self.complete_habits(user_id, habit_ids)
        ]
