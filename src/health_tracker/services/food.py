"""Food entry service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.domain.extraction import ParsedFoodItem
from health_tracker.domain.records import FoodEntryRecord


class FoodRepository(Protocol):
    """Persistence interface for food entries."""

    def create_many(
        self, user_id: UUID, entries: list[ParsedFoodItem]
    ) -> list[FoodEntryRecord]:
        """Insert food entries and return the stored rows."""


@dataclass
class FoodService:
    """Application service for food entries."""

    repository: FoodRepository

    async def create_many_from_parsed(
        self, user_id: UUID, entries: list[ParsedFoodItem]
    ) -> list[FoodEntryRecord]:
        """Persist a batch of extracted food items."""
        if not entries:
            return []
        return self.repository.create_many(user_id, entries)
