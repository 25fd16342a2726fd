"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.extraction import ParsedFoodItem
from health_tracker.domain.records import FoodEntryRecord
from health_tracker.services.food import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food entries."""

    client: Client

    def create_many(
        self, user_id: UUID, entries: list[ParsedFoodItem]
    ) -> list[FoodEntryRecord]:
        """Insert food entry rows and return them."""
        timestamp = datetime.now(tz=UTC).isoformat()
        payload = [
            {
                "user_id": str(user_id),
                "name": entry.name,
                "calories": entry.calories,
                "protein": entry.protein,
                "meal": entry.meal,
                "description": entry.description or None,
                "analysis_confidence": entry.confidence,
                "nutrition_breakdown": entry.components,
                "timestamp": timestamp,
            }
            for entry in entries
        ]
        response = self.client.table("food_entries").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entries")
        return [_parse_food_entry(row) for row in response.data]


def _parse_food_entry(row: dict[str, object]) -> FoodEntryRecord:
    confidence = row.get("analysis_confidence")
    return FoodEntryRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        meal=row.get("meal", "snack"),  # type: ignore[arg-type]
        calories=int(row.get("calories", 0)),
        protein=int(row.get("protein", 0)),
        description=row.get("description"),  # type: ignore[arg-type]
        analysis_confidence=float(confidence) if confidence is not None else None,
        nutrition_breakdown=row.get("nutrition_breakdown"),  # type: ignore[arg-type]
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
    )
