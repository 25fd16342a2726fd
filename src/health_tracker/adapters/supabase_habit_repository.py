"""Supabase repository for habits and habit completions."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from health_tracker.domain.records import HabitCompletion, HabitRecord
from health_tracker.services.habits import HabitRepository


@dataclass
class SupabaseHabitRepository(HabitRepository):
    """Supabase implementation for habits."""

    client: Client

    def list_active(self, user_id: UUID) -> list[HabitRecord]:
        """Return active habits ordered by creation time."""
        response = (
            self.client.table("habits")
            .select("id, name, active")
            .eq("user_id", str(user_id))
            .eq("active", True)
            .order("created_at", desc=False)
            .execute()
        )
        return [
            HabitRecord(
                id=UUID(str(row["id"])),
                name=str(row.get("name", "")),
                active=bool(row.get("active", True)),
            )
            for row in response.data or []
        ]

    def list_completed_habit_ids(
        self, user_id: UUID, habit_ids: list[UUID], on_date: date
    ) -> set[UUID]:
        """Return habit ids that already have a completion on the date."""
        response = (
            self.client.table("habit_completions")
            .select("habit_id")
            .eq("user_id", str(user_id))
            .eq("date", on_date.isoformat())
            .in_("habit_id", [str(habit_id) for habit_id in habit_ids])
            .execute()
        )
        return {UUID(str(row["habit_id"])) for row in response.data or []}

    def create_completions(
        self, user_id: UUID, habit_ids: list[UUID], on_date: date
    ) -> list[HabitCompletion]:
        """Insert completion rows for the date and return them."""
        payload = [
            {
                "habit_id": str(habit_id),
                "user_id": str(user_id),
                "date": on_date.isoformat(),
            }
            for habit_id in habit_ids
        ]
        response = self.client.table("habit_completions").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create habit completions")
        return [
            HabitCompletion(
                id=UUID(str(row["id"])),
                habit_id=UUID(str(row["habit_id"])),
                user_id=UUID(str(row["user_id"])),
                date=date.fromisoformat(str(row["date"])),
            )
            for row in response.data
        ]
