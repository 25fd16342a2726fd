"""Supabase repository for workouts."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.extraction import ParsedWorkoutItem
from health_tracker.domain.records import WorkoutRecord
from health_tracker.services.workouts import WorkoutRepository


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workouts."""

    client: Client

    def create_many(
        self, user_id: UUID, workouts: list[ParsedWorkoutItem]
    ) -> list[WorkoutRecord]:
        """Insert completed workout rows and return them."""
        timestamp = datetime.now(tz=UTC).isoformat()
        payload = [
            {
                "user_id": str(user_id),
                "name": workout.name,
                "type": workout.type,
                "duration": workout.duration,
                "calories": workout.calories,
                "completed": True,
                "notes": workout.notes,
                "timestamp": timestamp,
            }
            for workout in workouts
        ]
        response = self.client.table("workouts").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create workouts")
        return [_parse_workout(row) for row in response.data]


def _parse_workout(row: dict[str, object]) -> WorkoutRecord:
    return WorkoutRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        type=row.get("type", "other"),  # type: ignore[arg-type]
        duration=int(row.get("duration", 0)),
        calories=int(row.get("calories", 0)),
        completed=bool(row.get("completed", True)),
        notes=row.get("notes"),  # type: ignore[arg-type]
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
    )
