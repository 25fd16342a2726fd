"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from health_tracker.adapters.anthropic_completion_client import (
    HttpxAnthropicCompletionClient,
)
from health_tracker.adapters.openai_transcription_client import (
    OpenAITranscriptionClient,
)
from health_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from health_tracker.adapters.supabase_habit_repository import SupabaseHabitRepository
from health_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from health_tracker.config import Settings
from health_tracker.services.extraction import ExtractionService
from health_tracker.services.food import FoodService
from health_tracker.services.habits import HabitService
from health_tracker.services.transcription import TranscriptionService
from health_tracker.services.voice import VoiceService
from health_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    voice_service: VoiceService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    completion_client = HttpxAnthropicCompletionClient.create(
        api_key=resolved_settings.anthropic_api_key,
        model=resolved_settings.anthropic_model,
        base_url=resolved_settings.anthropic_base_url,
        timeout_seconds=resolved_settings.ai_timeout_seconds,
    )
    transcription_client = OpenAITranscriptionClient.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_transcription_model,
        timeout_seconds=resolved_settings.ai_timeout_seconds,
    )
    voice_service = VoiceService(
        transcription_service=TranscriptionService(transcription_client),
        extraction_service=ExtractionService(
            client=completion_client,
            max_tokens=resolved_settings.extraction_max_tokens,
            temperature=resolved_settings.extraction_temperature,
        ),
        food_service=FoodService(SupabaseFoodRepository(supabase_client)),
        workout_service=WorkoutService(SupabaseWorkoutRepository(supabase_client)),
        habit_service=HabitService(SupabaseHabitRepository(supabase_client)),
    )

    async def close_resources() -> None:
        await completion_client.close()
        await transcription_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        voice_service=voice_service,
        close_resources=close_resources,
    )
