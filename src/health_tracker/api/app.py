"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Literal

from fastapi import (
    Depends,
    FastAPI,
    File,
    Form,
    Header,
    HTTPException,
    Request,
    UploadFile,
    status,
)
from fastapi.responses import JSONResponse

from health_tracker.api.models import (
    CreatedEntryModel,
    ErrorResponse,
    QuickLogRequest,
    QuickLogResponse,
    TranscribeResponse,
)
from health_tracker.app_logging import configure_logging
from health_tracker.containers import AppContainer
from health_tracker.domain.errors import AIProcessingError, InvalidAudioError
from health_tracker.domain.voice import ProcessingOutcome

_AI_ERRORS: dict[int | str, dict[str, Any]] = {
    status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
}
_TRANSCRIBE_ERRORS: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    **_AI_ERRORS,
}


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidAudioError)
    async def invalid_audio_handler(
        request: Request, exc: InvalidAudioError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=str(exc), code="INVALID_AUDIO").model_dump(),
        )

    @app.exception_handler(AIProcessingError)
    async def ai_processing_handler(
        request: Request, exc: AIProcessingError
    ) -> JSONResponse:
        logger.warning("AI processing error (%s): %s", exc.code, exc)
        status_code = (
            status.HTTP_429_TOO_MANY_REQUESTS
            if exc.reason == "rate_limited"
            else status.HTTP_502_BAD_GATEWAY
        )
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(error=str(exc), code=exc.code).model_dump(),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/voice/transcribe",
        dependencies=[Depends(require_api_token)],
        response_model=TranscribeResponse,
        responses=_TRANSCRIBE_ERRORS,
    )
    async def transcribe(
        request: Request,
        audio: UploadFile = File(...),
        context: Literal["food", "workout", "general"] | None = Form(default=None),
    ) -> TranscribeResponse:
        """Transcribe an audio note and extract health data from it."""
        state_container: AppContainer = request.app.state.container
        audio_bytes = await audio.read()
        outcome = await state_container.voice_service.transcribe_and_extract(
            audio_bytes,
            audio.content_type or "",
            context,
        )
        return TranscribeResponse(
            transcription=outcome.transcription,
            extracted_data=outcome.extracted_data,
            alternatives=outcome.alternatives,
        )

    @app.post(
        "/voice/quick-log",
        dependencies=[Depends(require_api_token)],
        response_model=QuickLogResponse,
        responses=_AI_ERRORS,
    )
    async def quick_log(payload: QuickLogRequest, request: Request) -> QuickLogResponse:
        """Extract health data from text and create entries."""
        state_container: AppContainer = request.app.state.container
        outcome = await state_container.voice_service.process_text_input(
            payload.user_id,
            payload.transcription,
            auto_create=payload.auto_create,
        )
        return _quick_log_response(outcome)

    return app


def _quick_log_response(outcome: ProcessingOutcome) -> QuickLogResponse:
    return QuickLogResponse(
        created_entries=[
            CreatedEntryModel(
                type=entry.kind,
                id=entry.id,
                name=entry.name,
                details=entry.details,
            )
            for entry in outcome.created_entries
        ],
        message=outcome.message,
    )
