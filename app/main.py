"""FastAPI application for the in-memory notes service.

Run with:
    uvicorn app.main:app --reload
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.exceptions import InvalidArgumentError
from app.core.logging import get_logger, setup_logging
from app.features.notes.repository import NoteRepository
from app.features.notes.routes import router as notes_router

logger = get_logger(__name__)


async def invalid_argument_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate validation failures raised by the notes domain into HTTP 400."""
    logger.warning(
        "api.invalid_argument",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Build the application with a fresh, empty note repository.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()
    setup_logging(
        settings.log_level, json_logs=settings.log_json, cache_loggers=settings.log_cache
    )

    app = FastAPI(title=settings.app_name)
    app.state.repository = NoteRepository()
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.include_router(notes_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str | int]:
        """Report service status and the number of stored notes."""
        repository: NoteRepository = app.state.repository
        return {
            "status": "healthy",
            "app_name": settings.app_name,
            "environment": settings.environment,
            "notes": len(repository.get_all_notes()),
        }

    logger.info("app.created", app_name=settings.app_name, environment=settings.environment)
    return app


app = create_app()
