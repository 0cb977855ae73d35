"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from tts_portal.adapters.tts_api_client import ApiClientError, ApiResponseFormatError
from tts_portal.api.demo import DEMO_PAGE_HTML
from tts_portal.api.pages import router as pages_router
from tts_portal.app_logging import configure_logging
from tts_portal.containers import AppContainer
from tts_portal.domain.errors import (
    ApiError,
    GenerationInProgressError,
    InvalidGenerationRequest,
    NotAuthenticatedError,
)


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

    app.include_router(pages_router)

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated(
        request: Request, exc: NotAuthenticatedError
    ) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, str(exc) or "Not authenticated")

    @app.exception_handler(ApiError)
    async def api_error(request: Request, exc: ApiError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(ApiClientError)
    async def api_client_error(request: Request, exc: ApiClientError) -> JSONResponse:
        if isinstance(exc, ApiResponseFormatError):
            logger.error("Malformed TTS API response for %s: %s", request.url.path, exc)
        return _error(status.HTTP_502_BAD_GATEWAY, "Request failed")

    @app.exception_handler(InvalidGenerationRequest)
    async def invalid_generation(
        request: Request, exc: InvalidGenerationRequest
    ) -> JSONResponse:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    @app.exception_handler(GenerationInProgressError)
    async def generation_in_progress(
        request: Request, exc: GenerationInProgressError
    ) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def demo_page() -> HTMLResponse:
        """Minimal demo UI that consumes the page endpoints."""
        return HTMLResponse(DEMO_PAGE_HTML)

    return app


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})
