"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flashdeck.config import configure_logging, get_settings
from flashdeck.database import dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import DomainError, ValidationError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.learning.routers import cards, decks

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and the database engine for the lifetime of the app."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


async def flashdeck_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Render application errors with the status code they carry."""
    assert isinstance(exc, FlashdeckError)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Render domain rule violations; invalid input becomes 400."""
    assert isinstance(exc, DomainError)
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
        )
    logger.warning("domain_error", error=exc.message)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, content={"detail": exc.message}
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FlashdeckError, flashdeck_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)

    app.include_router(decks.router, prefix=settings.API_V1_PREFIX)
    app.include_router(cards.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()
