from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from review_scraper.api.errors import register_exception_handlers
from review_scraper.config import get_app_settings
from review_scraper.schemas.reviews import HealthResponse, RootResponse

ENDPOINTS = {
    "health": "/health",
    "reviews": "/api/reviews?page=<url>",
}
CORS_ALLOW_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    logging.basicConfig(
        level=getattr(logging, get_app_settings().log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Log the exposed endpoints on boot."""
    log = logging.getLogger(__name__)
    log.info("%s %s started", application.title, application.version)
    for name, path in ENDPOINTS.items():
        log.info("Endpoint %s: %s", name, path)
    yield
    log.info("%s shut down", application.title)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _configure_logging()
    settings = get_app_settings()

    application = FastAPI(
        title=settings.title,
        version=settings.version,
        lifespan=_lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=CORS_ALLOW_HEADERS,
    )
    register_exception_handlers(application)

    from review_scraper.api.routers import reviews_router

    application.include_router(reviews_router)

    @application.get("/")
    def root() -> RootResponse:
        return RootResponse(message="Welcome to Review Scraper API")

    @application.get("/health")
    def healthcheck() -> HealthResponse:
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc),
            endpoints=ENDPOINTS,
        )

    return application


app = create_app()
