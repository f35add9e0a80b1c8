"""
review_scraper/api/errors.py

Translation of pipeline errors into HTTP responses.
"""

from __future__ import annotations

import logging
import re

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from review_scraper.schemas.reviews import ErrorResponse
from review_scraper.scraping.errors import InputError, NavigationFailed, ReviewScrapingError

logger = logging.getLogger(__name__)

TIMEOUT_PATTERN = re.compile(r"navigation timeout|timeout \d+ms exceeded", flags=re.IGNORECASE)
CONNECTION_REFUSED_PATTERN = re.compile(r"ERR_CONNECTION_REFUSED")


def classify_scrape_error(exc: Exception) -> tuple[int, ErrorResponse]:
    """
    Map a scraping failure to a status code and response body by its message.

    Only a failed page load can be a gateway timeout; a timeout while
    launching the browser is an ordinary scrape failure.
    """

    message = str(exc)
    if isinstance(exc, NavigationFailed) and TIMEOUT_PATTERN.search(exc.last_error or ""):
        return status.HTTP_504_GATEWAY_TIMEOUT, ErrorResponse(
            error="Gateway Timeout",
            message="The page took too long to load. Please try again later.",
        )
    if CONNECTION_REFUSED_PATTERN.search(message):
        return status.HTTP_503_SERVICE_UNAVAILABLE, ErrorResponse(
            error="Service Unavailable",
            message="Could not connect to the target website. Please try again later.",
        )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(
        error="Failed to fetch reviews",
        message="Unable to scrape reviews from the provided URL",
    )


async def _handle_input_error(request: Request, exc: InputError) -> JSONResponse:
    payload = ErrorResponse(error=exc.error, message=exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload.model_dump())


async def _handle_scraping_error(request: Request, exc: ReviewScrapingError) -> JSONResponse:
    logger.error("Review scraping failed for %s: %s", request.url.path, exc)
    status_code, payload = classify_scrape_error(exc)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    payload = ErrorResponse(
        error="Internal Server Error",
        message=str(exc) or "An unexpected error occurred",
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload.model_dump())


def register_exception_handlers(application: FastAPI) -> None:
    # InputError subclasses ReviewScrapingError; Starlette picks the most specific handler.
    application.add_exception_handler(InputError, _handle_input_error)
    application.add_exception_handler(ReviewScrapingError, _handle_scraping_error)
    application.add_exception_handler(Exception, _handle_unexpected_error)
