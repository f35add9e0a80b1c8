"""
review_scraper/api/dependencies.py

Shared FastAPI dependencies for request validation.
"""

from __future__ import annotations

from urllib.parse import urlparse

from fastapi import Query

from review_scraper.scraping.errors import InputError

ALLOWED_URL_SCHEMES = {"http", "https"}


def get_page_url(
    page: str | None = Query(default=None, description="Product page URL to scrape reviews from"),
) -> str:
    """
    Validate that `page` is present and is an absolute http(s) URL.
    """

    url = (page or "").strip()
    if not url:
        raise InputError(
            error="Missing URL",
            message="Please provide a product URL using the page parameter",
        )

    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InputError(error="Invalid URL", message="Please provide a valid URL") from exc

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        raise InputError(error="Invalid URL", message="Please provide a valid URL")
    return url
