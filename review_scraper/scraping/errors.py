"""
Error taxonomy for the review scraping pipeline.
"""

from __future__ import annotations


class ReviewScrapingError(Exception):
    """
    Base class for every error raised by the scraping pipeline.
    """


class InputError(ReviewScrapingError):
    """
    Rejected request input (missing or malformed page URL).
    """

    def __init__(self, *, error: str, message: str) -> None:
        super().__init__(message)
        self.error = error
        self.message = message


class NavigationFailed(ReviewScrapingError):
    """
    Every navigation strategy failed to load the target page.
    """

    def __init__(self, *, url: str, last_error: str | None) -> None:
        self.url = url
        self.last_error = last_error
        detail = last_error or "no navigation strategy was attempted"
        super().__init__(f"Failed to load page with all strategies: {detail}")


class ExtractionError(ReviewScrapingError):
    """
    The page could not be read while evaluating review selectors.
    """


class ScrapeFailed(ReviewScrapingError):
    """
    Unrecoverable failure anywhere else in a scrape run.
    """
