"""
review_scraper/domain/reviews.py

Domain model for one extracted customer review.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TITLE = "Product Review"
DEFAULT_REVIEWER = "Anonymous"
DEFAULT_RATING = 5
MIN_RATING = 0
MAX_RATING = 5


@dataclass(frozen=True)
class ReviewRecord:
    """
    Normalized review: non-empty body, rating on the 0-5 scale.
    """

    title: str
    body: str
    rating: int
    reviewer: str

    def __post_init__(self) -> None:
        if not self.body.strip():
            raise ValueError("Review body must not be empty.")
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(f"Review rating {self.rating} is outside {MIN_RATING}..{MAX_RATING}.")
