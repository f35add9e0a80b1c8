"""
review_scraper/domain package marker.
"""

from review_scraper.domain.reviews import (
    DEFAULT_RATING,
    DEFAULT_REVIEWER,
    DEFAULT_TITLE,
    ReviewRecord,
)

__all__ = [
    "DEFAULT_RATING",
    "DEFAULT_REVIEWER",
    "DEFAULT_TITLE",
    "ReviewRecord",
]
