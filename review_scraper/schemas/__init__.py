"""
review_scraper/schemas package marker.
"""

from review_scraper.schemas.reviews import (
    ErrorResponse,
    HealthResponse,
    ReviewListResponse,
    ReviewResponse,
    RootResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ReviewListResponse",
    "ReviewResponse",
    "RootResponse",
]
