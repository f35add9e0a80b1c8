"""
review_scraper/schemas/reviews.py

Response schemas for the review scraping API.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewResponse(BaseModel):
    """
    API response model for one extracted review.
    """

    model_config = ConfigDict(extra="forbid")

    title: str
    body: str = Field(..., min_length=1)
    rating: int = Field(..., ge=0, le=5)
    reviewer: str


class ReviewListResponse(BaseModel):
    """
    Reviews scraped from one product page.
    """

    reviews_count: int = Field(..., ge=0)
    reviews: list[ReviewResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    endpoints: dict[str, str]


class RootResponse(BaseModel):
    message: str
