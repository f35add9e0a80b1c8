"""
review_scraper/api/routers/reviews.py

Product review scraping endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from review_scraper.api.dependencies import get_page_url
from review_scraper.schemas.reviews import ErrorResponse, ReviewListResponse, ReviewResponse
from review_scraper.services.review_scraping_service import (
    ReviewScrapingService,
    get_review_scraping_service,
)

router = APIRouter(prefix="/api", tags=["reviews"])


@router.get(
    "/reviews",
    response_model=ReviewListResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def get_reviews(
    url: str = Depends(get_page_url),
    scraping_service: ReviewScrapingService = Depends(get_review_scraping_service),
) -> ReviewListResponse:
    """
    Scrape customer reviews from the product page given in `page`.
    """

    reviews = await scraping_service.fetch_reviews(url=url)
    return ReviewListResponse(
        reviews_count=len(reviews),
        reviews=[
            ReviewResponse(
                title=review.title,
                body=review.body,
                rating=review.rating,
                reviewer=review.reviewer,
            )
            for review in reviews
        ],
    )
