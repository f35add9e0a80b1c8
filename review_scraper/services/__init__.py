"""
review_scraper/services package marker.
"""

from review_scraper.services.review_scraping_service import (
    ReviewScrapingService,
    get_review_scraping_service,
)

__all__ = [
    "ReviewScrapingService",
    "get_review_scraping_service",
]
