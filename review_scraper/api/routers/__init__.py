"""
review_scraper/api/routers package marker.
"""

from review_scraper.api.routers.reviews import router as reviews_router

__all__ = ["reviews_router"]
