"""
Config helpers for review scraping.
"""

from review_scraper.scraping.config.loader import (
    get_review_scraping_settings,
    get_selector_catalog,
    load_selector_catalog,
)
from review_scraper.scraping.config.models import NavigationStrategy, ReviewScrapingSettings

__all__ = [
    "NavigationStrategy",
    "ReviewScrapingSettings",
    "get_review_scraping_settings",
    "get_selector_catalog",
    "load_selector_catalog",
]
