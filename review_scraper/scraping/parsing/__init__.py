"""
HTML parsing helpers for rendered review pages.
"""

from review_scraper.scraping.parsing.review_parsers import ReviewParsingLayer, convert_rating

__all__ = ["ReviewParsingLayer", "convert_rating"]
