"""
review_scraper package marker.
"""
