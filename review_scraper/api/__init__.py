"""
review_scraper/api package marker.
"""
