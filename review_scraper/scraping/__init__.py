"""
Review scraping pipeline: browser sessions, navigation, extraction.
"""
