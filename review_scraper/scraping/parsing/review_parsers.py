"""
BeautifulSoup-based review parsing for rendered product pages.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from review_scraper.domain.reviews import (
    DEFAULT_RATING,
    DEFAULT_REVIEWER,
    DEFAULT_TITLE,
    MAX_RATING,
    MIN_RATING,
    ReviewRecord,
)
from review_scraper.scraping.catalog import SelectorBundle

DIGITS_REGEX = re.compile(r"\d+")
RATING_ATTRIBUTES = ("data-rating", "data-score")
GENERIC_KEYWORDS = ("review", "rating")
GENERIC_MIN_TEXT_LENGTH = 20


def convert_rating(raw_score: str | None) -> int:
    """
    Convert a raw rating value to the 0-5 scale.

    The first run of digits is halved and rounded half up, then clamped.
    This assumes sources rate on a 0-10 style scale, which is an
    approximation rather than a per-platform truth. An empty value yields the
    default rating; a value without digits counts as zero.
    """

    if not raw_score:
        return DEFAULT_RATING
    match = DIGITS_REGEX.search(raw_score)
    score = int(match.group(0)) if match else 0
    return max(MIN_RATING, min(MAX_RATING, (score + 1) // 2))


class ReviewParsingLayer:
    """
    Deterministic review extraction from a parsed HTML document.
    """

    @staticmethod
    def parse_document(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    @classmethod
    def extract_reviews(
        cls,
        *,
        soup: BeautifulSoup,
        bundle: SelectorBundle,
    ) -> list[ReviewRecord]:
        """
        Map every container matched by `bundle` to a review record.

        Missing sub-elements fall back to defaults; records without body
        text are dropped.
        """

        records: list[ReviewRecord] = []
        for container in cls._select_first_matching(soup, bundle.review_container):
            body = cls._sub_element_text(container, bundle.review_text)
            if not body:
                continue
            records.append(
                ReviewRecord(
                    title=cls._sub_element_text(container, bundle.review_title) or DEFAULT_TITLE,
                    body=body,
                    rating=cls._extract_rating(container, bundle.rating),
                    reviewer=cls._sub_element_text(container, bundle.author) or DEFAULT_REVIEWER,
                )
            )
        return records

    @staticmethod
    def extract_generic_reviews(*, soup: BeautifulSoup) -> list[ReviewRecord]:
        """
        Last-resort scan: any element whose text mentions reviews or ratings.

        Nested elements all qualify, so the same text can appear several
        times; false positives are accepted here.
        """

        records: list[ReviewRecord] = []
        for element in soup.find_all(True):
            text = element.get_text()
            lowered = text.lower()
            if not any(keyword in lowered for keyword in GENERIC_KEYWORDS):
                continue
            body = text.strip()
            if len(body) <= GENERIC_MIN_TEXT_LENGTH:
                continue
            records.append(
                ReviewRecord(
                    title=DEFAULT_TITLE,
                    body=body,
                    rating=DEFAULT_RATING,
                    reviewer=DEFAULT_REVIEWER,
                )
            )
        return records

    @staticmethod
    def _select_first_matching(soup: BeautifulSoup, selectors: Sequence[str]) -> list[Tag]:
        for selector in selectors:
            found = soup.select(selector)
            if found:
                return found
        return []

    @staticmethod
    def _select_sub_element(container: Tag, selectors: Sequence[str]) -> Tag | None:
        for selector in selectors:
            element = container.select_one(selector)
            if element is not None:
                return element
        return None

    @classmethod
    def _sub_element_text(cls, container: Tag, selectors: Sequence[str]) -> str:
        element = cls._select_sub_element(container, selectors)
        if element is None:
            return ""
        return element.get_text().strip()

    @classmethod
    def _extract_rating(cls, container: Tag, selectors: Sequence[str]) -> int:
        element = cls._select_sub_element(container, selectors)
        if element is None:
            return DEFAULT_RATING

        raw_score: str | None = None
        for attribute in RATING_ATTRIBUTES:
            value = element.get(attribute)
            if value:
                raw_score = value if isinstance(value, str) else " ".join(value)
                break
        if raw_score is None:
            raw_score = element.get_text()
        return convert_rating(raw_score)
