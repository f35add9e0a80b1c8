"""
Selector catalog: ordered CSS selector bundles for known review widgets.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

GENERIC_PLATFORM = "generic"


def normalize_selector(value: object) -> tuple[str, ...]:
    """
    Coerce a selector field into an ordered tuple of non-empty selectors.

    A single string becomes a one-element tuple; non-string list items and
    blank strings are dropped.
    """

    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
    return ()


@dataclass(frozen=True)
class SelectorBundle:
    """
    The five lookups needed to locate one review and its fields.

    Each field is an ordered sequence of alternatives; the first alternative
    that matches anything wins.
    """

    platform_name: str
    review_container: tuple[str, ...]
    review_title: tuple[str, ...] = ()
    review_text: tuple[str, ...] = ()
    rating: tuple[str, ...] = ()
    author: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        platform_name: str,
        *,
        review_container: str | Sequence[str],
        review_title: str | Sequence[str] = (),
        review_text: str | Sequence[str] = (),
        rating: str | Sequence[str] = (),
        author: str | Sequence[str] = (),
    ) -> "SelectorBundle":
        name = platform_name.strip().lower()
        if not name:
            raise ValueError("Selector bundle requires a platform name.")
        container = normalize_selector(review_container)
        if not container:
            raise ValueError(f"Selector bundle '{name}' requires a review container selector.")
        return cls(
            platform_name=name,
            review_container=container,
            review_title=normalize_selector(review_title),
            review_text=normalize_selector(review_text),
            rating=normalize_selector(rating),
            author=normalize_selector(author),
        )


@dataclass(frozen=True)
class SelectorCatalog:
    """
    Immutable, ordered collection of selector bundles keyed by platform name.
    """

    bundles: tuple[SelectorBundle, ...]

    def __post_init__(self) -> None:
        names = [bundle.platform_name for bundle in self.bundles]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate platform names in selector catalog: {', '.join(duplicates)}.")

    def __iter__(self) -> Iterator[SelectorBundle]:
        return iter(self.bundles)

    def __len__(self) -> int:
        return len(self.bundles)

    def names(self) -> list[str]:
        return [bundle.platform_name for bundle in self.bundles]

    def get(self, platform_name: str) -> SelectorBundle | None:
        normalized = platform_name.strip().lower()
        for bundle in self.bundles:
            if bundle.platform_name == normalized:
                return bundle
        return None


DEFAULT_SELECTOR_CATALOG = SelectorCatalog(
    bundles=(
        SelectorBundle.build(
            "yotpo",
            review_container=".yotpo-review",
            review_title=".yotpo-review-title",
            review_text=".content-review",
            rating=".yotpo-stars",
            author=".yotpo-user-name",
        ),
        SelectorBundle.build(
            "shopify",
            review_container=".spr-review",
            review_title=".spr-review-header-title",
            review_text=".spr-review-content-body",
            rating=".spr-starrating",
            author=".spr-review-header-byline",
        ),
        SelectorBundle.build(
            "judgeme",
            review_container=".jdgm-rev",
            review_title=".jdgm-rev__title",
            review_text=".jdgm-rev__body",
            rating=".jdgm-rev__rating",
            author=".jdgm-rev__author",
        ),
        SelectorBundle.build(
            GENERIC_PLATFORM,
            review_container=[
                ".review",
                "[data-review]",
                ".review-item",
                ".product-review",
                ".customer-review",
            ],
            review_title=[".review-title", ".review-heading", "h3", ".title"],
            review_text=[".review-content", ".review-text", ".review-body", "p"],
            rating=[".rating", ".stars", "[data-rating]", ".star-rating"],
            author=[".reviewer", ".author", ".customer-name", ".review-author"],
        ),
    )
)
