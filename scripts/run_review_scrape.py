"""
Run review scraping for one product page from the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging

from review_scraper.scraping.errors import ReviewScrapingError
from review_scraper.services.review_scraping_service import ReviewScrapingService


def main() -> int:
    parser = argparse.ArgumentParser(description="Scrape customer reviews from a product page.")
    parser.add_argument(
        "--page",
        dest="page",
        required=True,
        help="Product page URL.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        help="Logging level for pipeline events.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.strip().upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    service = ReviewScrapingService()
    try:
        reviews = asyncio.run(service.fetch_reviews(url=args.page))
    except ReviewScrapingError as exc:
        print(json.dumps({"error": type(exc).__name__, "message": str(exc)}, indent=2))
        return 1

    payload = {
        "reviews_count": len(reviews),
        "reviews": [
            {
                "title": review.title,
                "body": review.body,
                "rating": review.rating,
                "reviewer": review.reviewer,
            }
            for review in reviews
        ],
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
