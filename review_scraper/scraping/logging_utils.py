"""
Structured logging helpers for scraping workflows.
"""

from __future__ import annotations

import json
import logging
from typing import Any

_MAX_TEXT_FIELD_LENGTH = 300


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured log line as compact JSON.

    Long string fields (error messages, page text) are truncated so a single
    event stays on one readable line.
    """

    payload = {"event": event}
    for key, value in fields.items():
        if isinstance(value, str) and len(value) > _MAX_TEXT_FIELD_LENGTH:
            value = value[:_MAX_TEXT_FIELD_LENGTH] + "..."
        payload[key] = value
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))
