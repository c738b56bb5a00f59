"""Timestamp helpers for savepoint age checks."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime

logger = logging.getLogger(__name__)

# Full date, full time and a mandatory offset, as written by the reconciler.
_RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


def parse_timestamp(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp.

    Returns ``None`` when the value is blank, not RFC 3339 (date-only, basic
    format, missing offset) or out of the representable range.
    """

    text = value.strip()
    if not text:
        return None
    if _RFC3339_PATTERN.fullmatch(text) is None:
        logger.warning("Ignoring non-RFC 3339 timestamp '%s'.", value)
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except (ValueError, OverflowError):
        logger.warning("Ignoring unparseable timestamp '%s'.", value)
        return None
    return ensure_utc(parsed)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and normalise aware ones.

    Aware values at the edge of the datetime range keep their own offset;
    arithmetic between aware datetimes does not need them in UTC.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone(UTC)
    except OverflowError:
        return value


def is_within_age(timestamp: str, compare_time: datetime, max_age_seconds: int) -> bool:
    """Whether less than ``max_age_seconds`` elapsed from ``timestamp`` to ``compare_time``."""

    recorded = parse_timestamp(timestamp)
    if recorded is None:
        return False
    elapsed = ensure_utc(compare_time) - recorded
    # Compared in seconds: a timedelta cannot hold every allowed max age.
    return elapsed.total_seconds() < max_age_seconds


__all__ = ["ensure_utc", "is_within_age", "parse_timestamp"]
