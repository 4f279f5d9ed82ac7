"""Lenient date parsing for feed output.

Feed dates come from content front matter in whatever shape authors typed.
Anything unparseable falls back to "now" instead of raising.

Example:
    >>> from collectionspine.render.dates import parse_date, format_rfc2822, format_w3c_date
    >>> dt = parse_date("2024-01-15T10:30:00Z")
    >>> format_rfc2822(dt)
    'Mon, 15 Jan 2024 10:30:00 +0000'
    >>> format_w3c_date(parse_date("Mon, 15 Jan 2024 10:30:00 GMT"))
    '2024-01-15'
"""

from __future__ import annotations

import contextlib
from datetime import UTC, date, datetime
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any


def _as_utc(dt: datetime) -> datetime:
    # Naive values are taken as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def _from_timestamp(value: float, fallback: datetime) -> datetime:
    try:
        return datetime.fromtimestamp(value, UTC)
    except (OverflowError, OSError, ValueError):
        return fallback


def parse_date(value: Any, now: datetime | None = None) -> datetime:
    """Parse a date-like value, falling back to ``now``.

    Accepts datetimes, dates, Unix timestamps, ISO-8601 and RFC 2822
    strings.

    Args:
        value: Value to parse.
        now: Fallback value (default: current UTC time).

    Returns:
        Timezone-aware datetime.
    """
    fallback = _as_utc(now) if now is not None else datetime.now(UTC)

    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, bool) or value is None:
        return fallback
    if isinstance(value, int | float):
        return _from_timestamp(value, fallback)
    if not isinstance(value, str):
        return fallback

    text = value.strip()
    if not text:
        return fallback
    digits = text.removeprefix("-")
    if digits.isascii() and digits.isdecimal():
        with contextlib.suppress(ValueError):
            return _from_timestamp(int(text), fallback)
        return fallback

    with contextlib.suppress(ValueError):
        return _as_utc(datetime.fromisoformat(text))
    with contextlib.suppress(TypeError, ValueError, IndexError):
        return _as_utc(parsedate_to_datetime(text))
    return fallback


def format_rfc2822(dt: datetime) -> str:
    """Format for RSS ``pubDate``/``lastBuildDate``."""
    return format_datetime(_as_utc(dt))


def format_w3c_date(dt: datetime) -> str:
    """Format for sitemap ``lastmod`` (date only)."""
    return dt.date().isoformat()
