"""Date helpers for request paths and log metadata."""

from __future__ import annotations

from datetime import date, datetime, timezone

from mensa.common.constants import DATE_FORMAT


def format_day(value: date | str) -> str:
    """Return ``value`` as ``YYYY-MM-DD``.

    Strings must already be ISO-8601 calendar dates; anything else raises
    ``ValueError`` so no request is made for a malformed date.
    """
    if isinstance(value, datetime):
        return value.date().strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    parsed = date.fromisoformat(value)
    return parsed.strftime(DATE_FORMAT)


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")
