"""Timestamp helpers."""

from datetime import date, datetime, timezone


def format_iso_utc(value: date) -> str:
    """Format a timestamp as ISO 8601.

    Datetimes are converted to UTC and use the ``Z`` suffix. Naive datetimes
    are taken to already be in UTC. Plain dates render as ``YYYY-MM-DD``.

    Example:
        >>> format_iso_utc(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        '2024-01-02T03:04:05Z'
    """
    if not isinstance(value, datetime):
        return value.isoformat()

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
