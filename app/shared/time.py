"""Time helpers.

Timestamps are stored as naive UTC datetimes, matching what the database
server default ``now()`` writes.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time without tzinfo"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value):
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
