"""Conversions between epoch milliseconds and timezone-aware UTC datetimes."""

from datetime import datetime, timedelta, timezone

UTC = timezone.utc
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def from_epoch_millis(millis: int) -> datetime:
    """Return the UTC datetime ``millis`` milliseconds after the epoch.

    Raises OverflowError when the instant falls outside datetime's range.
    """
    return EPOCH + timedelta(milliseconds=millis)


def to_epoch_millis(dt: datetime) -> int:
    """Return the epoch milliseconds of ``dt``; naive values are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - EPOCH) // timedelta(milliseconds=1)


def utc_year(dt: datetime) -> int:
    """Calendar year of ``dt`` in UTC."""
    if dt.tzinfo is None:
        return dt.year
    return dt.astimezone(UTC).year
