"""Conversion between wire timestamps and aware datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tradeclient.core.types import Timestamp

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_to_datetime(timestamp: Timestamp) -> datetime:
    """
    Decode a wire timestamp into a UTC datetime.

    Sub-microsecond precision is truncated.
    """
    return EPOCH + timedelta(seconds=timestamp.seconds, microseconds=timestamp.nanos // 1000)


def datetime_to_timestamp(value: datetime) -> Timestamp:
    """Encode a datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - EPOCH
    seconds = delta.days * 86400 + delta.seconds
    return Timestamp(seconds=seconds, nanos=delta.microseconds * 1000)
