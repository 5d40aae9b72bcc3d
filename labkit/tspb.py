"""Conversion between protobuf timestamps and datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from google.protobuf.timestamp_pb2 import Timestamp

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _aware(moment: datetime) -> datetime:
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


def to_time(timestamp: Optional[Timestamp]) -> datetime:
    """Return the timestamp as an aware UTC datetime; None gives ZERO_TIME."""
    if timestamp is None:
        return ZERO_TIME
    return _EPOCH + timedelta(
        seconds=timestamp.seconds, microseconds=timestamp.nanos // 1000
    )


def to_timestamp(moment: datetime) -> Optional[Timestamp]:
    """Return the datetime as a timestamp; ZERO_TIME gives None.

    A naive datetime is taken to be in UTC.
    """
    delta = _aware(moment) - _EPOCH
    if _aware(moment) == ZERO_TIME:
        return None
    return Timestamp(
        seconds=delta.days * 86400 + delta.seconds,
        nanos=delta.microseconds * 1000,
    )