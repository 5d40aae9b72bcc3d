"""Typed lookups of environment variables that fail loudly."""

from __future__ import annotations

import os
import re
from datetime import datetime, timedelta, timezone

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 63) - 1
_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(Z|[+-]\d{2}:\d{2})"
)
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _missing(env: str) -> LookupError:
    return LookupError(f"environment variable is not set to {env}")


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as RFC 3339 time")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second),
        microsecond, tzinfo=tz,
    )


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f'parsing "{text}": invalid syntax')


def look_up_string(env: str, required: bool) -> str:
    """Return the variable's value; a missing one is an error if required, else ""."""
    value = os.environ.get(env)
    if value is not None:
        return value
    if required:
        raise _missing(env)
    return ""


def look_up_int(env: str) -> int:
    """Return the variable as a decimal integer; it must be set."""
    value = os.environ.get(env)
    if value is None:
        raise _missing(env)
    return _parse_int(value)


def look_up_time(env: str) -> datetime:
    """Return the variable as an RFC 3339 time; it must be set."""
    value = os.environ.get(env)
    if value is None:
        raise _missing(env)
    return _parse_rfc3339(value)


def look_up_bool(env: str, required: bool) -> bool:
    """Return the variable as a boolean.

    A missing or unparsable value is an error if required, else False.
    """
    value = os.environ.get(env)
    if value is None:
        if required:
            raise _missing(env)
        return False
    try:
        return _parse_bool(value)
    except ValueError as exc:
        if required:
            raise ValueError(f"environment variable is not set to {env} {exc}") from exc
        return False