"""Universally unique lexicographically sortable identifiers."""

from __future__ import annotations

import functools
import os
import secrets
import threading
import time as _time
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

ENCODED_SIZE = 26
BINARY_SIZE = 16
MAX_TIME = (1 << 48) - 1

_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_DECODE = {ch: value for value, ch in enumerate(_ALPHABET)}
_DECODE.update({ch.lower(): value for ch, value in list(_DECODE.items())})
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ENTROPY_BITS = 80


class ULIDError(ValueError):
    """Base class of ULID errors."""


class DataSizeError(ULIDError):
    """The input has the wrong length."""

    def __init__(self) -> None:
        super().__init__("ulid: bad data size when unmarshaling")


class InvalidCharactersError(ULIDError):
    """The input holds characters outside the base32 alphabet."""

    def __init__(self) -> None:
        super().__init__("ulid: bad data characters when unmarshaling")


class ValueOverflowError(ULIDError):
    """The encoded value does not fit in 128 bits."""

    def __init__(self) -> None:
        super().__init__("ulid: overflow when unmarshaling")


class ULIDZeroError(ULIDError):
    """The identifier is the all-zero value."""

    def __init__(self) -> None:
        super().__init__("ulid is zero")


class InvalidTimeError(ULIDError):
    """The time cannot be stored in an identifier."""

    def __init__(self) -> None:
        super().__init__("invalid time\nulid: bad time")


def _to_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


@functools.total_ordering
class ULID:
    """A 128-bit identifier: 48 bits of milliseconds, 80 bits of entropy."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = bytes(BINARY_SIZE)) -> None:
        data = bytes(data)
        if len(data) != BINARY_SIZE:
            raise DataSizeError()
        self._data = data

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        number = int.from_bytes(self._data, "big")
        return "".join(
            _ALPHABET[(number >> shift) & 31]
            for shift in range(5 * (ENCODED_SIZE - 1), -1, -5)
        )

    def __repr__(self) -> str:
        return f"ULID({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ULID):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: "ULID") -> bool:
        if not isinstance(other, ULID):
            return NotImplemented
        return self._data < other._data

    __hash__ = None  # type: ignore[assignment]

    def is_zero(self) -> bool:
        """Return True if every bit is zero."""
        return not any(self._data)

    def set_time(self, t: datetime) -> None:
        """Store t, to the millisecond, as the identifier's timestamp."""
        millis = _to_millis(t)
        if not 0 <= millis <= MAX_TIME:
            raise InvalidTimeError()
        self._data = millis.to_bytes(6, "big") + self._data[6:]

    def time(self) -> datetime:
        """Return the identifier's timestamp as an aware UTC datetime."""
        millis = int.from_bytes(self._data[:6], "big")
        return _EPOCH + timedelta(milliseconds=millis)

    def scan(self, src: Any) -> None:
        """Load the value from a database column: text, 16 bytes, or None."""
        if src is None:
            return
        if isinstance(src, str):
            self._data = bytes(parse_strict(src))
        elif isinstance(src, (bytes, bytearray, memoryview)):
            data = bytes(src)
            if len(data) != BINARY_SIZE:
                raise DataSizeError()
            self._data = data
        else:
            raise TypeError("ulid: source value must be a string or byte slice")

    def value(self) -> bytes:
        """Return the value to store in a database column."""
        return self._data


class _MonotonicEntropy:
    """Entropy that increases within the same millisecond."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._millis: Optional[int] = None
        self._value = 0

    def next(self, millis: int) -> int:
        with self._lock:
            if millis == self._millis:
                value = self._value + secrets.randbelow((1 << 32) - 1) + 1
                if value >> _ENTROPY_BITS:
                    raise ULIDError("ulid: monotonic entropy overflow")
            else:
                value = int.from_bytes(os.urandom(_ENTROPY_BITS // 8), "big")
                self._millis = millis
            self._value = value
            return value


_entropy = _MonotonicEntropy()


def new() -> ULID:
    """Return a new identifier stamped with the current time."""
    millis = _time.time_ns() // 1_000_000
    value = (millis << _ENTROPY_BITS) | _entropy.next(millis)
    return ULID(value.to_bytes(BINARY_SIZE, "big"))


def parse_strict(text: str) -> ULID:
    """Decode a 26-character base32 identifier, checking every character."""
    if len(text) != ENCODED_SIZE:
        raise DataSizeError()
    number = 0
    for ch in text:
        digit = _DECODE.get(ch)
        if digit is None:
            raise InvalidCharactersError()
        number = (number << 5) | digit
    if number >> (8 * BINARY_SIZE):
        raise ValueOverflowError()
    return ULID(number.to_bytes(BINARY_SIZE, "big"))


def parse(text: str) -> ULID:
    """Decode an identifier, rejecting the all-zero value."""
    ulid = parse_strict(text)
    if ulid.is_zero():
        raise ULIDZeroError()
    return ulid


def must_parse(text: str) -> ULID:
    """Decode an identifier that is known to be valid and non-zero."""
    return parse(text)