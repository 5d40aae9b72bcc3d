"""Escaping of the special characters of SQL LIKE patterns."""

from __future__ import annotations

_SPECIAL = frozenset("%_")


def escape_like(s: str) -> str:
    """Escape LIKE wildcards using a backslash as the escape character."""
    return escape_like_with_char(s, "\\")


def escape_like_with_char(s: str, c: str) -> str:
    """Escape LIKE wildcards and the escape character c itself.

    c must be a single character encoded as one byte in UTF-8.
    """
    if len(c) != 1 or len(c.encode("utf-8")) != 1:
        raise ValueError("set 'c' to a character with a length of 1 as rune.")
    return "".join(c + ch if ch == c or ch in _SPECIAL else ch for ch in s)