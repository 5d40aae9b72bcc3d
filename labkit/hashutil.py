"""SHA-256 hashes of strings, bytes and arbitrary values, URL-safe base64 encoded."""

from __future__ import annotations

import base64
import hashlib
from typing import Any


def hash_bytes(data: bytes) -> str:
    """Return the URL-safe base64 SHA-256 digest of data."""
    digest = hashlib.sha256(bytes(data)).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def hash_string(text: str) -> str:
    """Return the URL-safe base64 SHA-256 digest of the UTF-8 text."""
    return hash_bytes(text.encode("utf-8"))


def hash_struct(value: Any) -> str:
    """Return the URL-safe base64 SHA-256 digest of the value's string form."""
    return hash_string(str(value))