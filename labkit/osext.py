"""Environment helpers."""

from __future__ import annotations

import os


def lookup_env(key: str, default_value: str) -> str:
    """Return the environment variable key, or default_value if it is unset."""
    return os.environ.get(key, default_value)