"""Adding and removing the UTF-8 byte order mark."""

from __future__ import annotations

BOM = b"\xef\xbb\xbf"


def add_bom(data: bytes) -> bytes:
    """Return data with a UTF-8 BOM in front."""
    return BOM + bytes(data)


def remove_bom(data: bytes) -> bytes:
    """Return data without a leading UTF-8 BOM, if it has one."""
    if data[: len(BOM)] == BOM:
        return data[len(BOM):]
    return data