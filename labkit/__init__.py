"""Small service utilities: LIKE escaping, BOM handling, hashing, task groups, ULIDs, timestamp casting and configuration helpers."""

__version__ = "0.1.0"

__all__ = [
    "awslocal",
    "envlookup",
    "errgroup",
    "hashutil",
    "osext",
    "sqlescape",
    "sqsoptions",
    "tspb",
    "ulid",
    "utf8bom",
]