"""Enums for the preference center."""

from enum import StrEnum


class Source(StrEnum):
    """Platform the recipient came from."""

    HUBSPOT = "hubspot"
    REACHINBOX = "reachinbox"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value) -> "Source":
        """Map a raw source hint to a Source, anything unexpected is UNKNOWN."""
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.UNKNOWN
