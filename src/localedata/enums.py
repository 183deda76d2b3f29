"""Enumerations for localedata type-safe constants.

Uses StrEnum (Python 3.11+) for the request selectors so that configuration
read from text ("merge-all", "replace") converts directly. Markers use a
plain Enum: they must never compare equal to a string that happens to be
locale data.

Python 3.13+.
"""

from enum import Enum, StrEnum

__all__ = [
    "ArrayMode",
    "Marker",
    "MergePolicy",
]


class MergePolicy(StrEnum):
    """How the values of several fragments combine into one result.

    StrEnum provides automatic string conversion: str(MergePolicy.MERGE_ALL) == "merge-all"
    """

    MERGE_ALL = "merge-all"
    """Deep-merge every fragment, most specific last."""

    RETURN_ONE = "return-one"
    """Value of the least specific fragment that has data."""

    MOST_SPECIFIC = "most-specific"
    """Value of the most specific fragment that has data."""


class ArrayMode(StrEnum):
    """How lists nested in fragment values merge under MERGE_ALL."""

    CONCATENATE = "concatenate"
    """Generic list followed by the specific list."""

    REPLACE = "replace"
    """The specific list replaces the generic one."""


class Marker(Enum):
    """Cache and slot states that are not data.

    Compare with ``is``. ``None`` and empty containers are valid locale data
    and are never used to signal absence.
    """

    UNSET = "unset"
    """Never checked."""

    NOT_FOUND = "not_found"
    """Checked, no data exists."""

    def __repr__(self) -> str:
        """Return a compact representation for debugging."""
        return f"<{self.name}>"
