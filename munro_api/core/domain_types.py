"""Domain Types — rich types that replace bare primitives in the query engine.

Invariants:
    - RunningNumber is the dataset-assigned identifier, never generated here
    - HillCategory is closed over the post-1997 statuses included by default
    - Category lookup is exact and case-sensitive; sort lookup is case-insensitive

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RunningNumber = NewType("RunningNumber", int)


# ─── Value Types ─────────────────────────────────────────────────

HeightInMetres = NewType("HeightInMetres", float)   # >= 0 by convention


# ─── Enums ───────────────────────────────────────────────────────

class HillCategory(str, Enum):
    """Post-1997 classification of a hill. Empty marker = not listed."""
    MUN = "MUN"
    TOP = "TOP"

    @classmethod
    def parse(cls, value: str) -> "HillCategory | None":
        """Exact-match lookup. Returns None for anything outside the vocabulary."""
        for member in cls:
            if member.value == value:
                return member
        return None


class SortDirection(str, Enum):
    """Sort directive for a single key."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortDirection | None":
        """Case-insensitive lookup. Unrecognised or absent means no sort."""
        if value is None:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


class RowRejectionPolicy(str, Enum):
    """What the loader does with a row that fails parsing or verification."""
    SKIP = "skip"
    ABORT = "abort"


# ─── Derived ─────────────────────────────────────────────────────

DEFAULT_CATEGORIES: frozenset[str] = frozenset(c.value for c in HillCategory)
