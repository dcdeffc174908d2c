"""Munro Dataset — the read-only state object shared by every request.

Invariants:
    - Records stored as a tuple: no append, no remove, no reassignment
    - Constructed once by the loader before serving traffic, no reload path
    - Query functions receive the dataset by reference and never copy into it

Design Decisions:
    - Explicit object injected via FastAPI dependency over a module-level cache:
      tests swap the dataset with dependency_overrides, no import side effects
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from munro_api.core.munro import Munro


@dataclass(frozen=True)
class MunroDataset:
    """Immutable collection of Munro records plus load metadata."""

    records: tuple[Munro, ...] = ()
    source: str | None = None
    rejected_rows: int = 0

    @classmethod
    def from_records(
        cls, records: Iterable[Munro], source: str | None = None, rejected_rows: int = 0,
    ) -> "MunroDataset":
        return cls(records=tuple(records), source=source, rejected_rows=rejected_rows)

    @classmethod
    def empty(cls, source: str | None = None) -> "MunroDataset":
        return cls(records=(), source=source)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Munro]:
        return iter(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records
