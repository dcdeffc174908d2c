"""Munro Record — one row of the hill table, frozen after construction.

Invariants:
    - running_number is assigned by the dataset, unique across a loaded dataset
    - category_marker is "MUN", "TOP" or "" (empty = excluded from default results)
    - Descriptive fields are carried verbatim and never used by query logic
"""

from dataclasses import dataclass

from munro_api.core.domain_types import HeightInMetres, RunningNumber


@dataclass(frozen=True)
class Munro:
    """A named hill entry keyed by running number."""

    running_number: RunningNumber
    name: str
    height_in_metres: HeightInMetres
    category_marker: str

    # Descriptive columns, carried through untouched
    dobih_number: int | None = None
    height_in_feet: float | None = None
    grid_ref: str = ""
    section: str = ""
    map_1_50: str = ""
    comments: str = ""

    @property
    def is_listed(self) -> bool:
        return self.category_marker != ""
