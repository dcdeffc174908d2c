"""Query Engine — filter, sort and limit over the immutable Munro dataset.

Invariants:
    - Every function is PURE: same dataset + same criteria = same result
    - Validation runs before any filtering: limit, then negative heights, then
      non-finite heights, then max < min, then category vocabulary
    - NaN and infinite height bounds are rejected
    - Pipeline order is fixed: height sort, name sort, category, min (>=),
      max (< strict), limit. Limit is always applied last
    - Records with an empty category marker never appear in any result
    - Lookup by running number returns None on a miss, never raises

Design Decisions:
    - Range and list queries delegate to find_munros: one validation path, one
      pipeline, no drift between endpoints
    - Sorting is stable (sorted()), so applying the name sort after the height
      sort keeps height order among equal names
    - Unknown category strings are a validation error rather than a silent
      "no filter", so a typo never returns the full table
"""

import math
from dataclasses import dataclass
from typing import Callable

from munro_api.core.dataset import MunroDataset
from munro_api.core.domain_types import (
    DEFAULT_CATEGORIES, HeightInMetres, HillCategory, RunningNumber, SortDirection,
)
from munro_api.core.errors import QueryValidationError
from munro_api.core.munro import Munro


@dataclass(frozen=True)
class MunroQuery:
    """Optional criteria for the generic query. None always means "not given"."""
    min_height: HeightInMetres | None = None
    max_height: HeightInMetres | None = None
    hill_category: str | None = None
    order_height_by: str | None = None
    order_name_by: str | None = None
    limit: int | None = None


# ─── Public operations ──────────────────────────────────────────

def find_all(
    dataset: MunroDataset,
    hill_category: str | None = None,
    order_height_by: str | None = None,
    order_name_by: str | None = None,
    limit: int | None = None,
) -> list[Munro]:
    """All listed Munros, optionally narrowed to one category, sorted and limited."""
    return find_munros(dataset, MunroQuery(
        hill_category=hill_category,
        order_height_by=order_height_by,
        order_name_by=order_name_by,
        limit=limit,
    ))


def find_by_running_number(
    dataset: MunroDataset, running_number: RunningNumber,
) -> Munro | None:
    """Unique listed Munro with this running number, or None."""
    return next(
        (
            munro for munro in dataset
            if munro.running_number == running_number and munro.is_listed
        ),
        None,
    )


def find_by_minimum_height(
    dataset: MunroDataset,
    min_height: HeightInMetres,
    hill_category: str | None = None,
    order_height_by: str | None = None,
    order_name_by: str | None = None,
    limit: int | None = None,
) -> list[Munro]:
    """Munros with height >= min_height."""
    return find_munros(dataset, MunroQuery(
        min_height=min_height,
        hill_category=hill_category,
        order_height_by=order_height_by,
        order_name_by=order_name_by,
        limit=limit,
    ))


def find_by_maximum_height(
    dataset: MunroDataset,
    max_height: HeightInMetres,
    hill_category: str | None = None,
    order_height_by: str | None = None,
    order_name_by: str | None = None,
    limit: int | None = None,
) -> list[Munro]:
    """Munros with height < max_height. A hill exactly at the threshold is excluded."""
    return find_munros(dataset, MunroQuery(
        max_height=max_height,
        hill_category=hill_category,
        order_height_by=order_height_by,
        order_name_by=order_name_by,
        limit=limit,
    ))


def find_by_height_range(
    dataset: MunroDataset,
    min_height: HeightInMetres,
    max_height: HeightInMetres,
    hill_category: str | None = None,
    order_height_by: str | None = None,
    order_name_by: str | None = None,
    limit: int | None = None,
) -> list[Munro]:
    """Munros in the half-open interval [min_height, max_height)."""
    return find_munros(dataset, MunroQuery(
        min_height=min_height,
        max_height=max_height,
        hill_category=hill_category,
        order_height_by=order_height_by,
        order_name_by=order_name_by,
        limit=limit,
    ))


def find_munros(dataset: MunroDataset, query: MunroQuery) -> list[Munro]:
    """Generic multi-criteria query. Raises QueryValidationError on bad input."""
    category = validate_query(query)
    return _apply_criteria(list(dataset), query, category)


# ─── Validation ─────────────────────────────────────────────────

def validate_query(query: MunroQuery) -> HillCategory | None:
    """Check criteria in order; return the resolved category (None = defaults)."""
    if invalid_limit(query.limit):
        raise QueryValidationError(
            f"Invalid value for limit: {query.limit}", "limit",
        )
    if invalid_height(query.min_height, query.max_height):
        raise QueryValidationError(
            "Heights cannot be less than zero",
            "minHeight" if _is_negative(query.min_height) else "maxHeight",
        )
    if invalid_non_finite_height(query.min_height, query.max_height):
        raise QueryValidationError(
            "Heights must be finite numbers",
            "minHeight" if _is_non_finite(query.min_height) else "maxHeight",
        )
    if invalid_max_height_less_than_min_height(query.min_height, query.max_height):
        raise QueryValidationError(
            "Maximum height could not be less than minimum height", "maxHeight",
        )
    return resolve_category(query.hill_category)


def invalid_limit(limit: int | None) -> bool:
    return limit is not None and limit <= 0


def invalid_height(min_height: float | None, max_height: float | None) -> bool:
    return _is_negative(min_height) or _is_negative(max_height)


def invalid_non_finite_height(
    min_height: float | None, max_height: float | None,
) -> bool:
    return _is_non_finite(min_height) or _is_non_finite(max_height)


def invalid_max_height_less_than_min_height(
    min_height: float | None, max_height: float | None,
) -> bool:
    return (
        min_height is not None and max_height is not None
        and max_height < min_height
    )


def resolve_category(hill_category: str | None) -> HillCategory | None:
    """Map a caller-supplied category string onto the closed vocabulary."""
    if hill_category is None:
        return None
    category = HillCategory.parse(hill_category)
    if category is None:
        raise QueryValidationError(
            f"Invalid value for hillCategory: {hill_category}", "hillCategory",
        )
    return category


def _is_negative(value: float | None) -> bool:
    return value is not None and value < 0


def _is_non_finite(value: float | None) -> bool:
    return value is not None and not math.isfinite(value)


# ─── Pipeline ───────────────────────────────────────────────────

def _apply_criteria(
    records: list[Munro], query: MunroQuery, category: HillCategory | None,
) -> list[Munro]:
    result = _apply_sort(
        records, _by_height, SortDirection.parse(query.order_height_by),
    )
    result = _apply_sort(
        result, _by_name, SortDirection.parse(query.order_name_by),
    )
    result = _apply_category(result, category)
    result = _apply_heights(result, query.min_height, query.max_height)
    return _apply_limit(result, query.limit)


def _by_height(munro: Munro) -> float:
    return munro.height_in_metres


def _by_name(munro: Munro) -> str:
    return munro.name


def _apply_sort(
    records: list[Munro],
    key: Callable[[Munro], float | str],
    direction: SortDirection | None,
) -> list[Munro]:
    if direction is None:
        return records
    return sorted(records, key=key, reverse=direction is SortDirection.DESC)


def _apply_category(
    records: list[Munro], category: HillCategory | None,
) -> list[Munro]:
    if category is not None:
        return [m for m in records if m.category_marker == category.value]
    return [m for m in records if m.category_marker in DEFAULT_CATEGORIES]


def _apply_heights(
    records: list[Munro], min_height: float | None, max_height: float | None,
) -> list[Munro]:
    if min_height is not None:
        records = [m for m in records if m.height_in_metres >= min_height]
    if max_height is not None:
        records = [m for m in records if m.height_in_metres < max_height]
    return records


def _apply_limit(records: list[Munro], limit: int | None) -> list[Munro]:
    if limit is None:
        return records
    return records[:limit]
