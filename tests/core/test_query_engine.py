"""Query Engine — tests for pure filter/sort/limit operations over a fixed dataset.

Tests cover:
    - find_all default category set, explicit category, unknown category
    - find_by_running_number hits, misses, and unlisted hills
    - Minimum (>=), maximum (< strict) and range [min, max) boundaries
    - Sorting by height and name, case-insensitive directives, stability
    - Limit applied after every filter
    - Validation order and messages for find_munros
    - NaN and infinite height bounds rejected
    - Idempotence over an unchanged dataset
"""

import pytest

from munro_api.core.errors import QueryValidationError
from munro_api.core.query_engine import (
    MunroQuery,
    find_all,
    find_by_height_range,
    find_by_maximum_height,
    find_by_minimum_height,
    find_by_running_number,
    find_munros,
    validate_query,
)
from munro_api.core.domain_types import HillCategory


def _ids(munros) -> list[int]:
    return [m.running_number for m in munros]


# ─── Worked example ──────────────────────────────────────────────

def test_find_all_excludes_empty_category(example_dataset):
    assert _ids(find_all(example_dataset)) == [1, 2]


def test_find_all_height_desc(example_dataset):
    assert _ids(find_all(example_dataset, order_height_by="desc")) == [1, 2]


def test_lookup_of_unlisted_hill_is_not_found(example_dataset):
    assert find_by_running_number(example_dataset, 3) is None


def test_range_query_on_example(example_dataset):
    result = find_by_height_range(example_dataset, 1000, 1300)
    assert _ids(result) == [1]


# ─── find_all ────────────────────────────────────────────────────

def test_find_all_keeps_dataset_order_without_sort(hills_dataset):
    assert _ids(find_all(hills_dataset)) == [10, 11, 12, 13, 14, 15, 17, 18]


def test_find_all_filters_tops(hills_dataset):
    assert _ids(find_all(hills_dataset, hill_category="TOP")) == [11, 15]


def test_find_all_filters_munros(hills_dataset):
    result = find_all(hills_dataset, hill_category="MUN")
    assert _ids(result) == [10, 12, 13, 14, 17, 18]
    assert all(m.category_marker == "MUN" for m in result)


def test_find_all_rejects_unknown_category(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_all(hills_dataset, hill_category="CORBETT")
    assert exc_info.value.message == "Invalid value for hillCategory: CORBETT"
    assert exc_info.value.parameter == "hillCategory"


def test_category_match_is_case_sensitive(hills_dataset):
    with pytest.raises(QueryValidationError):
        find_all(hills_dataset, hill_category="mun")


def test_empty_category_string_is_not_a_valid_filter(hills_dataset):
    with pytest.raises(QueryValidationError):
        find_all(hills_dataset, hill_category="")


def test_find_all_on_empty_dataset_returns_empty():
    from munro_api.core.dataset import MunroDataset
    assert find_all(MunroDataset.empty()) == []


# ─── find_by_running_number ──────────────────────────────────────

def test_lookup_returns_matching_munro(hills_dataset):
    munro = find_by_running_number(hills_dataset, 13)
    assert munro is not None
    assert munro.name == "Ben Macdui"


def test_lookup_miss_returns_none(hills_dataset):
    assert find_by_running_number(hills_dataset, 999) is None


def test_lookup_skips_unlisted_hill(hills_dataset):
    assert find_by_running_number(hills_dataset, 16) is None


# ─── Height filters ──────────────────────────────────────────────

def test_minimum_height_is_inclusive(hills_dataset):
    result = find_by_minimum_height(hills_dataset, 1221)
    assert _ids(result) == [10, 11, 13, 14, 18]
    assert all(m.height_in_metres >= 1221 for m in result)


def test_maximum_height_is_strict(hills_dataset):
    result = find_by_maximum_height(hills_dataset, 1221)
    assert _ids(result) == [12, 15, 17]
    assert all(m.height_in_metres < 1221 for m in result)


def test_range_includes_min_excludes_max(hills_dataset):
    result = find_by_height_range(hills_dataset, 1220, 1234)
    assert _ids(result) == [11, 12, 18]


def test_range_with_equal_bounds_is_empty(hills_dataset):
    assert find_by_height_range(hills_dataset, 1221, 1221) == []


def test_range_never_returns_unlisted_hills(hills_dataset):
    result = find_by_height_range(hills_dataset, 0, 2000)
    assert 16 not in _ids(result)
    assert len(result) == 8


def test_range_combined_with_category(hills_dataset):
    result = find_by_height_range(hills_dataset, 1000, 1300, hill_category="TOP")
    assert _ids(result) == [11, 15]


def test_minimum_height_rejects_negative(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_by_minimum_height(hills_dataset, -1)
    assert exc_info.value.message == "Heights cannot be less than zero"
    assert exc_info.value.parameter == "minHeight"


def test_maximum_height_rejects_negative(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_by_maximum_height(hills_dataset, -0.5)
    assert exc_info.value.parameter == "maxHeight"


def test_range_rejects_max_below_min(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_by_height_range(hills_dataset, 1300, 1000)
    assert exc_info.value.message == (
        "Maximum height could not be less than minimum height"
    )


def test_nan_minimum_height_rejected(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_by_minimum_height(hills_dataset, float("nan"))
    assert exc_info.value.message == "Heights must be finite numbers"
    assert exc_info.value.parameter == "minHeight"


def test_infinite_maximum_height_rejected(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_by_height_range(hills_dataset, 0, float("inf"))
    assert exc_info.value.parameter == "maxHeight"


def test_negative_infinity_reported_as_negative(hills_dataset):
    with pytest.raises(QueryValidationError) as exc_info:
        find_by_minimum_height(hills_dataset, float("-inf"))
    assert exc_info.value.message == "Heights cannot be less than zero"


def test_zero_heights_are_valid(hills_dataset):
    assert find_by_height_range(hills_dataset, 0, 0) == []
    assert len(find_by_minimum_height(hills_dataset, 0)) == 8


# ─── Sorting ─────────────────────────────────────────────────────

def test_sort_height_ascending_is_stable_on_ties(hills_dataset):
    result = find_all(hills_dataset, order_height_by="asc")
    # 11 and 18 share 1221 m and keep dataset order
    assert _ids(result) == [17, 15, 12, 11, 18, 14, 13, 10]


def test_sort_height_descending_is_stable_on_ties(hills_dataset):
    result = find_all(hills_dataset, order_height_by="desc")
    assert _ids(result) == [10, 13, 14, 11, 18, 12, 15, 17]


def test_sort_height_asc_and_desc_are_reversed_for_distinct_heights(hills_dataset):
    asc = find_all(hills_dataset, hill_category="MUN", order_height_by="asc")
    desc = find_all(hills_dataset, hill_category="MUN", order_height_by="desc")
    assert _ids(asc) == list(reversed(_ids(desc)))


def test_sort_name_ascending(hills_dataset):
    result = find_all(hills_dataset, order_name_by="asc")
    assert _ids(result) == [14, 18, 17, 13, 10, 11, 12, 15]


def test_sort_name_descending(hills_dataset):
    result = find_all(hills_dataset, order_name_by="desc")
    assert _ids(result) == [15, 12, 11, 10, 13, 17, 18, 14]


def test_sort_directive_is_case_insensitive(hills_dataset):
    upper = find_all(hills_dataset, order_height_by="DESC")
    mixed = find_all(hills_dataset, order_height_by="Desc")
    lower = find_all(hills_dataset, order_height_by="desc")
    assert upper == mixed == lower


def test_unrecognised_sort_directive_means_no_sort(hills_dataset):
    result = find_all(hills_dataset, order_height_by="sideways")
    assert result == find_all(hills_dataset)


def test_name_sort_dominates_when_both_given(hills_dataset):
    both = find_all(hills_dataset, order_height_by="desc", order_name_by="asc")
    assert both == find_all(hills_dataset, order_name_by="asc")


def test_name_sort_keeps_height_order_on_equal_names():
    from munro_api.core.dataset import MunroDataset
    from munro_api.core.munro import Munro
    dataset = MunroDataset.from_records([
        Munro(running_number=1, name="Stob Dubh", height_in_metres=958, category_marker="MUN"),
        Munro(running_number=2, name="Meall Dubh", height_in_metres=789, category_marker="TOP"),
        Munro(running_number=3, name="Stob Dubh", height_in_metres=1068, category_marker="TOP"),
    ])
    result = find_all(dataset, order_height_by="desc", order_name_by="asc")
    assert _ids(result) == [2, 3, 1]


# ─── Limit ───────────────────────────────────────────────────────

def test_limit_keeps_first_n(hills_dataset):
    assert _ids(find_all(hills_dataset, limit=3)) == [10, 11, 12]


def test_limit_larger_than_result_is_noop(hills_dataset):
    assert len(find_all(hills_dataset, limit=100)) == 8


def test_absent_limit_returns_everything(hills_dataset):
    query = MunroQuery(order_height_by="asc")
    assert len(find_munros(hills_dataset, query)) == len(find_all(hills_dataset))


def test_limit_applied_after_filters(hills_dataset):
    # Limiting before the height filter would keep 10 and 11, both too tall
    result = find_by_maximum_height(hills_dataset, 1221, limit=2)
    assert _ids(result) == [12, 15]


def test_limit_applied_after_sort(hills_dataset):
    result = find_all(hills_dataset, order_height_by="desc", limit=2)
    assert _ids(result) == [10, 13]


@pytest.mark.parametrize("limit", [0, -1, -100])
def test_non_positive_limit_rejected(hills_dataset, limit):
    with pytest.raises(QueryValidationError) as exc_info:
        find_munros(hills_dataset, MunroQuery(limit=limit))
    assert exc_info.value.message == f"Invalid value for limit: {limit}"
    assert exc_info.value.http_status == 400


# ─── find_munros ─────────────────────────────────────────────────

def test_generic_query_combines_all_criteria(hills_dataset):
    query = MunroQuery(
        min_height=1000, max_height=1300, hill_category="MUN",
        order_height_by="desc", limit=2,
    )
    assert _ids(find_munros(hills_dataset, query)) == [14, 18]


def test_generic_query_with_no_criteria_matches_find_all(hills_dataset):
    assert find_munros(hills_dataset, MunroQuery()) == find_all(hills_dataset)


def test_generic_query_rejects_max_below_min(hills_dataset):
    with pytest.raises(QueryValidationError):
        find_munros(hills_dataset, MunroQuery(min_height=1000, max_height=999.9))


def test_validation_checks_limit_before_heights():
    with pytest.raises(QueryValidationError) as exc_info:
        validate_query(MunroQuery(limit=0, min_height=-1))
    assert exc_info.value.parameter == "limit"


def test_validation_checks_negative_before_ordering():
    with pytest.raises(QueryValidationError) as exc_info:
        validate_query(MunroQuery(min_height=10, max_height=-1))
    assert exc_info.value.message == "Heights cannot be less than zero"


def test_validation_resolves_category():
    assert validate_query(MunroQuery(hill_category="TOP")) is HillCategory.TOP
    assert validate_query(MunroQuery()) is None


def test_queries_are_idempotent(hills_dataset):
    query = MunroQuery(min_height=900, order_name_by="desc", limit=5)
    assert find_munros(hills_dataset, query) == find_munros(hills_dataset, query)


def test_queries_do_not_mutate_dataset(hills_dataset):
    before = hills_dataset.records
    find_all(hills_dataset, order_height_by="asc", limit=1)
    assert hills_dataset.records is before
    assert _ids(hills_dataset) == [10, 11, 12, 13, 14, 15, 16, 17, 18]


def test_category_with_trailing_whitespace_is_not_listed():
    from munro_api.core.dataset import MunroDataset
    from munro_api.core.munro import Munro
    dataset = MunroDataset.from_records([
        Munro(running_number=1, name="Ben", height_in_metres=1200, category_marker="MUN "),
        Munro(running_number=2, name="Carn", height_in_metres=900, category_marker="TOP"),
    ])
    assert _ids(find_all(dataset)) == [2]
