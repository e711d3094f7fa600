"""Search domain configuration (paging and sortable fields)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RestaurantSearch.config.common import (
    expect_int,
    expect_str,
    expect_str_list,
    get_section,
    get_value,
)
from RestaurantSearch.core.query import RELEVANCY

_DEFAULT_SORTABLE_FIELDS = ["id", "created_on"]


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search behavior settings."""

    per_page: int
    sortable_fields: tuple[str, ...]
    default_sort: str


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "search", required=False)
    return SearchConfig(
        per_page=expect_int(get_value(section, "per_page", "search.per_page", 25), "search.per_page"),
        sortable_fields=expect_str_list(
            get_value(section, "sortable_fields", "search.sortable_fields", _DEFAULT_SORTABLE_FIELDS),
            "search.sortable_fields",
        ),
        default_sort=expect_str(get_value(section, "default_sort", "search.default_sort", RELEVANCY), "search.default_sort"),
    )


def check_search(config: SearchConfig) -> None:
    if config.per_page <= 0:
        raise ValueError("search.per_page must be positive")
    if RELEVANCY in config.sortable_fields:
        raise ValueError(f"search.sortable_fields must not include {RELEVANCY!r}")
    if config.default_sort != RELEVANCY and config.default_sort not in config.sortable_fields:
        raise ValueError("search.default_sort must be 'relevancy' or one of search.sortable_fields")
