"""Search parameters and the boundary parser that produces them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Mapping

from RestaurantSearch.core.errors import InvalidSearchParameters

RELEVANCY = "relevancy"

ASC = "asc"
DESC = "desc"

_ORDER_ALIASES = {
    "asc": ASC,
    "ascending": ASC,
    "desc": DESC,
    "descending": DESC,
}


@dataclass(frozen=True, slots=True)
class SearchParameters:
    """Caller-supplied search intent for one request.

    Every field is optional; an empty instance means "match everything,
    ordered by relevance, first page".

    Attributes:
        query: Free-text query. Blank text is treated as absent.
        sort_field: Field to sort by, or `RELEVANCY` for score ordering.
        sort_order: `asc` or `desc`. Ascending when omitted.
        page: 1-based page number.
    """

    query: str | None = None
    sort_field: str | None = None
    sort_order: str | None = None
    page: int = 1

    @property
    def text(self) -> str:
        """Return the trimmed free-text query, empty when absent."""
        return (self.query or "").strip()

    @property
    def sorts_by_relevance(self) -> bool:
        """Whether results keep the backend's relevance ordering."""
        return not self.sort_field or self.sort_field == RELEVANCY


def parse_search_parameters(
    raw: Mapping[str, Any],
    *,
    sortable_fields: Collection[str],
) -> SearchParameters:
    """Validate loose request values into `SearchParameters`.

    Recognized keys are `query`, `sort` (or `sort_field`), `order`
    (or `sort_order`) and `page`. Blank strings count as absent.

    Args:
        raw: Request arguments, e.g. CLI options or query-string values.
        sortable_fields: Field names accepted as explicit sort keys.

    Returns:
        Validated search parameters.

    Raises:
        InvalidSearchParameters: If page, sort field or sort order is invalid.
    """
    query = _optional_str(raw.get("query"), "query")
    sort_field = _optional_str(_first_present(raw, "sort", "sort_field"), "sort")
    sort_order = _optional_str(_first_present(raw, "order", "sort_order"), "order")

    if sort_field is not None and sort_field != RELEVANCY and sort_field not in sortable_fields:
        allowed = ", ".join([RELEVANCY, *sorted(sortable_fields)])
        raise InvalidSearchParameters(f"sort must be one of: {allowed} (got {sort_field!r})")

    if sort_order is not None:
        normalized = _ORDER_ALIASES.get(sort_order.lower())
        if normalized is None:
            raise InvalidSearchParameters(f"order must be asc or desc (got {sort_order!r})")
        sort_order = normalized

    return SearchParameters(
        query=query,
        sort_field=sort_field,
        sort_order=sort_order,
        page=_parse_page(raw.get("page")),
    )


def _first_present(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _optional_str(value: Any, key: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidSearchParameters(f"{key} must be a string")
    value = value.strip()
    return value or None


def _parse_page(value: Any) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 1
    if isinstance(value, bool):
        raise InvalidSearchParameters("page must be a positive integer")
    if isinstance(value, str):
        if not value.strip().isdecimal():
            raise InvalidSearchParameters(f"page must be a positive integer (got {value!r})")
        value = int(value.strip())
    if not isinstance(value, int) or value < 1:
        raise InvalidSearchParameters(f"page must be a positive integer (got {value!r})")
    return value
