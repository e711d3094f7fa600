"""Elasticsearch search response parser."""

from __future__ import annotations

from typing import Any, Mapping

from RestaurantSearch.core.models import SearchHit, SearchPage


def parse_search_response(payload: Mapping[str, Any], *, page: int, per_page: int) -> SearchPage:
    """Parse a `_search` response into a `SearchPage`.

    Hits keep backend order and their `_source` fields as-is. The raw
    payload is kept on the page for callers that need backend metadata.

    Args:
        payload: Decoded `_search` response.
        page: Requested page number.
        per_page: Requested page size.

    Returns:
        Parsed page of results.
    """
    hits_section = payload.get("hits")
    if not isinstance(hits_section, Mapping):
        hits_section = {}

    raw_hits = hits_section.get("hits")
    hits = tuple(_parse_hit(item) for item in raw_hits if isinstance(item, Mapping)) if isinstance(raw_hits, list) else ()

    took = payload.get("took")
    return SearchPage(
        page=page,
        per_page=per_page,
        total=_parse_total(hits_section.get("total"), fallback=len(hits)),
        hits=hits,
        max_score=_optional_float(hits_section.get("max_score")),
        took=took if isinstance(took, int) and not isinstance(took, bool) else None,
        raw=payload,
    )


def _parse_hit(item: Mapping[str, Any]) -> SearchHit:
    source = item.get("_source")
    return SearchHit(
        id=str(item.get("_id", "")),
        score=_optional_float(item.get("_score")),
        source=source if isinstance(source, Mapping) else {},
    )


def _parse_total(value: Any, *, fallback: int) -> int:
    # Elasticsearch 7+ reports {"value": n, "relation": "eq"}; older versions a bare int.
    if isinstance(value, Mapping):
        value = value.get("value")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return fallback


def _optional_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
