"""Elasticsearch query compiler.

Compiles `SearchParameters` into a `QueryDocument` in Elasticsearch query DSL.

Rules
- Blank or missing text -> `match_all`.
- Any other text -> a `bool.should` wrapping one `multi_match` over the
  weighted restaurant fields below.
- A sort clause is attached only for an explicit field other than
  `relevancy`; without one Elasticsearch orders by `_score` descending.

Field weights
- name, name_kana, alphabet -> 2
- address                   -> 4
- property, description     -> 1
"""

from __future__ import annotations

from typing import Any

from RestaurantSearch.core.models import QueryDocument
from RestaurantSearch.core.query import ASC, SearchParameters

FIELD_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("name", 2),
    ("name_kana", 2),
    ("alphabet", 2),
    ("property", 1),
    ("address", 4),
    ("description", 1),
)


def boosted_fields() -> list[str]:
    """Return multi_match field specs, e.g. `name^2`, in fixed order."""
    return [name if weight == 1 else f"{name}^{weight}" for name, weight in FIELD_WEIGHTS]


def compile_query_clause(text: str) -> dict[str, Any]:
    text = text.strip()
    if not text:
        return {"match_all": {}}
    return {
        "bool": {
            "should": [
                {
                    "multi_match": {
                        "query": text,
                        "fields": boosted_fields(),
                    }
                }
            ]
        }
    }


def compile_sort_clause(params: SearchParameters) -> dict[str, str] | None:
    if params.sorts_by_relevance:
        return None
    return {params.sort_field: params.sort_order or ASC}


def compile_query_document(params: SearchParameters) -> QueryDocument:
    """Build a new query document for one search.

    Args:
        params: Search parameters for this request.

    Returns:
        An independent `QueryDocument`; nothing is cached between calls.
    """
    return QueryDocument(
        query=compile_query_clause(params.text),
        sort=compile_sort_clause(params),
    )
