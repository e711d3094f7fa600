"""Restaurant index settings and mappings.

This is the declarative definition sent when the index is created. Query
compilation does not read it; it only has to agree with the field names in
`RestaurantSearch.backend.query.FIELD_WEIGHTS`.
"""

from __future__ import annotations

from typing import Any

JAPANESE_ANALYZER = "kuromoji"

MAPPED_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "name_kana",
    "alphabet",
    "property",
    "address",
    "description",
    "created_on",
    "pref",
    "category1",
)


def index_name(prefix: str, environment: str) -> str:
    """Return the per-environment index name, e.g. `restaurant_search_test`."""
    prefix = prefix.strip()
    environment = environment.strip()
    if not prefix:
        raise ValueError("index prefix must not be empty")
    if not environment:
        raise ValueError("index environment must not be empty")
    return f"{prefix}_{environment}"


def index_mappings() -> dict[str, Any]:
    """Return the mapping body with dynamic field detection disabled."""

    def japanese_text() -> dict[str, str]:
        return {"type": "text", "analyzer": JAPANESE_ANALYZER}

    def exact_name() -> dict[str, Any]:
        return {"properties": {"name": {"type": "keyword"}}}

    return {
        "dynamic": "false",
        "properties": {
            "id": {"type": "integer"},
            "name": japanese_text(),
            "name_kana": japanese_text(),
            "alphabet": {"type": "text"},
            "property": japanese_text(),
            "address": japanese_text(),
            "description": japanese_text(),
            "created_on": {"type": "date", "format": "date_time"},
            "pref": exact_name(),
            "category1": exact_name(),
        },
    }


def index_definition(*, shards: int | None = None, replicas: int | None = None) -> dict[str, Any]:
    """Return the full create-index body.

    Args:
        shards: Primary shard count; server default when None.
        replicas: Replica count; server default when None.

    Returns:
        Body for `PUT /<index>`.
    """
    body: dict[str, Any] = {"mappings": index_mappings()}
    settings: dict[str, Any] = {}
    if shards is not None:
        settings["number_of_shards"] = shards
    if replicas is not None:
        settings["number_of_replicas"] = replicas
    if settings:
        body["settings"] = {"index": settings}
    return body
