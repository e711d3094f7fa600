"""Index maintenance for restaurant documents.

Creates the index from its declarative definition and keeps documents in
step with restaurant records, either one at a time or in bulk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Sequence

from RestaurantSearch.backend.client import ElasticsearchClient
from RestaurantSearch.backend.mapping import MAPPED_FIELDS, index_definition
from RestaurantSearch.utils.log import log

DEFAULT_BATCH_SIZE = 500

_NESTED_NAME_FIELDS = ("pref", "category1")


@dataclass(slots=True)
class RestaurantIndexer:
    """Maintain the restaurant index on an Elasticsearch cluster."""

    client: ElasticsearchClient
    index: str
    shards: int | None = None
    replicas: int | None = None

    def create_index(self, *, force: bool = False) -> bool:
        """Create the index with restaurant mappings.

        Args:
            force: Delete and recreate the index if it already exists.

        Returns:
            True when an index was created, False when it already existed.
        """
        if self.client.index_exists(self.index):
            if not force:
                log.info("Index already exists: %s", self.index)
                return False
            log.warning("Deleting existing index: %s", self.index)
            self.client.delete_index(self.index)

        self.client.create_index(self.index, index_definition(shards=self.shards, replicas=self.replicas))
        log.info("Index created: %s", self.index)
        return True

    def index_restaurant(self, record: Mapping[str, Any]) -> None:
        """Create or replace the document for one restaurant record."""
        doc_id = record_id(record)
        self.client.index_document(self.index, doc_id, as_indexed_document(record))
        log.debug("Indexed restaurant id=%s", doc_id)

    def delete_restaurant(self, restaurant_id: Any) -> None:
        """Remove one restaurant document."""
        self.client.delete_document(self.index, str(restaurant_id))
        log.debug("Deleted restaurant id=%s", restaurant_id)

    def import_restaurants(
        self,
        records: Sequence[Mapping[str, Any]],
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> int:
        """Bulk-index restaurant records and refresh the index.

        Every record is checked for an id before the first request is sent.

        Args:
            records: Restaurant records.
            batch_size: Documents per `_bulk` request.

        Returns:
            Number of documents indexed.

        Raises:
            ValueError: If batch_size is not positive or a record has no id.
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        documents = [(record_id(record), as_indexed_document(record)) for record in records]

        indexed = 0
        for batch_no, batch in enumerate(_batches(documents, batch_size), start=1):
            self.client.bulk_index(self.index, batch)
            indexed += len(batch)
            log.info("Imported batch %d: %d/%d documents", batch_no, indexed, len(documents))

        if indexed:
            self.client.refresh(self.index)
        return indexed


def record_id(record: Mapping[str, Any]) -> str:
    """Return a record's document id as a string."""
    value = record.get("id")
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Restaurant record has no id: {dict(record)!r}")
    return str(value).strip()


def as_indexed_document(record: Mapping[str, Any]) -> dict[str, Any]:
    """Project a restaurant record onto the mapped index fields.

    Unknown keys are dropped. `pref` and `category1` may be given either
    as objects with a `name` or as plain strings.
    """
    document: dict[str, Any] = {}
    for field in MAPPED_FIELDS:
        if field not in record or record[field] is None:
            continue
        value = record[field]
        if field in _NESTED_NAME_FIELDS:
            value = _nested_name(value)
            if value is None:
                continue
        document[field] = value
    return document


def _nested_name(value: Any) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        name = value.get("name")
        return {"name": name} if name is not None else None
    if isinstance(value, str):
        return {"name": value}
    return None


def _batches(items: Sequence[tuple[str, dict[str, Any]]], size: int) -> Iterator[list[tuple[str, dict[str, Any]]]]:
    for start in range(0, len(items), size):
        yield list(items[start:start + size])
