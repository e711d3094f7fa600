"""Service layer for RestaurantSearch.

Provides the search and indexing services plus factory functions that wire
them to an Elasticsearch client built from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from RestaurantSearch.services.indexing import RestaurantIndexer
from RestaurantSearch.services.search import RestaurantSearchService, SearchBackend

if TYPE_CHECKING:
    from RestaurantSearch.backend.client import ElasticsearchClient
    from RestaurantSearch.config import AppConfig


def create_client(config: AppConfig) -> ElasticsearchClient:
    """Create an Elasticsearch client from backend settings."""
    from RestaurantSearch.backend.client import ElasticsearchClient

    return ElasticsearchClient(config.backend.url, timeout=config.backend.timeout)


def create_search_service(config: AppConfig) -> RestaurantSearchService:
    """Create a search service bound to the configured index.

    Args:
        config: Application configuration.

    Returns:
        Configured RestaurantSearchService instance.
    """
    from RestaurantSearch.backend.source import ElasticsearchBackend

    backend = ElasticsearchBackend(client=create_client(config), index=config.backend.index)
    return RestaurantSearchService(backend=backend, per_page=config.search.per_page)


def create_indexer(config: AppConfig) -> RestaurantIndexer:
    """Create an indexer for the configured index."""
    return RestaurantIndexer(
        client=create_client(config),
        index=config.backend.index,
        shards=config.backend.shards,
        replicas=config.backend.replicas,
    )


__all__ = [
    "RestaurantIndexer",
    "RestaurantSearchService",
    "SearchBackend",
    "create_client",
    "create_indexer",
    "create_search_service",
]
