"""Elasticsearch search backend adapter.

Connects query documents to the REST client and parses responses into
`SearchPage` objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from RestaurantSearch.backend.client import ElasticsearchClient
from RestaurantSearch.backend.parser import parse_search_response
from RestaurantSearch.core.models import QueryDocument, SearchPage


@dataclass(slots=True)
class ElasticsearchBackend:
    """`SearchBackend` implementation for one restaurant index."""

    client: ElasticsearchClient
    index: str
    name: str = "elasticsearch"

    def search(self, document: QueryDocument, *, page: int, per_page: int) -> SearchPage:
        """Execute one query document and return the requested page.

        Args:
            document: Compiled query document.
            page: 1-based page number.
            per_page: Page size.

        Returns:
            The backend's page of results.
        """
        payload = self.client.search(self.index, document.to_body(), page=page, per_page=per_page)
        return parse_search_response(payload, page=page, per_page=per_page)

    def close(self) -> None:
        self.client.close()
