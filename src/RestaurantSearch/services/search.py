"""Search service that composes restaurant queries and runs them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from RestaurantSearch.backend.query import compile_query_document
from RestaurantSearch.core.models import QueryDocument, SearchPage
from RestaurantSearch.core.query import SearchParameters
from RestaurantSearch.utils.log import log

DEFAULT_PER_PAGE = 25


class SearchBackend(Protocol):
    """Protocol for a document search backend."""

    name: str

    def search(self, document: QueryDocument, *, page: int, per_page: int) -> SearchPage:
        """Execute a query document and return one page of results."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by the backend."""
        raise NotImplementedError


@dataclass(slots=True)
class RestaurantSearchService:
    """Compose a query per request and submit it to the backend.

    The service keeps no query state between calls: each search compiles
    its own `QueryDocument` and performs exactly one backend request.
    Backend errors are not caught here.
    """

    backend: SearchBackend
    per_page: int = DEFAULT_PER_PAGE

    def compose(self, params: SearchParameters) -> QueryDocument:
        """Return the query document `search` would submit for `params`."""
        return compile_query_document(params)

    def search(self, params: SearchParameters) -> SearchPage:
        """Search restaurants.

        Args:
            params: Search parameters for this request.

        Returns:
            The backend's page of results, unmodified.

        Raises:
            SearchBackendError: If the backend cannot execute the query.
        """
        document = self.compose(params)
        log.debug(
            "Searching backend=%s page=%d per_page=%d body=%s",
            getattr(self.backend, "name", "unknown"),
            params.page,
            self.per_page,
            document.to_body(),
        )
        result = self.backend.search(document, page=params.page, per_page=self.per_page)
        log.info("Search completed: total=%d page=%d hits=%d", result.total, result.page, len(result.hits))
        return result

    def close(self) -> None:
        """Close the backend and release external resources."""
        close_func = getattr(self.backend, "close", None)
        if callable(close_func):
            close_func()
