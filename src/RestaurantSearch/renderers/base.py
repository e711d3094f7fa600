"""Base class for search result writers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from RestaurantSearch.core.models import SearchPage
from RestaurantSearch.core.query import SearchParameters


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_page(self, page: SearchPage, params: SearchParameters) -> None:
        """Write one page of search results.

        Args:
            page: Results returned by the search service.
            params: Parameters that produced the page.
        """
