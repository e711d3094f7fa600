"""Exception types shared across RestaurantSearch layers."""

from __future__ import annotations

from typing import Any


class RestaurantSearchError(Exception):
    """Base class for RestaurantSearch errors."""


class SearchBackendError(RestaurantSearchError):
    """The search backend failed to execute a request.

    Raised for transport failures (connection refused, timeout) as well as
    error responses, including rejected query documents.

    Attributes:
        status: HTTP status code, or None when no response was received.
        payload: Decoded error body returned by the backend, if any.
    """

    def __init__(self, message: str, *, status: int | None = None, payload: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.payload = payload


class InvalidSearchParameters(RestaurantSearchError, ValueError):
    """Raised when caller-supplied search parameters cannot be accepted."""
