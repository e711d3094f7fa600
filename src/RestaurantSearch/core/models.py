from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence


def _freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Return a plain dict/list copy of a frozen value."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class QueryDocument:
    """Structured query sent to the search backend.

    Built fresh for every search and read-only afterwards, down to the
    nested clauses.

    Attributes:
        query: Query clause, either `match_all` or the weighted
            multi-field clause.
        sort: Sort clause mapping field name to order, or None to keep
            the backend's relevance ordering.
    """

    query: Mapping[str, Any]
    sort: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", _freeze(self.query))
        if self.sort is not None:
            object.__setattr__(self, "sort", _freeze(self.sort))

    def to_body(self) -> dict[str, Any]:
        """Return a new JSON-serializable request body."""
        body: dict[str, Any] = {"query": _thaw(self.query)}
        if self.sort is not None:
            body["sort"] = _thaw(self.sort)
        return body


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One matching document.

    Attributes:
        id: Document id in the index.
        score: Relevance score; None when the backend sorted by a field.
        source: Stored document fields.
    """

    id: str
    score: Optional[float]
    source: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", MappingProxyType(dict(self.source)))


@dataclass(frozen=True, slots=True)
class SearchPage:
    """A page of results exactly as the backend returned it.

    Attributes:
        page: 1-based page number that was requested.
        per_page: Page size that was requested.
        total: Total number of matching documents.
        hits: Documents on this page, in backend order.
        max_score: Highest score across all matches, if reported.
        took: Backend execution time in milliseconds, if reported.
        raw: Untouched backend response.
    """

    page: int
    per_page: int
    total: int
    hits: Sequence[SearchHit] = ()
    max_score: Optional[float] = None
    took: Optional[int] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        if self.per_page <= 0:
            return 0
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def is_empty(self) -> bool:
        return not self.hits

    def records(self) -> list[dict[str, Any]]:
        """Return hits as plain field mappings."""
        return [dict(hit.source) for hit in self.hits]
