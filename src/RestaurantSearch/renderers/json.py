"""JSON output.

Renders a `SearchPage` into a JSON-serializable object and prints it.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import click

from RestaurantSearch.core.models import SearchPage
from RestaurantSearch.core.query import SearchParameters
from RestaurantSearch.renderers.base import OutputWriter


def render_json(page: SearchPage, params: SearchParameters | None = None) -> dict[str, Any]:
    """Render a page into JSON-serializable Python objects.

    Args:
        page: Page of search results.
        params: Parameters that produced the page, echoed under `params`.

    Returns:
        A dict with paging info and hits in backend order.
    """
    out: dict[str, Any] = {
        "page": page.page,
        "per_page": page.per_page,
        "total": page.total,
        "total_pages": page.total_pages,
        "max_score": page.max_score,
        "took": page.took,
        "hits": [
            {"id": hit.id, "score": hit.score, "source": dict(hit.source)}
            for hit in page.hits
        ],
    }
    if params is not None:
        out["params"] = {
            "query": params.query,
            "sort": params.sort_field,
            "order": params.sort_order,
            "page": params.page,
        }
    return out


class JsonOutputWriter(OutputWriter):
    """Print each page as one JSON document."""

    def __init__(self, echo: Callable[[str], None] = click.echo) -> None:
        self._echo = echo

    def write_page(self, page: SearchPage, params: SearchParameters) -> None:
        self._echo(json.dumps(render_json(page, params), ensure_ascii=False, indent=2))
