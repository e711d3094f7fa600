"""Console text output.

Renders a `SearchPage` into human-friendly text written through the logger.
"""

from __future__ import annotations

from typing import Any, Mapping

from RestaurantSearch.core.models import SearchPage
from RestaurantSearch.core.query import SearchParameters
from RestaurantSearch.renderers.base import OutputWriter
from RestaurantSearch.utils.log import log


def _nested_name(value: Any) -> str:
    if isinstance(value, Mapping):
        return str(value.get("name") or "")
    return str(value or "")


def render_text(page: SearchPage) -> str:
    """Render a page of restaurants into a text block.

    Args:
        page: Page of search results.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [f"Page {page.page}/{max(page.total_pages, 1)} ({page.total} matches)"]
    if page.is_empty:
        lines.append("No restaurants found.")
        return "\n".join(lines) + "\n"

    offset = (page.page - 1) * page.per_page
    for idx, hit in enumerate(page.hits, start=offset + 1):
        source = hit.source
        name = source.get("name") or "(no name)"
        kana = source.get("name_kana")
        lines.append(f"{idx}. {name}" + (f" ({kana})" if kana else ""))

        location = " / ".join(
            part for part in (_nested_name(source.get("pref")), str(source.get("address") or "")) if part
        )
        if location:
            lines.append(f"   Address: {location}")
        category = _nested_name(source.get("category1"))
        if category:
            lines.append(f"   Category: {category}")
        if source.get("created_on"):
            lines.append(f"   Created: {source['created_on']}")
        score = f"{hit.score:.3f}" if hit.score is not None else "-"
        lines.append(f"   Id: {hit.id}  Score: {score}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_page(self, page: SearchPage, params: SearchParameters) -> None:
        if params.text:
            log.info("query=%s", params.text)
        for line in render_text(page).splitlines():
            log.info(line)
