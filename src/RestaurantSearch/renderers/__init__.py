"""Output renderers for search results.

The module exports the OutputWriter base class and a factory that picks a
writer for the configured format.
"""

from __future__ import annotations

from RestaurantSearch.renderers.base import OutputWriter
from RestaurantSearch.renderers.console import ConsoleOutputWriter, render_text
from RestaurantSearch.renderers.json import JsonOutputWriter, render_json


def create_output_writer(output_format: str) -> OutputWriter:
    """Create an output writer for `console` or `json`.

    Raises:
        ValueError: If the format is unknown.
    """
    fmt = output_format.lower()
    if fmt == "console":
        return ConsoleOutputWriter()
    if fmt == "json":
        return JsonOutputWriter()
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
