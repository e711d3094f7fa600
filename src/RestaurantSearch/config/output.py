"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RestaurantSearch.config.common import expect_str, get_section, get_value

ALLOWED_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    section = get_section(raw, "output", required=False)
    return OutputConfig(
        format=expect_str(get_value(section, "format", "output.format", "console"), "output.format").lower(),
    )


def check_output(config: OutputConfig) -> None:
    if config.format not in ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {list(ALLOWED_FORMATS)}")
