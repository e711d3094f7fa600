"""Search backend configuration (Elasticsearch connection and index)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from RestaurantSearch.backend.mapping import index_name
from RestaurantSearch.config.common import (
    expect_float,
    expect_optional_int,
    expect_str,
    get_section,
    get_value,
)

URL_ENV = "ELASTICSEARCH_URL"
ENVIRONMENT_ENV = "RESTAURANT_SEARCH_ENV"


@dataclass(frozen=True, slots=True)
class BackendConfig:
    """Store validated Elasticsearch settings."""

    url: str
    timeout: float
    index_prefix: str
    environment: str
    shards: int | None
    replicas: int | None

    @property
    def index(self) -> str:
        return index_name(self.index_prefix, self.environment)


def load_backend(raw: Mapping[str, Any]) -> BackendConfig:
    """Load backend config; `ELASTICSEARCH_URL` and `RESTAURANT_SEARCH_ENV` win over file values.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "backend", required=True)
    url = expect_str(get_value(section, "url", "backend.url"), "backend.url")
    environment = expect_str(get_value(section, "environment", "backend.environment", "development"), "backend.environment")
    return BackendConfig(
        url=os.getenv(URL_ENV) or url,
        timeout=expect_float(get_value(section, "timeout", "backend.timeout", 10.0), "backend.timeout"),
        index_prefix=expect_str(get_value(section, "index_prefix", "backend.index_prefix"), "backend.index_prefix"),
        environment=os.getenv(ENVIRONMENT_ENV) or environment,
        shards=expect_optional_int(get_value(section, "shards", "backend.shards", None), "backend.shards"),
        replicas=expect_optional_int(get_value(section, "replicas", "backend.replicas", None), "backend.replicas"),
    )


def check_backend(config: BackendConfig) -> None:
    if not config.url.startswith(("http://", "https://")):
        raise ValueError("backend.url must start with http:// or https://")
    if config.timeout <= 0:
        raise ValueError("backend.timeout must be positive")
    if not config.index_prefix.strip():
        raise ValueError("backend.index_prefix must not be empty")
    if not config.environment.strip():
        raise ValueError("backend.environment must not be empty")
    if config.shards is not None and config.shards <= 0:
        raise ValueError("backend.shards must be positive")
    if config.replicas is not None and config.replicas < 0:
        raise ValueError("backend.replicas must not be negative")
