from __future__ import annotations

"""Public configuration API for RestaurantSearch."""

from RestaurantSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from RestaurantSearch.config.backend import BackendConfig
from RestaurantSearch.config.output import OutputConfig
from RestaurantSearch.config.runtime import RuntimeConfig
from RestaurantSearch.config.search import SearchConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "BackendConfig",
    "OutputConfig",
    "RuntimeConfig",
    "SearchConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
