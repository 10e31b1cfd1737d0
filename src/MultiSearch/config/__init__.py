from __future__ import annotations

"""Configuration loading for MultiSearch.

A config file has four sections: `log`, `search` (matching and clause
options), `fields` (searchable fields) and `output`. Only `log` and `fields`
are required.
"""

from MultiSearch.config.app import (
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from MultiSearch.config.fields import FieldsConfig
from MultiSearch.config.output import OUTPUT_FORMATS, OutputConfig
from MultiSearch.config.runtime import RuntimeConfig
from MultiSearch.config.search import SearchConfig

__all__ = [
    "AppConfig",
    "FieldsConfig",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "RuntimeConfig",
    "SearchConfig",
    "check_cross_domain",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
