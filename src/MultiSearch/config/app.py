from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from MultiSearch.config.common import reject_unknown_keys
from MultiSearch.config.fields import FieldsConfig, check_fields, load_fields
from MultiSearch.config.output import OutputConfig, check_output, load_output
from MultiSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from MultiSearch.config.search import SearchConfig, check_search, load_search


_ROOT_KEYS = ("log", "search", "fields", "output")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    search: SearchConfig
    fields: FieldsConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    reject_unknown_keys(raw, _ROOT_KEYS, "config")
    runtime = load_runtime(raw)
    search = load_search(raw)
    fields = load_fields(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_search(search)
    check_fields(fields)
    check_output(output)

    config = AppConfig(runtime=runtime, search=search, fields=fields, output=output)
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(config_path: Path, default_path: Path = Path("config/default.yml")) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override file.
        default_path: Defaults file.
    """
    if config_path == default_path:
        return load_config(config_path)
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def check_cross_domain(config: AppConfig) -> None:
    """Validate cross-domain constraints."""
    replacement = config.search.global_search_replacement
    if replacement and replacement not in config.fields.names():
        raise ValueError(f"search.global_search_replacement must name a declared field: {replacement}")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings. Lists are replaced, not merged."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
