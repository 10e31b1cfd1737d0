"""Logging configuration: console levels and the optional log file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MultiSearch.config.common import (
    expect_bool,
    expect_optional_str,
    expect_str,
    get_required_value,
    get_section,
    reject_unknown_keys,
)

_ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_KEYS = ("level", "engine_level", "to_file", "dir")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Store validated logging settings.

    Attributes:
        level: Console level of command messages.
        to_file: Mirror all messages to `<dir>/<action>/<action>_<ts>.log`.
        dir: Base directory of log files.
        engine_level: Console level of filter engine tracing; None keeps the
            engine quiet below WARNING.
    """

    level: str
    to_file: bool
    dir: str
    engine_level: str | None = None


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load the required `log` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or unknown keys are present.
    """
    section = get_section(raw, "log", required=True)
    reject_unknown_keys(section, _LOG_KEYS, "log")
    engine_level = expect_optional_str(section.get("engine_level"), "log.engine_level")
    return RuntimeConfig(
        level=expect_str(get_required_value(section, "level", "log.level"), "log.level").strip().upper(),
        to_file=expect_bool(get_required_value(section, "to_file", "log.to_file"), "log.to_file"),
        dir=expect_str(get_required_value(section, "dir", "log.dir"), "log.dir"),
        engine_level=engine_level.upper() if engine_level else None,
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate log levels and the log directory.

    Raises:
        ValueError: If a level is unknown, or file logging has no directory.
    """
    for key, level in (("log.level", config.level), ("log.engine_level", config.engine_level)):
        if level is not None and level not in _ALLOWED_LOG_LEVELS:
            raise ValueError(f"{key} must be one of {list(_ALLOWED_LOG_LEVELS)}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file=true")
