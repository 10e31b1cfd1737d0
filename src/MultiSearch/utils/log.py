"""MultiSearch logging utilities.

Two loggers are used: `log` for command progress and results, and its child
`engine_log` for per-recompute decisions (full scan or refine, guard skips,
suggestion builds). The console shows each at its own threshold, so engine
tracing can be enabled without drowning command output, and vice versa.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(scope)s%(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"

log = logging.getLogger("MultiSearch")
engine_log = log.getChild("engine")


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        record.scope = "engine: " if record.name.startswith(engine_log.name) else ""
        return super().format(record)


class _ConsoleThreshold(logging.Filter):
    """Apply separate minimum levels to engine and command records."""

    def __init__(self, level: int, engine_level: int) -> None:
        super().__init__()
        self.level = level
        self.engine_level = engine_level

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003 - stdlib name
        is_engine = record.name.startswith(engine_log.name)
        return record.levelno >= (self.engine_level if is_engine else self.level)


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as `DEBUG` to its number; unknown names give `default`."""
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def configure_logging(
    *,
    level: str = "INFO",
    engine_level: str | None = None,
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Configure the MultiSearch loggers.

    Console format: mm-dd HH:MM:SS [<LVL>] <message>, LVL one of
    DEBG/INFO/WARN/ERRO. Engine messages are prefixed with `engine:`.

    Args:
        level: Console level for command messages.
        engine_level: Console level for engine messages. Defaults to WARNING
            so that per-clause tracing stays out of normal runs.
        action: CLI action name, used for the log file path.
        log_to_file: Mirror every message, DEBUG included, to a file.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when logging only to the console.
    """
    formatter = _AbbrevLevelFormatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.addFilter(_ConsoleThreshold(resolve_level(level), resolve_level(engine_level, logging.WARNING)))

    log.handlers.clear()
    log.addHandler(console)

    log_path = None
    if log_to_file and action:
        action_dir = Path(log_dir or "log") / action
        action_dir.mkdir(parents=True, exist_ok=True)
        log_path = action_dir / f"{action}_{datetime.now():%m%d%H%M%S}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    # Handlers filter; the loggers themselves pass everything.
    log.setLevel(logging.DEBUG)
    engine_log.setLevel(logging.NOTSET)
    log.propagate = False
    return log_path
