"""Output configuration: which writers receive results, and where files go."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MultiSearch.config.common import expect_str, expect_str_list, get_section, reject_unknown_keys

OUTPUT_FORMATS = ("console", "json")
_OUTPUT_KEYS = ("formats", "base_dir", "json_indent")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Store validated output settings.

    Attributes:
        formats: Writers in the order they receive results.
        base_dir: Root of file outputs; JSON goes to `<base_dir>/json`.
        json_indent: Indentation of JSON files, 0 for one line per file.
    """

    formats: tuple[str, ...] = ("console",)
    base_dir: str = "output"
    json_indent: int = 2


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the optional `output` section.

    Format names are case-insensitive; duplicates are dropped.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If unknown keys are present.
    """
    section = get_section(raw, "output", required=False)
    reject_unknown_keys(section, _OUTPUT_KEYS, "output")
    defaults = OutputConfig()

    names = expect_str_list(section.get("formats", list(defaults.formats)), "output.formats")
    indent = section.get("json_indent", defaults.json_indent)
    if isinstance(indent, bool) or not isinstance(indent, int):
        raise TypeError("output.json_indent must be an integer")

    return OutputConfig(
        formats=tuple(dict.fromkeys(name.strip().lower() for name in names if name.strip())),
        base_dir=expect_str(section.get("base_dir", defaults.base_dir), "output.base_dir"),
        json_indent=indent,
    )


def check_output(config: OutputConfig) -> None:
    """Validate formats, the output directory and JSON indentation.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = [name for name in config.formats if name not in OUTPUT_FORMATS]
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {unknown} (allowed: {list(OUTPUT_FORMATS)})")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty when json output is enabled")
    if config.json_indent < 0:
        raise ValueError("output.json_indent must be >= 0")
