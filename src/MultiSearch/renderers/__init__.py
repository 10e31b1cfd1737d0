"""Output writers for filter results and suggestion lists.

`create_output_writer` builds one writer per configured format, in the
configured order, behind a single `MultiOutputWriter`.
"""

from __future__ import annotations

from typing import Callable

from MultiSearch.config import AppConfig
from MultiSearch.renderers.base import MultiOutputWriter, OutputWriter
from MultiSearch.renderers.console import ConsoleOutputWriter, render_text
from MultiSearch.renderers.json import JsonFileWriter, render_json

_WRITER_FACTORIES: dict[str, Callable[[AppConfig], OutputWriter]] = {
    "console": lambda config: ConsoleOutputWriter(),
    "json": lambda config: JsonFileWriter(config.output.base_dir, indent=config.output.json_indent),
}


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create the writer for every format in `config.output.formats`.

    Raises:
        ValueError: If a format has no writer or no format is configured.
    """
    writers: list[OutputWriter] = []
    for name in config.output.formats:
        factory = _WRITER_FACTORIES.get(name)
        if factory is None:
            raise ValueError(f"No output writer for format: {name}")
        writers.append(factory(config))
    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
