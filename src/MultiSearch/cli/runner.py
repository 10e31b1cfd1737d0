"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, and error handling for
command execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from MultiSearch.cli.commands import FilterCommand, SuggestCommand
from MultiSearch.config import AppConfig
from MultiSearch.core.records import load_records
from MultiSearch.renderers import create_output_writer
from MultiSearch.services import create_multi_search
from MultiSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, record loading, component creation and
    error handling for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_filter(
        self,
        action: str,
        data_path: Path,
        queries: Sequence[str],
        categorize_by: str | None = None,
    ) -> None:
        """Filter records with the given queries and write the result.

        Args:
            action: The CLI command name (e.g., 'filter').
            data_path: JSON or YAML file with the records.
            queries: Queries applied in order.
            categorize_by: Optional field used to group the results.

        Raises:
            click.Abort: When filtering fails.
        """
        self._configure_logging(action)
        try:
            records = self._load(data_path)
            search = create_multi_search(self.config, records, categorize_by=categorize_by)
            output_writer = create_output_writer(self.config)
            FilterCommand(search=search, queries=queries, output_writer=output_writer).execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Filter failed: %s", e)
            raise click.Abort from e

    def run_suggest(self, action: str, data_path: Path, field: str) -> None:
        """Print the suggestions of one field.

        Raises:
            click.Abort: When the suggestions cannot be computed.
        """
        self._configure_logging(action)
        try:
            search = create_multi_search(self.config, self._load(data_path))
            output_writer = create_output_writer(self.config)
            SuggestCommand(search=search, field=field, output_writer=output_writer).execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Suggest failed: %s", e)
            raise click.Abort from e

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            engine_level=self.config.runtime.engine_level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def _load(self, data_path: Path) -> list[dict]:
        records = load_records(data_path, self.config.fields.date_fields)
        log.info("Loaded %d records from %s", len(records), data_path)
        return records
