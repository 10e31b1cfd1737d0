"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from MultiSearch.cli.runner import CommandRunner
from MultiSearch.config import load_config


@click.group(help="MultiSearch: filter records with multiple search queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    ctx.obj = load_config(config_path)


@cli.command("filter")
@click.argument("data_path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.option(
    "-q",
    "--query",
    "queries",
    multiple=True,
    help="Query as `Label:value`, `field:value` or a bare value for all fields. Repeatable.",
)
@click.option("--categorize-by", default=None, help="Group results by this record field.")
@click.pass_context
def filter_cmd(ctx: click.Context, data_path: Path, queries: tuple[str, ...], categorize_by: str | None) -> None:
    """Filter records from a JSON or YAML file and print the matches.

    Args:
        ctx: Click context.
        data_path: Records file.
        queries: Queries applied in order (AND).
        categorize_by: Optional grouping field.

    Raises:
        click.Abort: When filtering fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_filter(ctx.command.name, data_path, queries, categorize_by)


@cli.command("suggest")
@click.argument("data_path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.argument("field")
@click.pass_context
def suggest_cmd(ctx: click.Context, data_path: Path, field: str) -> None:
    """Print search suggestions for FIELD (label or name)."""
    runner = CommandRunner(ctx.obj)
    runner.run_suggest(ctx.command.name, data_path, field)
