"""Command line interface: `multi-search filter` and `multi-search suggest`.

`ui` declares the click commands, `runner` sets up logging and turns failures
into a clean abort, and `commands` holds the work itself.
"""

from __future__ import annotations

from typing import Sequence

__all__ = ["CommandRunner", "cli", "main"]

from MultiSearch.cli.runner import CommandRunner
from MultiSearch.cli.ui import cli


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI with `argv`, or with the process arguments when None.

    Entry point of the `multi-search` console script.
    """
    cli.main(args=list(argv) if argv is not None else None, prog_name="multi-search")
