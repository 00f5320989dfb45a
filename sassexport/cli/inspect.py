"""CLI command that summarizes the sections found in stylesheet files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from sassexport.config import InputConfig
from sassexport.errors import RecoverableError
from sassexport.export.json import merge_structured
from sassexport.parsers import PARAM_SUFFIX, StructuredResult
from sassexport.runtime.batch import parse_sources

logger = logging.getLogger("sassexport.cli.inspect")


def build_summary_table(result: StructuredResult) -> Table:
    """Render one row per section with its declaration count and params."""
    table = Table(title="SASS export sections")
    table.add_column("Section", style="bold")
    table.add_column("Declarations", justify="right")
    table.add_column("Map entries", justify="right")
    table.add_column("Params")

    for section, entry in result.items():
        if not isinstance(entry, list):
            continue
        params = result.get(f"{section}{PARAM_SUFFIX}")
        params_text = ""
        if isinstance(params, dict):
            params_text = ", ".join(f"{key}={value}" for key, value in params.items())
        map_entries = sum(len(declaration.map_value or []) for declaration in entry)
        table.add_row(section, str(len(entry)), str(map_entries), params_text)
    return table


def inspect_command(args, console: Optional[Console] = None) -> int:
    """Execute inspect command.

    Args:
        args: Parsed command-line arguments containing ``inputs``.
        console: Rich console to print to (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    try:
        inputs = [Path(p) for p in args.inputs]
        config = InputConfig(encoding=getattr(args, "encoding", None) or "utf-8")
        sources = parse_sources(inputs, config)
        merged = merge_structured([source.result for source in sources])
    except (RecoverableError, ValueError) as err:
        logger.error("Inspect failed: %s", err)
        return 1

    if not merged:
        logger.warning("No SASS variables found in %d file(s)", len(inputs))
        return 0

    console.print(build_summary_table(merged))
    return 0
