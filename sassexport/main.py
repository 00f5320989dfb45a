"""Main CLI entry point for sassexport.

Provides commands: export, inspect
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from sassexport.cli.export import export_command
from sassexport.cli.inspect import inspect_command

logger = logging.getLogger("sassexport.cli")


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        log_file: Also write log records to this file (optional).
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers: list[logging.Handler] = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="sassexport - Export SASS variables to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Output log to file (optional). Logs are written to this file in addition to console.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Export command
    export_parser = subparsers.add_parser(
        "export",
        help="Extract variables from stylesheets and write them as JSON",
    )
    export_parser.add_argument(
        "inputs",
        nargs="+",
        help="Stylesheet files to read (results are merged in the given order)",
    )
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output JSON file",
    )
    export_parser.add_argument(
        "--flat",
        action="store_true",
        help="Write a flat list of declarations instead of grouping by section",
    )
    export_parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation width (0 for compact output, overrides config)",
    )
    export_parser.add_argument(
        "-w",
        "--workers",
        type=int,
        help="Maximum files parsed concurrently (overrides config)",
    )
    export_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional export configuration. Can be a path to a TOML/JSON "
            "file (e.g. sassexport.toml) or an inline TOML/JSON string. "
            "When omitted, built-in defaults are used."
        ),
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print a summary table of the sections found in stylesheets",
    )
    inspect_parser.add_argument(
        "inputs",
        nargs="+",
        help="Stylesheet files to read",
    )
    inspect_parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Input file encoding (default: utf-8)",
    )

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose, getattr(args, "log_file", None))

    if args.command == "export":
        return export_command(args)
    elif args.command == "inspect":
        return inspect_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
