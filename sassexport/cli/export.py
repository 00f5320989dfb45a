"""Export command implementation."""

import logging
from pathlib import Path

from sassexport.config import ExportConfig, load_export_config
from sassexport.errors import RecoverableError
from sassexport.export.json import export_json, merge_flat, merge_structured
from sassexport.runtime.batch import parse_sources

logger = logging.getLogger("sassexport.cli.export")


def resolve_config(args) -> ExportConfig:
    """Load the configuration named by ``--config`` and apply CLI overrides.

    Raises:
        ConfigurationError: If the configuration cannot be loaded.
    """
    config = load_export_config(getattr(args, "config", None))

    output_overrides = {}
    if getattr(args, "flat", False):
        output_overrides["flat"] = True
    indent = getattr(args, "indent", None)
    if indent is not None:
        output_overrides["indent"] = indent
    workers = getattr(args, "workers", None)

    if output_overrides or workers is not None:
        data = config.to_dict()
        data["output"].update(output_overrides)
        if workers is not None:
            data["input"]["max_workers"] = workers
        config = load_export_config(data)
    return config


def export_command(args) -> int:
    """Execute export command.

    Args:
        args: Parsed command-line arguments containing:
            - inputs: Stylesheet files to read
            - output: Output JSON file path
            - flat: Export a flat declaration list (optional)
            - indent: JSON indentation override (optional)
            - config: Configuration path or inline text (optional)

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    logger.info("=== sassexport Export ===")

    try:
        config = resolve_config(args)
        inputs = [Path(p) for p in args.inputs]
        output_path = Path(args.output)
        flat = config.output.flat

        logger.info("Inputs: %s", ", ".join(str(p) for p in inputs))
        logger.info("Output path: %s", output_path)
        logger.info("Mode: %s", "flat" if flat else "structured")

        results = [source.result for source in parse_sources(inputs, config.input, flat=flat)]
        merged = merge_flat(results) if flat else merge_structured(results)

        export_json(merged, output_path, config.output)
        logger.info("Export successful: %s", output_path)
        return 0

    except (RecoverableError, OSError, ValueError) as err:
        logger.error("Export failed: %s", err, exc_info=True)
        return 1
