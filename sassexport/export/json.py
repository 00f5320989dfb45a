"""JSON export for extracted SASS variables."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

from sassexport.config.schema import OutputConfig
from sassexport.parsers import PARAM_SUFFIX, Declaration, StructuredResult, structured_to_dict

logger = logging.getLogger("sassexport.export.json")


def merge_flat(results: Sequence[List[Declaration]]) -> List[Declaration]:
    """Concatenate flat results in input order."""
    merged: List[Declaration] = []
    for result in results:
        merged.extend(result)
    return merged


def merge_structured(results: Sequence[StructuredResult]) -> StructuredResult:
    """Merge structured results in input order.

    Section lists are extended; ``-params`` maps are updated so that later
    files win per key.
    """
    merged: StructuredResult = {}
    for result in results:
        for key, entry in result.items():
            if isinstance(entry, list):
                target = merged.setdefault(key, [])
                target.extend(entry)
            else:
                target = merged.setdefault(key, {})
                target.update(entry)
    return merged


def to_json_data(
    result: Union[List[Declaration], StructuredResult], config: OutputConfig
) -> Union[List[Dict[str, object]], Dict[str, object]]:
    """Convert a parse result into JSON-compatible data."""
    if isinstance(result, list):
        return [declaration.to_dict() for declaration in result]

    data = structured_to_dict(result)
    if not config.include_params:
        data = {
            key: value
            for key, value in data.items()
            if not (key.endswith(PARAM_SUFFIX) and isinstance(value, dict))
        }
    return data


def export_json(
    result: Union[List[Declaration], StructuredResult],
    output_path: Path,
    config: OutputConfig,
) -> None:
    """Export a parse result to a JSON file.

    Args:
        result: Flat or structured parse result.
        output_path: Output file path.
        config: Output configuration.
    """
    logger.info("Exporting variables to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = to_json_data(result, config)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(
            data,
            f,
            indent=config.indent or None,
            ensure_ascii=config.ensure_ascii,
        )
        f.write("\n")

    logger.info("JSON export completed: %d top-level entries", len(data))
