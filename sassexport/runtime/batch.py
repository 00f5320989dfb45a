"""Concurrent parsing of multiple stylesheet files.

Each file is read and parsed in its own task. Parsing is pure, so tasks
share nothing but the configuration; results are returned in input order
regardless of completion order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Union

from sassexport.config.schema import InputConfig
from sassexport.errors import InputError
from sassexport.parsers import Declaration, StructuredResult, parse, parse_structured

logger = logging.getLogger("sassexport.runtime.batch")


@dataclass
class SourceResult:
    """Parse result for one input file."""

    path: Path
    flat: bool
    result: Union[List[Declaration], StructuredResult]

    @property
    def declaration_count(self) -> int:
        if self.flat:
            return len(self.result)
        return sum(len(entry) for entry in self.result.values() if isinstance(entry, list))


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read a stylesheet file.

    Raises:
        InputError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read {path}: {exc}", path=str(path)) from exc


def parse_source(path: Path, config: InputConfig, flat: bool = False) -> SourceResult:
    """Read and parse a single file."""
    text = read_source(path, config.encoding)
    result = parse(text) if flat else parse_structured(text)
    source_result = SourceResult(path=path, flat=flat, result=result)
    logger.debug("Parsed %s: %d declaration(s)", path, source_result.declaration_count)
    return source_result


def parse_sources(
    paths: Sequence[Path], config: InputConfig, flat: bool = False
) -> List[SourceResult]:
    """Parse several files concurrently.

    Args:
        paths: Input files, in the order their results should be merged.
        config: Input configuration (encoding, worker count).
        flat: Produce flat declaration lists instead of structured results.

    Returns:
        One SourceResult per path, in the order of ``paths``.

    Raises:
        InputError: For the earliest input, in input order, that cannot be
            read. Remaining tasks still run.
    """
    if not paths:
        return []

    workers = min(config.max_workers, len(paths))
    logger.info("Parsing %d file(s) with %d worker(s)", len(paths), workers)

    results: Dict[int, SourceResult] = {}
    errors: Dict[int, InputError] = {}

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="SassParse") as executor:
        futures = {
            executor.submit(parse_source, path, config, flat): index
            for index, path in enumerate(paths)
        }
        for future in as_completed(futures):
            index = futures[future]
            try:
                results[index] = future.result()
            except InputError as exc:
                logger.error("%s", exc)
                errors[index] = exc

    if errors:
        raise errors[min(errors)]

    return [results[index] for index in range(len(paths))]


__all__ = ["SourceResult", "parse_source", "parse_sources", "read_source"]
