"""SASS variable extraction.

Public entry points:

* :func:`parse` - flat list of declarations, markers ignored.
* :func:`parse_structured` - declarations grouped by export section.
* :data:`PARAM_SUFFIX` - suffix of the per-section params entry.
"""

from __future__ import annotations

from typing import List

from .declarations import expand_declaration, parse_declaration, parse_map_value
from .extractor import extract_declarations, extract_tokens
from .models import Declaration, StructuredResult, structured_to_dict
from .patterns import DEFAULT_SECTION, PARAM_SUFFIX
from .sections import SectionStateMachine


def parse(text: str) -> List[Declaration]:
    """Extract every declaration in ``text`` in source order."""
    declarations: List[Declaration] = []
    for raw in extract_declarations(text):
        declaration = expand_declaration(raw)
        if declaration is not None:
            declarations.append(declaration)
    return declarations


def parse_structured(text: str) -> StructuredResult:
    """Extract declarations grouped by ``//@sass-export-section`` markers."""
    return SectionStateMachine.run(extract_tokens(text))


class Parser:
    """Object wrapper around :func:`parse` and :func:`parse_structured`."""

    PARAM_SUFFIX = PARAM_SUFFIX

    def __init__(self, raw_content: str):
        self.raw_content = raw_content

    def parse(self) -> List[Declaration]:
        return parse(self.raw_content)

    def parse_structured(self) -> StructuredResult:
        return parse_structured(self.raw_content)


__all__ = [
    "DEFAULT_SECTION",
    "Declaration",
    "PARAM_SUFFIX",
    "Parser",
    "SectionStateMachine",
    "StructuredResult",
    "expand_declaration",
    "extract_tokens",
    "parse",
    "parse_declaration",
    "parse_map_value",
    "parse_structured",
    "structured_to_dict",
]
