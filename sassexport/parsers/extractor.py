"""Tokenizer for SASS variable declarations and export markers.

The whole input is scanned once with a single alternation pattern and the
matches are materialized into a list of typed tokens in source order. Text
that matches none of the alternatives is skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Union

from .patterns import META_ENTRY_RE, TOKEN_RE

logger = logging.getLogger("sassexport.parsers.extractor")


@dataclass(frozen=True)
class DeclarationToken:
    """Raw ``$name: value;`` text, validated later by the declaration parser."""

    raw: str


@dataclass(frozen=True)
class SectionStart:
    """``//@sass-export-section="name"`` marker. ``name`` has quotes removed."""

    name: str


@dataclass(frozen=True)
class SectionEnd:
    """``//@end-sass-export-section`` marker."""


@dataclass(frozen=True)
class SectionParam:
    """``//@param key="value"`` marker."""

    key: str
    value: str


@dataclass(frozen=True)
class MetaDataBlock:
    """Entries of a ``@meta-data`` block comment, later keys winning."""

    entries: Dict[str, str] = field(default_factory=dict)


Token = Union[DeclarationToken, SectionStart, SectionEnd, SectionParam, MetaDataBlock]


def parse_meta_entries(block: str) -> Dict[str, str]:
    """Collect ``@meta-data key="value"`` entries from a block comment."""
    entries: Dict[str, str] = {}
    for match in META_ENTRY_RE.finditer(block):
        entries[match.group("key")] = match.group("value")
    return entries


def extract_tokens(text: str) -> List[Token]:
    """Scan ``text`` and return every recognized token in source order.

    Args:
        text: Raw stylesheet source.

    Returns:
        List of tokens. A metadata block is always immediately followed by
        the declaration it was captured with.
    """
    tokens: List[Token] = []
    if not text:
        return tokens

    for match in TOKEN_RE.finditer(text):
        if match.group("meta") is not None:
            tokens.append(MetaDataBlock(parse_meta_entries(match.group("meta"))))
            tokens.append(DeclarationToken(match.group("meta_declaration")))
        elif match.group("declaration") is not None:
            tokens.append(DeclarationToken(match.group("declaration")))
        elif match.group("section") is not None:
            tokens.append(SectionStart(match.group("section").replace('"', "")))
        elif match.group("param_key") is not None:
            tokens.append(SectionParam(match.group("param_key"), match.group("param_value")))
        elif match.group("section_end") is not None:
            tokens.append(SectionEnd())

    logger.debug("Extracted %d token(s) from %d character(s)", len(tokens), len(text))
    return tokens


def extract_declarations(text: str) -> List[str]:
    """Return the raw text of every declaration token, ignoring markers."""
    return [token.raw for token in extract_tokens(text) if isinstance(token, DeclarationToken)]


__all__ = [
    "DeclarationToken",
    "MetaDataBlock",
    "SectionEnd",
    "SectionParam",
    "SectionStart",
    "Token",
    "extract_declarations",
    "extract_tokens",
    "parse_meta_entries",
]
