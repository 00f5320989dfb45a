"""Lexical patterns for SASS variable extraction.

This module holds every regular expression used by the extractor and the
declaration parser. Patterns are compiled once at import time and are only
used through ``finditer``/``search``/``sub``/``match``, so they carry no
cursor state between calls and are safe to share across threads.
"""

from __future__ import annotations

import re

SECTION_TAG = "sass-export-section"
DEFAULT_SECTION = "variables"
PARAM_SUFFIX = "-params"

VARIABLE_PATTERN = r"(?!\d)[\w-][\w-]*"
VALUE_PATTERN = r"\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'|[^;]+"

# Groups: 1 = variable name, 2 = raw value (flag included when present).
DECLARATION_PATTERN = (
    r"\$['\"]?(" + VARIABLE_PATTERN + r")['\"]?\s*:\s*(" + VALUE_PATTERN + r")"
    r"(?:\s*!(?:global|default)\s*;|\s*;(?![^{]*\}))"
)

META_BLOCK_PATTERN = r"/\*(?:(?!\*/)[\s\S])*?@meta-data(?:(?!\*/)[\s\S])*?\*/"

SECTION_START_PATTERN = (
    r"//[ \t]*@" + SECTION_TAG + r"[ \t]*=[ \t]*(?P<section>\"[^\n]*\")"
)

SECTION_PARAM_PATTERN = (
    r"//[ \t]*@param[ \t]+(?P<param_key>[^=\s]+)[ \t]*=[ \t]*"
    r"(?P<param_quote>['\"])(?P<param_value>[^\n]*)(?P=param_quote)"
)

SECTION_END_PATTERN = r"(?P<section_end>//[ \t]*@end-" + SECTION_TAG + r")"

# Alternatives are tried in priority order at every scan position.
TOKEN_RE = re.compile(
    r"(?P<meta>" + META_BLOCK_PATTERN + r")\s*(?P<meta_declaration>" + DECLARATION_PATTERN + r")"
    r"|(?P<declaration>" + DECLARATION_PATTERN + r")"
    r"|" + SECTION_START_PATTERN
    + r"|" + SECTION_PARAM_PATTERN
    + r"|" + SECTION_END_PATTERN
)

DECLARATION_RE = re.compile(DECLARATION_PATTERN)

META_ENTRY_RE = re.compile(
    r"@meta-data[ \t]+(?P<key>[^=\s]+)[ \t]*=[ \t]*(?P<quote>['\"])(?P<value>.*?)(?P=quote)"
)

FLAG_RE = re.compile(r"\s*!(?:default|global)\s*;")
NEWLINES_RE = re.compile(r"\s*\n+\s*")
QUOTED_RE = re.compile(r"^(['\"])((?:(?!\1).)*)\1$", re.DOTALL)

MAP_ENTRY_RE = re.compile(
    r"\s*['\"]?(" + VARIABLE_PATTERN + r")['\"]?\s*:\s*(\S.*)", re.DOTALL
)

__all__ = [
    "DECLARATION_PATTERN",
    "DECLARATION_RE",
    "DEFAULT_SECTION",
    "FLAG_RE",
    "MAP_ENTRY_RE",
    "META_ENTRY_RE",
    "NEWLINES_RE",
    "PARAM_SUFFIX",
    "QUOTED_RE",
    "SECTION_TAG",
    "TOKEN_RE",
]
