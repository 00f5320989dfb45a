"""Declaration and map-literal parsing.

``parse_declaration`` turns one raw ``$name: value;`` token into a
:class:`Declaration`. ``parse_map_value`` recursively expands a
parenthesized map literal such as ``(small: 767px, large: (lg: 1200px))``
into ordered entries.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .models import Declaration
from .patterns import DECLARATION_RE, FLAG_RE, MAP_ENTRY_RE, NEWLINES_RE, QUOTED_RE

logger = logging.getLogger("sassexport.parsers.declarations")


def _is_url_slashes(text: str, index: int) -> bool:
    """Whether the ``//`` at ``index`` belongs to a URL rather than a comment.

    Covers a scheme separator (``http://host``) and a protocol-relative
    URL opening a ``url(`` call (``url(//cdn/a.png)``).
    """
    after = text[index + 2 : index + 3]
    if index > 0 and text[index - 1] == ":" and after and not after.isspace():
        return True
    return text[:index].rstrip().lower().endswith("url(")


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` and ``// ...`` comments outside of quoted strings.

    URLs such as ``url(http://host/a.png)`` and ``url(//cdn/a.png)`` are
    kept intact.
    """
    out: List[str] = []
    quote: Optional[str] = None
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if quote:
            out.append(char)
            if char == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            if char == quote:
                quote = None
            i += 1
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = length if end == -1 else end + 2
            continue
        if text.startswith("//", i) and not _is_url_slashes(text, i):
            end = text.find("\n", i)
            i = length if end == -1 else end
            continue
        if char in "\"'":
            quote = char
        out.append(char)
        i += 1
    return "".join(out)


def parse_declaration(raw: str) -> Optional[Declaration]:
    """Parse a single declaration token.

    Args:
        raw: Text such as ``$brand_primary: #fff !default;``.

    Returns:
        Declaration with normalized name and value, or None when the text
        is not a well-formed declaration.
    """
    match = DECLARATION_RE.search(FLAG_RE.sub(";", raw, count=1))
    if not match:
        logger.debug("Dropping malformed declaration: %r", raw)
        return None

    # Only the first underscore is rewritten.
    name = match.group(1).strip().replace("_", "-", 1)

    value = match.group(2).strip()
    if value.startswith("("):
        value = strip_comments(value).strip()
    value = NEWLINES_RE.sub(" ", value)

    quoted = QUOTED_RE.match(value)
    if quoted:
        value = quoted.group(2)

    return Declaration(name=name, value=value)


def _split_top_level(body: str) -> Optional[List[str]]:
    """Split a map body on commas that are not nested in parens or quotes.

    Returns None when the parentheses are unbalanced, which means the
    enclosing value was not a single parenthesized literal.
    """
    segments: List[str] = []
    current: List[str] = []
    depth = 0
    quote: Optional[str] = None
    escaped = False

    for char in body:
        if quote:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return None
        elif char == "," and depth == 0:
            segments.append("".join(current))
            current = []
            continue
        current.append(char)

    if depth != 0:
        return None
    segments.append("".join(current))
    return segments


def parse_map_value(value: str) -> List[Declaration]:
    """Expand a map literal into its ordered entries.

    Args:
        value: Declaration value. Anything other than a parenthesized
            literal yields an empty list.

    Returns:
        One Declaration per ``key: value`` pair, nested maps expanded into
        ``map_value`` recursively.
    """
    stripped = value.strip()
    if len(stripped) < 2 or not (stripped.startswith("(") and stripped.endswith(")")):
        return []

    segments = _split_top_level(stripped[1:-1])
    if segments is None:
        return []

    entries: List[Declaration] = []
    for segment in segments:
        match = MAP_ENTRY_RE.match(segment)
        if not match:
            continue
        entry = parse_declaration(f"${match.group(1)}: {match.group(2)};")
        if entry is None:
            continue
        nested = parse_map_value(entry.value)
        if nested:
            entry = entry.model_copy(update={"map_value": nested})
        entries.append(entry)
    return entries


def expand_declaration(raw: str) -> Optional[Declaration]:
    """Parse a declaration token and attach its map entries, if any."""
    declaration = parse_declaration(raw)
    if declaration is None:
        return None
    entries = parse_map_value(declaration.value)
    if entries:
        declaration = declaration.model_copy(update={"map_value": entries})
    return declaration


__all__ = [
    "expand_declaration",
    "parse_declaration",
    "parse_map_value",
    "strip_comments",
]
