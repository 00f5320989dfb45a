"""Section state machine that groups declarations into export sections.

States are DEFAULT (the ``variables`` section) and NAMED(section). The
machine consumes tokens from :func:`extract_tokens` and assembles a
structured result mapping section names to declaration lists, plus a
``<section>-params`` entry for every named section that received params.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .declarations import expand_declaration
from .extractor import (
    DeclarationToken,
    MetaDataBlock,
    SectionEnd,
    SectionParam,
    SectionStart,
    Token,
)
from .models import Declaration, StructuredResult
from .patterns import DEFAULT_SECTION, PARAM_SUFFIX

logger = logging.getLogger("sassexport.parsers.sections")


class SectionStateMachine:
    """Single-use accumulator for one structured extraction.

    Pending metadata is only cleared when a declaration consumes it;
    structural markers in between do not reset it.
    """

    def __init__(self) -> None:
        self.current_section = DEFAULT_SECTION
        self.result: StructuredResult = {DEFAULT_SECTION: []}
        self._pending_params: Optional[Dict[str, str]] = None
        self._pending_meta: Optional[Dict[str, str]] = None

    @property
    def in_named_section(self) -> bool:
        return self.current_section != DEFAULT_SECTION

    def feed(self, token: Token) -> None:
        """Apply one token to the machine."""
        if isinstance(token, DeclarationToken):
            self._on_declaration(token)
        elif isinstance(token, SectionStart):
            self._on_section_start(token)
        elif isinstance(token, SectionEnd):
            self._on_section_end()
        elif isinstance(token, SectionParam):
            self._on_param(token)
        elif isinstance(token, MetaDataBlock):
            self._on_meta(token)
        else:
            raise TypeError(f"Unsupported token type: {type(token)!r}")

    def finish(self) -> StructuredResult:
        """Flush the active section and return the assembled result."""
        self._flush_params()
        return self.result

    @classmethod
    def run(cls, tokens: Iterable[Token]) -> StructuredResult:
        """Run a fresh machine over ``tokens``.

        Returns:
            Structured result, or an empty dict when there are no tokens.
        """
        tokens = list(tokens)
        if not tokens:
            return {}

        machine = cls()
        for token in tokens:
            machine.feed(token)
        return machine.finish()

    def _section_list(self, section: str) -> Optional[List[Declaration]]:
        entry = self.result.setdefault(section, [])
        if not isinstance(entry, list):
            logger.debug("Section %s is taken by a params entry", section)
            return None
        return entry

    def _on_section_start(self, token: SectionStart) -> None:
        if not token.name:
            logger.debug("Ignoring section marker with empty name")
            return
        if isinstance(self.result.get(token.name), dict):
            logger.debug("Ignoring section %s, name is taken by a params entry", token.name)
            return

        if token.name != self.current_section:
            # Params belong to the section they were declared in.
            self._flush_params()
        self.current_section = token.name
        self._section_list(token.name)
        logger.debug("Entering section %s", token.name)

    def _on_section_end(self) -> None:
        self._flush_params()
        self.current_section = DEFAULT_SECTION

    def _on_param(self, token: SectionParam) -> None:
        if not self.in_named_section:
            logger.debug("Dropping param %s outside of a named section", token.key)
            return
        if self._pending_params is None:
            self._pending_params = {}
        self._pending_params[token.key] = token.value

    def _on_meta(self, token: MetaDataBlock) -> None:
        if self._pending_meta is None:
            self._pending_meta = {}
        self._pending_meta.update(token.entries)

    def _on_declaration(self, token: DeclarationToken) -> None:
        meta, self._pending_meta = self._pending_meta, None
        declaration = expand_declaration(token.raw)
        if declaration is None:
            return

        if meta is not None:
            declaration = declaration.model_copy(update={"meta_data": meta})

        section = self._section_list(self.current_section)
        if section is not None:
            section.append(declaration)

    def _flush_params(self) -> None:
        if self.in_named_section and self._pending_params:
            key = f"{self.current_section}{PARAM_SUFFIX}"
            params = self.result.setdefault(key, {})
            if isinstance(params, dict):
                params.update(self._pending_params)
                logger.debug("Committed %d param(s) to %s", len(self._pending_params), key)
            else:
                logger.debug("Dropping params for %s, key is taken by a section", key)
        self._pending_params = None


__all__ = ["SectionStateMachine"]
