"""sassexport - export SASS variables as structured JSON."""

from sassexport.parsers import (
    PARAM_SUFFIX,
    Declaration,
    Parser,
    parse,
    parse_structured,
)

__version__ = "0.1.0"

__all__ = [
    "PARAM_SUFFIX",
    "Declaration",
    "Parser",
    "parse",
    "parse_structured",
]
