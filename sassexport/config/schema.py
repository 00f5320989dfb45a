"""Configuration schema definitions using Pydantic for validation.

Configuration controls how stylesheet sources are read and how the
extracted variables are written. Using Pydantic ensures configuration
errors are caught early with clear error messages.
"""

import codecs
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """Configuration for reading stylesheet sources.

    Attributes:
        encoding: Text encoding of the input files.
        max_workers: Maximum number of files parsed concurrently.
    """

    encoding: str = "utf-8"
    max_workers: int = Field(default=4, ge=1, le=64)

    model_config = {"extra": "forbid"}

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{v}'") from exc
        return v


class OutputConfig(BaseModel):
    """Configuration for the exported JSON document.

    Attributes:
        indent: JSON indentation width (0 writes a compact document).
        ensure_ascii: Escape non-ASCII characters in the output.
        flat: Export a flat declaration list instead of sections.
        include_params: Keep ``<section>-params`` entries in structured output.
    """

    indent: int = Field(default=2, ge=0, le=8)
    ensure_ascii: bool = False
    flat: bool = False
    include_params: bool = True

    model_config = {"extra": "forbid"}


class ExportConfig(BaseModel):
    """Top-level configuration for an export run.

    Attributes:
        input: Input reading configuration.
        output: Output writing configuration.
    """

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "ExportConfig":
        """Return the built-in default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            ExportConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
