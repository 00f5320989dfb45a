"""Result models produced by the SASS variable parser."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Declaration(BaseModel):
    """A single ``$name: value;`` declaration.

    Attributes:
        name: Variable name without the leading ``$``.
        value: Raw value string, whitespace-normalized.
        map_value: Entries of a map literal value, in source order.
        meta_data: Annotations from a preceding ``@meta-data`` block.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    value: str
    map_value: Optional[List["Declaration"]] = Field(default=None, alias="mapValue")
    meta_data: Optional[Dict[str, str]] = Field(default=None, alias="metaData")

    def to_dict(self) -> Dict[str, object]:
        """Serialize to the exported JSON shape (camelCase, optional keys omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


SectionParams = Dict[str, str]
StructuredResult = Dict[str, Union[List[Declaration], SectionParams]]


def structured_to_dict(result: StructuredResult) -> Dict[str, object]:
    """Convert a structured result into plain JSON-compatible data."""
    data: Dict[str, object] = {}
    for key, entry in result.items():
        if isinstance(entry, list):
            data[key] = [declaration.to_dict() for declaration in entry]
        else:
            data[key] = dict(entry)
    return data


__all__ = ["Declaration", "SectionParams", "StructuredResult", "structured_to_dict"]
