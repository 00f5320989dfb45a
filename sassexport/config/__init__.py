"""Configuration schema and loading for sassexport."""

from .loader import load_export_config
from .schema import ExportConfig, InputConfig, OutputConfig

__all__ = [
    "ExportConfig",
    "InputConfig",
    "OutputConfig",
    "load_export_config",
]
