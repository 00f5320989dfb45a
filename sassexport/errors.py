"""Exception hierarchy for the I/O and configuration layers.

The parser core never raises; these errors only come from reading input
files and loading configuration.
"""

from __future__ import annotations

from typing import Optional


class RecoverableError(Exception):
    """Base class for expected failures that the CLI reports and exits on.

    Attributes:
        path: File the error relates to, when there is one.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class InputError(RecoverableError):
    """Input stylesheet error - the file is missing, unreadable or undecodable."""
    pass


class ConfigurationError(RecoverableError):
    """Configuration error - the config source is malformed or has invalid values."""
    pass
