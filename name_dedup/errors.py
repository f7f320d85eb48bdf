"""Exception classes for the duplicate detector.

Raised at the point of violation and never caught inside the library.
"""

from __future__ import annotations


class NameDedupError(Exception):
    """Base exception for all detector errors."""

    pass


class NullInputError(NameDedupError, TypeError):
    """Raised when a required string or sequence argument is None."""

    pass


class InvalidArgumentError(NameDedupError, ValueError):
    """Raised for empty/blank input or a violated structural precondition."""

    pass


class DataSourceCorruptError(NameDedupError, ValueError):
    """Raised when a nickname source line cannot be parsed."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None):
        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ConfigError(NameDedupError):
    """Raised when the detection rules file is unreadable or invalid."""

    pass
