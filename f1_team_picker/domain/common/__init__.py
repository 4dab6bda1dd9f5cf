"""Common domain utilities."""

from .exceptions import EmptyPoolError, MalformedInputError, TeamPickerError

__all__ = ["TeamPickerError", "MalformedInputError", "EmptyPoolError"]
