"""
Domain-specific exception hierarchy and error kinds for the tablefinder application.
"""

from enum import Enum


class TablefinderError(Exception):
    """Base class for all application-level errors."""


class FindAvailableTablesError(TablefinderError):
    """Raised by the table search when no usable candidate times exist."""


class DataStoreError(TablefinderError):
    """Raised when restaurant data cannot be loaded or queried."""


class ErrorKind(str, Enum):
    """Kinds of failure an availability query can end in."""

    INVALID_INPUT = "invalid_input"
    SEARCH_FAILURE = "search_failure"
    UNEXPECTED = "unexpected"
