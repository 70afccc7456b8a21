"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required argument was ``None`` or of the wrong type.

    Raised synchronously by reconfiguration calls and by printing operations
    whose collection argument itself is missing. ``None`` *elements* inside a
    collection are legal and format as ``"null"``. Inherits from ValueError so
    generic ``except ValueError`` handlers still catch it.

    Example:
        >>> from lib_printer.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("separator must not be None")
        >>> str(err)
        'separator must not be None'
        >>> isinstance(err, ValueError)
        True
    """


class OutputIOError(OSError):
    """Writing to a character destination failed.

    Wraps the original error, which stays reachable via ``__cause__``.
    Fragments written before the failure remain in the destination; there
    is no rollback.

    Example:
        >>> from lib_printer.domain.errors import OutputIOError
        >>> try:
        ...     raise OutputIOError("write failed") from BrokenPipeError(32, "Broken pipe")
        ... except OutputIOError as exc:
        ...     isinstance(exc.__cause__, BrokenPipeError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[printer]`` section holds values that cannot build a
    Printer. Typically caught at CLI boundaries to provide user-friendly
    error messages.

    Example:
        >>> from lib_printer.domain.errors import ConfigurationError
        >>> str(ConfigurationError("printer.separator must be a string"))
        'printer.separator must be a string'
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "OutputIOError",
]
