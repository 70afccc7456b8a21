"""Domain layer - pure formatting logic with no I/O or framework dependencies.

Contents:
    * :mod:`.formatting` - Fragment builders for every printing operation
    * :mod:`.enums` - Domain enumerations (OutputFormat, DestinationKind)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import DestinationKind, OutputFormat
from .errors import ConfigurationError, InvalidArgumentError, OutputIOError
from .formatting import (
    MAPPING_ASSIGN,
    NULL_TEXT,
    format_value,
    mapping_fragments,
    require_not_none,
    require_text,
    scalar_fragments,
    sequence_fragments,
    variadic_fragments,
)

__all__ = [
    # Formatting
    "MAPPING_ASSIGN",
    "NULL_TEXT",
    "format_value",
    "mapping_fragments",
    "require_not_none",
    "require_text",
    "scalar_fragments",
    "sequence_fragments",
    "variadic_fragments",
    # Enums
    "DestinationKind",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
    "OutputIOError",
]
