"""Type-safe domain enums for output formats and destination kinds."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DestinationKind(str, Enum):
    """The two interchangeable destination variants.

    Attributes:
        STREAM: Byte-oriented sink; fragments are encoded before writing.
        WRITER: Character-oriented sink; fragments are written as text.

    Example:
        >>> DestinationKind.STREAM.value
        'stream'
        >>> DestinationKind.WRITER == "writer"
        True
    """

    STREAM = "stream"
    WRITER = "writer"


__all__ = [
    "DestinationKind",
    "OutputFormat",
]
