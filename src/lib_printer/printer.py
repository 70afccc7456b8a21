"""Immutable printer configuration and the printing operations.

A :class:`Printer` holds a separator, a terminator and one destination. It
never changes after construction: every ``with_*`` call returns a new
instance, so a printer can be shared between threads without
synchronization. Each printing operation builds its complete fragment list
first and then hands it to the destination, which writes it as one block
with respect to every other print call on the same handle object.

System Role:
    Sits at package level, joining the pure fragment builders of the domain
    with the destination adapters.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Final

from .adapters.destinations import (
    DEFAULT_ENCODING,
    DEFAULT_ERRORS,
    BinarySink,
    StreamDestination,
    TextSink,
    WriterDestination,
    resolve_destination,
)
from .application.ports import Destination
from .domain.errors import InvalidArgumentError
from .domain.formatting import (
    mapping_fragments,
    require_not_none,
    require_text,
    scalar_fragments,
    sequence_fragments,
    variadic_fragments,
)

DEFAULT_SEPARATOR: Final[str] = " "
DEFAULT_TERMINATOR: Final[str] = os.linesep


@dataclass(frozen=True, slots=True)
class Printer:
    """Separator, terminator and destination, plus the printing operations.

    Attributes:
        destination: Where fragments are written.
        separator: Text between the elements of a multi-value print.
        terminator: Text appended once after every print call.

    Example:
        >>> import io
        >>> sink = io.StringIO()
        >>> printer = Printer(WriterDestination(sink), separator=",", terminator="\\n")
        >>> printer.print_all(1, 2, 3)
        >>> printer.with_separator(" | ").print_map({"a": 1, "b": None})
        >>> sink.getvalue()
        '1,2,3\\na = 1 | b = null\\n'
    """

    destination: Destination
    separator: str = DEFAULT_SEPARATOR
    terminator: str = DEFAULT_TERMINATOR

    def __post_init__(self) -> None:
        destination = require_not_none(self.destination, "destination")
        if not isinstance(destination, Destination):
            raise InvalidArgumentError(
                f"destination must provide write_fragments, got {type(destination).__name__}; "
                "use with_destination() to wrap a raw handle"
            )
        require_text(self.separator, "separator")
        require_text(self.terminator, "terminator")

    # -- configuration chaining -------------------------------------------------

    def with_separator(self, separator: str) -> Printer:
        """Return a copy printing *separator* between elements."""
        return replace(self, separator=require_text(separator, "separator"))

    def with_terminator(self, terminator: str) -> Printer:
        """Return a copy appending *terminator* after every print call."""
        return replace(self, terminator=require_text(terminator, "terminator"))

    def with_destination(
        self,
        target: Destination | BinarySink | TextSink,
        *,
        encoding: str = DEFAULT_ENCODING,
        errors: str = DEFAULT_ERRORS,
    ) -> Printer:
        """Return a copy writing to *target*.

        *target* is either a destination or a raw handle; raw handles are
        classified by :func:`~lib_printer.adapters.destinations.resolve_destination`.
        *encoding* and *errors* only apply when a binary handle gets wrapped.

        Raises:
            InvalidArgumentError: *target* is ``None`` or of an unknown kind.
        """
        return replace(self, destination=resolve_destination(target, encoding=encoding, errors=errors))

    def to_stream(
        self, handle: BinarySink, *, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS
    ) -> Printer:
        """Return a copy writing encoded bytes to *handle*."""
        return replace(self, destination=StreamDestination(handle, encoding=encoding, errors=errors))

    def to_writer(self, handle: TextSink) -> Printer:
        """Return a copy writing text to *handle*."""
        return replace(self, destination=WriterDestination(handle))

    # -- printing ---------------------------------------------------------------

    def print(self, value: object) -> None:
        """Print one value followed by the terminator; ``None`` prints ``null``."""
        self.destination.write_fragments(scalar_fragments(value, self.terminator))

    def print_all(self, *values: object) -> None:
        """Print *values* joined by the separator, then the terminator.

        Called without values, nothing at all is written.
        """
        fragments = variadic_fragments(values, self.separator, self.terminator)
        if fragments:
            self.destination.write_fragments(fragments)

    def print_values(self, values: Iterable[object]) -> None:
        """Print the elements of *values* joined by the separator, then the terminator.

        *values* is traversed once, before the destination is locked. An
        empty iterable still writes the terminator.

        Raises:
            InvalidArgumentError: *values* is ``None``.
        """
        require_not_none(values, "values")
        self.destination.write_fragments(sequence_fragments(values, self.separator, self.terminator))

    def print_map(self, mapping: Mapping[object, object]) -> None:
        """Print ``key = value`` per entry joined by the separator, then the terminator.

        Raises:
            InvalidArgumentError: *mapping* is ``None`` or not a mapping.
        """
        require_not_none(mapping, "mapping")
        if not isinstance(mapping, Mapping):
            raise InvalidArgumentError(f"mapping must be a Mapping, got {type(mapping).__name__}")
        self.destination.write_fragments(mapping_fragments(mapping, self.separator, self.terminator))


__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_TERMINATOR",
    "Printer",
]
