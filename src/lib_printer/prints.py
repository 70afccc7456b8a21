"""Process-wide default printer and module-level shortcuts.

The default printer separates values with a single space, ends every call
with ``os.linesep``, and writes text to the process's standard output. The
standard output handle is looked up on every use, so replacing
``sys.stdout`` (test capture, redirection) redirects the shortcuts as well.

The ``with_*`` shortcuts return new standalone printers; the default itself
is never modified.

Example:
    >>> import io
    >>> from lib_printer import prints
    >>> sink = io.StringIO()
    >>> prints.with_separator(",").with_terminator(";").with_destination(sink).print_all("a", "b")
    >>> sink.getvalue()
    'a,b;'
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable, Mapping

from .adapters.destinations import DEFAULT_ENCODING, DEFAULT_ERRORS, BinarySink, TextSink, WriterDestination
from .application.ports import Destination
from .printer import Printer

_default_guard = threading.Lock()
_default: Printer | None = None


def default_printer() -> Printer:
    """Return the default printer bound to the current ``sys.stdout``.

    The same instance is returned for as long as ``sys.stdout`` is not
    replaced.
    """
    global _default
    stdout = sys.stdout
    with _default_guard:
        if _default is None or _default.destination.handle is not stdout:
            _default = Printer(WriterDestination(stdout))
        return _default


def print_value(value: object) -> None:
    """Print one value with the default printer."""
    default_printer().print(value)


def print_all(*values: object) -> None:
    """Print *values* with the default printer; no values, no output."""
    default_printer().print_all(*values)


def print_values(values: Iterable[object]) -> None:
    """Print the elements of *values* with the default printer."""
    default_printer().print_values(values)


def print_map(mapping: Mapping[object, object]) -> None:
    """Print the entries of *mapping* with the default printer."""
    default_printer().print_map(mapping)


def with_separator(separator: str) -> Printer:
    """Return a new printer like the default but with *separator*."""
    return default_printer().with_separator(separator)


def with_terminator(terminator: str) -> Printer:
    """Return a new printer like the default but with *terminator*."""
    return default_printer().with_terminator(terminator)


def with_destination(
    target: Destination | BinarySink | TextSink,
    *,
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ERRORS,
) -> Printer:
    """Return a new printer like the default but writing to *target*."""
    return default_printer().with_destination(target, encoding=encoding, errors=errors)


__all__ = [
    "default_printer",
    "print_all",
    "print_map",
    "print_value",
    "print_values",
    "with_destination",
    "with_separator",
    "with_terminator",
]
