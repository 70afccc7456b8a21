"""Immutable, thread-safe printer for byte streams and text writers.

Public surface:
- Printer and destinations: :class:`Printer`, :class:`StreamDestination`,
  :class:`WriterDestination`
- Default printer shortcuts: :func:`print_value`, :func:`print_all`,
  :func:`print_values`, :func:`print_map`, :func:`with_separator`,
  :func:`with_terminator`, :func:`with_destination`
- Configuration: :func:`get_config`, :func:`printer_from_config`
- Helpers: :func:`close_quietly`, :data:`EMPTY_INPUT`, :class:`NamedThreadFactory`,
  and the read-only collection helpers in :mod:`lists` and :mod:`maps`
- Errors: :class:`InvalidArgumentError`, :class:`OutputIOError`,
  :class:`ConfigurationError`

Example:
    >>> import io
    >>> import lib_printer
    >>> sink = io.StringIO()
    >>> printer = lib_printer.with_destination(sink).with_separator(",").with_terminator("\\n")
    >>> printer.print_values(range(3))
    >>> sink.getvalue()
    '0,1,2\\n'
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .adapters.collections import lists, maps
from .adapters.config.printer_settings import printer_from_config
from .adapters.destinations import StreamDestination, WriterDestination
from .adapters.resources import EMPTY_INPUT, EmptyInput, close_quietly
from .adapters.threads import NamedThreadFactory
from .application.ports import Destination
from .composition import get_config

# Domain exports
from .domain.errors import ConfigurationError, InvalidArgumentError, OutputIOError
from .domain.formatting import NULL_TEXT
from .printer import DEFAULT_SEPARATOR, DEFAULT_TERMINATOR, Printer
from .prints import (
    default_printer,
    print_all,
    print_map,
    print_value,
    print_values,
    with_destination,
    with_separator,
    with_terminator,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_TERMINATOR",
    "EMPTY_INPUT",
    "NULL_TEXT",
    "ConfigurationError",
    "Destination",
    "EmptyInput",
    "InvalidArgumentError",
    "NamedThreadFactory",
    "OutputIOError",
    "Printer",
    "StreamDestination",
    "WriterDestination",
    "close_quietly",
    "default_printer",
    "get_config",
    "lists",
    "maps",
    "print_all",
    "print_info",
    "print_map",
    "print_value",
    "print_values",
    "printer_from_config",
    "with_destination",
    "with_separator",
    "with_terminator",
]
