"""Destination adapters - byte stream and text writer sinks.

Contents:
    * :mod:`.stream` - :class:`StreamDestination` for binary handles
    * :mod:`.writer` - :class:`WriterDestination` for text handles
    * :mod:`.locks` - per-handle lock registry
    * :mod:`.resolve` - raw handle classification
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .locks import HandleLockRegistry, forget_lock, lock_for
from .resolve import resolve_destination
from .stream import DEFAULT_ENCODING, DEFAULT_ERRORS, BinarySink, StreamDestination
from .writer import TextSink, WriterDestination

# Static conformance assertions
if TYPE_CHECKING:
    from lib_printer.application.ports import Destination

    _assert_stream: type[Destination] = StreamDestination
    _assert_writer: type[Destination] = WriterDestination

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_ERRORS",
    "BinarySink",
    "HandleLockRegistry",
    "StreamDestination",
    "TextSink",
    "WriterDestination",
    "forget_lock",
    "lock_for",
    "resolve_destination",
]
