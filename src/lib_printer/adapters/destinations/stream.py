"""Byte-oriented destination.

Fragments are encoded up front and handed to the handle's ``write``.
Failures raised by the handle propagate unchanged.
"""

from __future__ import annotations

import codecs
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from lib_printer.domain.enums import DestinationKind
from lib_printer.domain.errors import InvalidArgumentError
from lib_printer.domain.formatting import require_not_none, require_text

from .locks import lock_for

DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "strict"


class BinarySink(Protocol):
    """Anything accepting ``bytes`` through ``write``."""

    def write(self, data: bytes, /) -> object: ...


@dataclass(frozen=True, slots=True)
class StreamDestination:
    """Write fragments as encoded bytes to an already-open binary handle.

    Attributes:
        handle: The binary sink. Not owned: never closed or flushed here.
        encoding: Codec used to turn fragments into bytes.
        errors: Codec error handler.

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> StreamDestination(sink).write_fragments(["a", "", "é"])
        >>> sink.getvalue()
        b'a\\xc3\\xa9'
    """

    handle: BinarySink
    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ERRORS

    def __post_init__(self) -> None:
        require_not_none(self.handle, "stream")
        encoding = require_text(self.encoding, "encoding")
        errors = require_text(self.errors, "errors")
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise InvalidArgumentError(f"unknown encoding: {encoding}") from exc
        try:
            codecs.lookup_error(errors)
        except LookupError as exc:
            raise InvalidArgumentError(f"unknown error handler: {errors}") from exc

    @property
    def kind(self) -> DestinationKind:
        return DestinationKind.STREAM

    def write_fragments(self, fragments: Sequence[str]) -> None:
        """Encode every non-empty fragment, then write them while holding the handle lock.

        An encoding failure is raised before the lock is taken and before
        anything reaches the handle.
        """
        chunks = [fragment.encode(self.encoding, self.errors) for fragment in fragments if fragment]
        with lock_for(self.handle):
            for chunk in chunks:
                self.handle.write(chunk)


__all__ = ["DEFAULT_ENCODING", "DEFAULT_ERRORS", "BinarySink", "StreamDestination"]
