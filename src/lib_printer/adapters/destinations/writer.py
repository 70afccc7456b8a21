"""Character-oriented destination.

``OSError`` raised by the handle, and the ``ValueError`` io raises for a
closed handle, are wrapped in :class:`~lib_printer.domain.errors.OutputIOError`;
fragments already written by the failing call stay in the sink.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from lib_printer.domain.enums import DestinationKind
from lib_printer.domain.errors import OutputIOError
from lib_printer.domain.formatting import require_not_none

from .locks import lock_for

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Anything accepting ``str`` through ``write``."""

    def write(self, text: str, /) -> object: ...


@dataclass(frozen=True, slots=True)
class WriterDestination:
    """Write fragments as text to an already-open character handle.

    Attributes:
        handle: The text sink. Not owned: never closed or flushed here.

    Example:
        >>> import io
        >>> sink = io.StringIO()
        >>> WriterDestination(sink).write_fragments(["1", ",", "2", "\\n"])
        >>> sink.getvalue()
        '1,2\\n'
    """

    handle: TextSink

    def __post_init__(self) -> None:
        require_not_none(self.handle, "writer")

    @property
    def kind(self) -> DestinationKind:
        return DestinationKind.WRITER

    def write_fragments(self, fragments: Sequence[str]) -> None:
        """Write each non-empty fragment while holding the handle lock.

        Raises:
            OutputIOError: The handle reported an I/O failure or was already
                closed.
        """
        with lock_for(self.handle):
            for written, fragment in enumerate(fragments):
                if not fragment:
                    continue
                try:
                    self.handle.write(fragment)
                except OSError as exc:
                    raise self._failure(exc, written, len(fragments)) from exc
                except ValueError as exc:
                    # io raises ValueError for writes to a closed handle.
                    if not getattr(self.handle, "closed", False):
                        raise
                    raise self._failure(exc, written, len(fragments)) from exc

    def _failure(self, exc: Exception, written: int, total: int) -> OutputIOError:
        logger.debug(
            "Writer destination failed",
            extra={"handle": repr(self.handle), "fragment_index": written, "fragments": total},
        )
        return OutputIOError(f"writing to {self.handle!r} failed: {exc}")


__all__ = ["TextSink", "WriterDestination"]
