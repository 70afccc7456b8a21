"""A binary input stream that is always at end of file."""

from __future__ import annotations

import io
from typing import Final


class EmptyInput(io.RawIOBase):
    """Readable byte stream that is permanently at end of file.

    Every read returns ``b""`` and ``skip`` never advances. Closing is a
    no-op so the shared instance stays usable for every holder.

    Example:
        >>> stream = EmptyInput()
        >>> stream.read(), stream.read(10), stream.readline()
        (b'', b'', b'')
        >>> bytearray_buffer = bytearray(4)
        >>> stream.readinto(bytearray_buffer)
        0
        >>> stream.skip(100)
        0
    """

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        return 0

    def available(self) -> int:
        """Bytes readable without blocking: always zero."""
        return 0

    def skip(self, count: int) -> int:
        """Skip up to *count* bytes; returns the number skipped, always zero."""
        return 0

    def close(self) -> None:
        """Keep the shared instance usable; there is nothing to release."""


EMPTY_INPUT: Final[EmptyInput] = EmptyInput()
"""Shared always-empty stream."""


__all__ = ["EMPTY_INPUT", "EmptyInput"]
