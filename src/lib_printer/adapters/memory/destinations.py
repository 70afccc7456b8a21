"""In-memory destination for testing.

Contents:
    * :class:`DestinationSpy` - records every fragment block it is handed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ...domain.enums import DestinationKind
from ..destinations.locks import lock_for


def _empty_block_list() -> list[tuple[str, ...]]:
    """Create an empty typed list for fragment blocks."""
    return []


@dataclass(eq=False)
class DestinationSpy:
    """Captures fragment blocks for test assertions.

    Serializes on its own identity exactly like the production destinations
    serialize on their handle, so it can stand in for them in concurrency
    tests.

    Attributes:
        blocks: One tuple of fragments per ``write_fragments`` call, empty
            fragments removed.
        raise_exception: When set, ``write_fragments`` raises it without
            recording anything.

    Example:
        >>> from lib_printer.printer import Printer
        >>> spy = DestinationSpy()
        >>> Printer(spy, terminator="\\n").print_all("a", None)
        >>> spy.blocks
        [('a', ' ', 'null', '\\n')]
        >>> spy.text
        'a null\\n'
    """

    blocks: list[tuple[str, ...]] = field(default_factory=_empty_block_list)
    raise_exception: Exception | None = None

    @property
    def handle(self) -> object:
        return self

    @property
    def kind(self) -> DestinationKind:
        return DestinationKind.WRITER

    @property
    def text(self) -> str:
        """Everything written so far, concatenated."""
        return "".join("".join(block) for block in self.blocks)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.blocks.clear()
        self.raise_exception = None

    def write_fragments(self, fragments: Sequence[str]) -> None:
        with lock_for(self):
            if self.raise_exception is not None:
                raise self.raise_exception
            self.blocks.append(tuple(fragment for fragment in fragments if fragment))


__all__ = ["DestinationSpy"]
