"""Application ports: Protocol definitions for adapters.

Callable ports define a ``__call__`` method whose signature exactly matches
the corresponding adapter function. Existing module-level functions satisfy
these protocols automatically via structural subtyping (PEP 544).

:class:`Destination` is the one non-callable port: the single capability
every printer output target provides.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``PrinterConfigModel``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..domain.enums import DestinationKind, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.printer_settings import PrinterConfigModel


@runtime_checkable
class Destination(Protocol):
    """A sink that writes the fragments of one print call as a single block.

    Implementations serialize ``write_fragments`` per underlying handle
    instance, skip empty fragments, and never open, close, or flush the
    handle.
    """

    @property
    def handle(self) -> object: ...

    @property
    def kind(self) -> DestinationKind: ...

    def write_fragments(self, fragments: Sequence[str]) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadPrinterSettings(Protocol):
    """Parse the ``[printer]`` section of a configuration."""

    def __call__(self, config: Config) -> PrinterConfigModel: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "Destination",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadPrinterSettings",
]
