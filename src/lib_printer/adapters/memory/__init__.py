"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no terminal, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.destinations` - Recording destination (DestinationSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_printer_settings_in_memory,
)
from .destinations import DestinationSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from lib_printer.application.ports import (
        Destination,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadPrinterSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_printer_settings: LoadPrinterSettings = load_printer_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_destination: type[Destination] = DestinationSpy

__all__ = [
    "DestinationSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_printer_settings_in_memory",
]
