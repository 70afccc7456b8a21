"""Application layer - port definitions.

Contains the protocols that define the interfaces for adapter
implementations.

Contents:
    * :mod:`.ports` - Destination capability and callable adapter protocols
"""

from __future__ import annotations

from .ports import (
    Destination,
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadPrinterSettings,
)

__all__ = [
    "Destination",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadPrinterSettings",
]
