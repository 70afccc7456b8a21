"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.destinations` - Byte stream and text writer destinations
    * :mod:`.config` - Configuration loading, display, overrides, printer settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.resources` - Close-quietly helper and empty input stream
    * :mod:`.threads` - Named daemon-thread factory
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
