"""Display configuration through lib_layered_config's Rich renderer.

Pending log records are flushed first so they cannot land in the middle of
the rendered configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from lib_printer.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render *config* (or one *section* of it) to the console.

    Args:
        config: Loaded layered configuration.
        output_format: TOML-like human output or JSON.
        section: Only render this top-level section, e.g. ``"printer"``.
        console: Rich console to render to; the library default when None.
        profile: Profile name included in provenance comments.

    Raises:
        ValueError: *section* does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
