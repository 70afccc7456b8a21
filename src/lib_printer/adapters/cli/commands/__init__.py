"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Printing commands from :mod:`.print_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .print_cmd import cli_print, cli_print_lines, cli_print_map

__all__ = [
    "cli_config",
    "cli_info",
    "cli_print",
    "cli_print_lines",
    "cli_print_map",
]
