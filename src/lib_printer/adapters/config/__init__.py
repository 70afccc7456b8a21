"""Configuration adapter - loading, display, overrides, and printer settings.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.printer_settings` - ``[printer]`` section model and Printer factory
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .printer_settings import PrinterConfigModel, load_printer_settings, printer_from_config

__all__ = [
    "PrinterConfigModel",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_printer_settings",
    "printer_from_config",
]
