"""Build printers from the ``[printer]`` configuration section.

Contents:
    * :class:`PrinterConfigModel` - pydantic model of the section.
    * :func:`load_printer_settings` - parse the section from a Config.
    * :func:`printer_from_config` - build a configured Printer.
"""

from __future__ import annotations

import codecs
import sys
from collections.abc import Mapping
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from lib_printer.adapters.destinations import (
    DEFAULT_ENCODING,
    DEFAULT_ERRORS,
    BinarySink,
    TextSink,
    resolve_destination,
)
from lib_printer.application.ports import Destination
from lib_printer.domain.errors import ConfigurationError
from lib_printer.printer import DEFAULT_SEPARATOR, DEFAULT_TERMINATOR, Printer


class PrinterConfigModel(BaseModel):
    """Pydantic model for [printer] config section validation.

    Unknown keys are rejected; values are not coerced.

    Example:
        >>> model = PrinterConfigModel(separator=",", terminator=";")
        >>> (model.separator, model.terminator, model.encoding)
        (',', ';', 'utf-8')

        >>> PrinterConfigModel().separator
        ' '
    """

    separator: str = DEFAULT_SEPARATOR
    terminator: str = DEFAULT_TERMINATOR
    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ERRORS

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value


def load_printer_settings(config: Config) -> PrinterConfigModel:
    """Parse the ``[printer]`` section of *config*.

    A missing section yields the defaults.

    Raises:
        ConfigurationError: The section holds unknown keys or invalid values.

    Example:
        >>> load_printer_settings(Config({"printer": {"separator": "|"}}, {})).separator
        '|'
    """
    raw: object = config.get("printer", default={})
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[printer] must be a table, got {type(raw).__name__}")
    try:
        return PrinterConfigModel.model_validate(dict(cast("Mapping[str, object]", raw)))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [printer] configuration: {exc}") from exc


def printer_from_config(
    config: Config,
    destination: Destination | BinarySink | TextSink | None = None,
) -> Printer:
    """Return a Printer configured from *config*.

    Args:
        config: Loaded layered configuration.
        destination: Destination or raw handle; ``sys.stdout`` when None.

    Raises:
        ConfigurationError: The ``[printer]`` section is invalid.

    Example:
        >>> import io
        >>> sink = io.StringIO()
        >>> config = Config({"printer": {"separator": "-", "terminator": "!"}}, {})
        >>> printer_from_config(config, sink).print_all(1, 2)
        >>> sink.getvalue()
        '1-2!'
    """
    settings = load_printer_settings(config)
    target = destination if destination is not None else sys.stdout
    return Printer(
        resolve_destination(target, encoding=settings.encoding, errors=settings.errors),
        separator=settings.separator,
        terminator=settings.terminator,
    )


__all__ = [
    "PrinterConfigModel",
    "load_printer_settings",
    "printer_from_config",
]
