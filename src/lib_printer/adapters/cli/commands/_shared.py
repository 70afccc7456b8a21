"""Helpers shared by the printing commands.

Contents:
    * :func:`decode_escapes` - decode ``\\n``-style escapes in option values.
    * :func:`printing_options` - common ``--sep``/``--end``/``--binary`` options.
    * :func:`cli_printer` - build a Printer from CLI options and configuration.
    * :func:`flush_stdout` - flush standard output after printing.
    * :func:`handle_print_errors` - map printer failures to exit codes.
"""

from __future__ import annotations

import contextlib
import logging
import re
import sys
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

import rich_click as click

from lib_printer.adapters.destinations import StreamDestination, WriterDestination
from lib_printer.domain.errors import ConfigurationError, InvalidArgumentError, OutputIOError
from lib_printer.printer import Printer

from ..constants import ESCAPES
from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_ESCAPE_PATTERN = re.compile(r"\\(.)", re.DOTALL)


def decode_escapes(text: str | None) -> str | None:
    r"""Decode ``\n``, ``\t``, ``\r``, ``\0`` and ``\\``; other escapes stay verbatim.

    Example:
        >>> decode_escapes(r"a\tb\n")
        'a\tb\n'
        >>> decode_escapes(r"\q")
        '\\q'
        >>> decode_escapes(None) is None
        True
    """
    if text is None:
        return None
    return _ESCAPE_PATTERN.sub(lambda match: ESCAPES.get(match.group(1), match.group(0)), text)


def printing_options(func: F) -> F:
    """Attach the options every printing command shares."""
    func = click.option(
        "--binary",
        is_flag=True,
        default=False,
        help="Write encoded bytes to the binary standard output instead of text",
    )(func)
    func = click.option(
        "--end",
        "terminator",
        type=str,
        default=None,
        help="Text written after the output (escapes like \\n allowed); default from [printer]",
    )(func)
    func = click.option(
        "--sep",
        "separator",
        type=str,
        default=None,
        help="Text written between values (escapes like \\t allowed); default from [printer]",
    )(func)
    return func


def cli_printer(cli_ctx: CLIContext, *, separator: str | None, terminator: str | None, binary: bool) -> Printer:
    """Return a Printer on standard output configured from options and ``[printer]``.

    Raises:
        SystemExit: ``[printer]`` is invalid (``ExitCode.CONFIG_ERROR``).
    """
    try:
        settings = cli_ctx.services.load_printer_settings(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    if binary:
        sys.stdout.flush()
        destination: StreamDestination | WriterDestination = StreamDestination(
            sys.stdout.buffer, encoding=settings.encoding, errors=settings.errors
        )
    else:
        destination = WriterDestination(sys.stdout)

    return Printer(
        destination,
        separator=decode_escapes(separator) if separator is not None else settings.separator,
        terminator=decode_escapes(terminator) if terminator is not None else settings.terminator,
    )


def flush_stdout(printer: Printer) -> None:
    """Flush the handle *printer* writes to, if it can be flushed."""
    flush = getattr(printer.destination.handle, "flush", None)
    if callable(flush):
        flush()


@contextlib.contextmanager
def handle_print_errors() -> Iterator[None]:
    """Turn printer failures into an error message and an exit code."""
    try:
        yield
    except OutputIOError as exc:
        logger.error("Printing failed", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.IO_ERROR) from exc
    except InvalidArgumentError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = [
    "cli_printer",
    "decode_escapes",
    "flush_stdout",
    "handle_print_errors",
    "printing_options",
]
