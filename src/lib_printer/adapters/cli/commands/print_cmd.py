"""Printing commands exposing the Printer operations on the command line.

Contents:
    * :func:`cli_print` - print arguments as one separated line.
    * :func:`cli_print_lines` - print the lines of a file as one separated line.
    * :func:`cli_print_map` - print ``KEY=VALUE`` arguments as ``key = value`` entries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import cli_printer, flush_stdout, handle_print_errors, printing_options

logger = logging.getLogger(__name__)


@click.command("print", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("values", nargs=-1)
@printing_options
@click.pass_context
def cli_print(
    ctx: click.Context, values: tuple[str, ...], separator: str | None, terminator: str | None, binary: bool
) -> None:
    """Print VALUES joined by the separator, followed by the terminator.

    Without VALUES nothing is printed, not even the terminator.

    Example:
        >>> from click.testing import CliRunner
        >>> # Real invocation tested in test_cli_print.py
    """
    cli_ctx = get_cli_context(ctx)
    printer = cli_printer(cli_ctx, separator=separator, terminator=terminator, binary=binary)
    with lib_log_rich.runtime.bind(job_id="cli-print", extra={"command": "print"}):
        logger.info("Printing values", extra={"count": len(values), "binary": binary})
        with handle_print_errors():
            printer.print_all(*values)
            flush_stdout(printer)


def _stripped_lines(source: TextIO) -> Iterator[str]:
    for line in source:
        yield line.rstrip("\r\n")


@click.command("print-lines", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r"), default="-")
@printing_options
@click.pass_context
def cli_print_lines(
    ctx: click.Context, source: TextIO, separator: str | None, terminator: str | None, binary: bool
) -> None:
    """Print the lines of SOURCE (default: stdin) joined by the separator.

    Lines are read lazily; an empty SOURCE prints the terminator alone.
    """
    cli_ctx = get_cli_context(ctx)
    printer = cli_printer(cli_ctx, separator=separator, terminator=terminator, binary=binary)
    source_name = getattr(source, "name", "-")
    with lib_log_rich.runtime.bind(job_id="cli-print-lines", extra={"command": "print-lines"}):
        logger.info("Printing lines", extra={"source": source_name, "binary": binary})
        with handle_print_errors():
            printer.print_values(_stripped_lines(source))
            flush_stdout(printer)


def _parse_pairs(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` arguments into a dict, later keys overwriting earlier ones."""
    pairs: dict[str, str] = {}
    for raw in value:
        key, sep, item = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", ctx=ctx, param=param)
        pairs[key] = item
    return pairs


@click.command("print-map", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("pairs", nargs=-1, callback=_parse_pairs, metavar="KEY=VALUE...")
@printing_options
@click.pass_context
def cli_print_map(
    ctx: click.Context, pairs: dict[str, str], separator: str | None, terminator: str | None, binary: bool
) -> None:
    """Print each KEY=VALUE as ``KEY = VALUE`` joined by the separator."""
    cli_ctx = get_cli_context(ctx)
    printer = cli_printer(cli_ctx, separator=separator, terminator=terminator, binary=binary)
    with lib_log_rich.runtime.bind(job_id="cli-print-map", extra={"command": "print-map"}):
        logger.info("Printing mapping", extra={"entries": len(pairs), "binary": binary})
        with handle_print_errors():
            printer.print_map(pairs)
            flush_stdout(printer)


__all__ = ["cli_print", "cli_print_lines", "cli_print_map"]
