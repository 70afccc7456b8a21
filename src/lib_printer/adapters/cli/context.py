"""Click context helpers for CLI state management.

The root group receives the services factory as ``ctx.obj`` and replaces it
with a :class:`CLIContext`; subcommands read it back with
:func:`get_cli_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from lib_printer.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """Typed state shared by the root group with every subcommand."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the resolved CLI state.

    Args:
        ctx: Click context of the root group.
        traceback: Whether verbose tracebacks were requested.
        config: Configuration after ``--profile`` and ``--set`` were applied.
        services: Port implementations built by the services factory.
        profile: Configuration profile name, if any.
        set_overrides: Raw ``--set`` strings, kept so subcommands can reapply
            them after reloading another profile.

    Example:
        >>> from lib_printer.composition import build_testing
        >>> ctx = click.Context(click.Command("print"), obj=build_testing)
        >>> store_cli_context(
        ...     ctx,
        ...     traceback=False,
        ...     config=Config({}, {}),
        ...     services=build_testing(),
        ...     set_overrides=("printer.separator=,",),
        ... )
        >>> ctx.obj.set_overrides
        ('printer.separator=,',)
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by :func:`store_cli_context`.

    Raises:
        RuntimeError: The root group did not run before the subcommand.

    Example:
        >>> from lib_printer.composition import build_testing
        >>> state = CLIContext(traceback=True, config=Config({}, {}), services=build_testing(), profile="staging")
        >>> get_cli_context(click.Context(click.Command("config"), obj=state)).profile
        'staging'
        >>> get_cli_context(click.Context(click.Command("config")))
        Traceback (most recent call last):
        ...
        RuntimeError: CLI context not initialized. Call store_cli_context first.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror the ``--traceback`` flag into ``lib_cli_exit_tools.config``.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for later restoration.

    Example:
        >>> apply_traceback_preferences(False)
        >>> snapshot_traceback_state()
        (False, False)
    """
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
