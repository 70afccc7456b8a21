"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h where applicable.

    Example:
        >>> int(ExitCode.IO_ERROR)
        74
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    IO_ERROR = 74
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141


__all__ = ["ExitCode"]
