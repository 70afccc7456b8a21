"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; the CLI version banner,
configuration paths, and ``info`` command all read from this module.

Contents:
    * Identity constants (:data:`name`, :data:`title`, :data:`version`, ...).
    * Layered configuration identifiers (:data:`LAYEREDCONF_VENDOR`, ...).
    * :func:`print_info` - render the metadata block.
"""

from __future__ import annotations

from typing import Final

#: Distribution name.
name: Final[str] = "lib_printer"
#: One-line project description shown in CLI help.
title: Final[str] = "Immutable, thread-safe printer writing to byte streams or text writers"
#: Release version.
version: Final[str] = "1.0.0"
#: Project homepage.
homepage: Final[str] = "https://github.com/bitranox/lib_printer"
#: Author name.
author: Final[str] = "bitranox"
#: Author contact address.
author_email: Final[str] = "bitranox@gmail.com"
#: Console script name.
shell_command: Final[str] = "lib_printer"

#: Vendor segment of the layered configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
#: Application segment of the layered configuration paths.
LAYEREDCONF_APP: Final[str] = "Lib Printer"
#: Slug used for XDG configuration directories.
LAYEREDCONF_SLUG: Final[str] = "lib_printer"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for lib_printer:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
