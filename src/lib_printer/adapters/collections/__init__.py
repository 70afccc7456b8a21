"""Immutable collection helpers.

Every helper returns a fresh read-only result: tuples for sequences and
``types.MappingProxyType`` views over a private dict for mappings. Mapping
results keep insertion order, so they print in a predictable order through
:meth:`lib_printer.Printer.print_map`.

Contents:
    * :mod:`.lists` - tuple helpers (``split``, ``partition``, ``find``, ...)
    * :mod:`.maps` - read-only mapping helpers (``merge``, ``from_keys``, ...)
"""

from __future__ import annotations

from . import lists, maps

__all__ = ["lists", "maps"]
