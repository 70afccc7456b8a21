"""Pure fragment builders behind every printing operation.

Each builder turns its input into the ordered list of string fragments that
one logical print call writes. Nothing here touches a destination, so the
builders run before any lock is taken.

Contents:
    * :data:`NULL_TEXT` - text written for ``None``.
    * :data:`MAPPING_ASSIGN` - text between a key and its value.
    * :func:`format_value` - text of a single value.
    * :func:`scalar_fragments`, :func:`variadic_fragments`,
      :func:`sequence_fragments`, :func:`mapping_fragments` - builders.
    * :func:`require_not_none`, :func:`require_text` - argument guards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")

NULL_TEXT: Final[str] = "null"
MAPPING_ASSIGN: Final[str] = " = "


def require_not_none(value: T | None, name: str) -> T:
    """Return *value* or raise when it is ``None``.

    Example:
        >>> require_not_none(",", "separator")
        ','
        >>> require_not_none(None, "separator")
        Traceback (most recent call last):
        ...
        lib_printer.domain.errors.InvalidArgumentError: separator must not be None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def require_text(value: str | None, name: str) -> str:
    """Return *value* when it is a string, else raise.

    Example:
        >>> require_text("\\n", "terminator")
        '\\n'
        >>> require_text(3, "terminator")  # type: ignore[arg-type]
        Traceback (most recent call last):
        ...
        lib_printer.domain.errors.InvalidArgumentError: terminator must be a str, got int
    """
    text = require_not_none(value, name)
    if not isinstance(text, str):
        raise InvalidArgumentError(f"{name} must be a str, got {type(text).__name__}")
    return text


def format_value(value: object) -> str:
    """Return the text written for *value*.

    Example:
        >>> format_value(None)
        'null'
        >>> format_value(3.5)
        '3.5'
    """
    if value is None:
        return NULL_TEXT
    return str(value)


def scalar_fragments(value: object, terminator: str) -> list[str]:
    """Fragments for printing one value.

    Example:
        >>> scalar_fragments(None, "\\n")
        ['null', '\\n']
    """
    return [format_value(value), terminator]


def variadic_fragments(values: tuple[object, ...], separator: str, terminator: str) -> list[str]:
    """Fragments for printing a known number of values.

    Zero values yield no fragments at all, not even the terminator.

    Example:
        >>> variadic_fragments((1, 2, 3), ",", "\\n")
        ['1', ',', '2', ',', '3', '\\n']
        >>> variadic_fragments((), ",", "\\n")
        []
    """
    if not values:
        return []
    fragments: list[str] = []
    last = len(values) - 1
    for index, value in enumerate(values):
        fragments.append(format_value(value))
        if index < last:
            fragments.append(separator)
    fragments.append(terminator)
    return fragments


def sequence_fragments(values: Iterable[object], separator: str, terminator: str) -> list[str]:
    """Fragments for printing an iterable of unknown length.

    The iterable is traversed exactly once. One item is held back so the
    separator is only emitted once a following item is known to exist. An
    empty iterable still yields the terminator.

    Example:
        >>> sequence_fragments(iter("ab"), "-", "!")
        ['a', '-', 'b', '!']
        >>> sequence_fragments([], "-", "!")
        ['!']
    """
    fragments: list[str] = []
    iterator = iter(values)
    sentinel = object()
    pending = next(iterator, sentinel)
    while pending is not sentinel:
        upcoming = next(iterator, sentinel)
        fragments.append(format_value(pending))
        if upcoming is not sentinel:
            fragments.append(separator)
        pending = upcoming
    fragments.append(terminator)
    return fragments


def mapping_fragments(mapping: Mapping[object, object], separator: str, terminator: str) -> list[str]:
    """Fragments for printing ``key = value`` entries in iteration order.

    Example:
        >>> "".join(mapping_fragments({"a": 1, "b": None}, ", ", "\\n"))
        'a = 1, b = null\\n'
    """
    fragments: list[str] = []
    last = len(mapping) - 1
    for index, (key, value) in enumerate(mapping.items()):
        fragments.append(format_value(key))
        fragments.append(MAPPING_ASSIGN)
        fragments.append(format_value(value))
        if index < last:
            fragments.append(separator)
    fragments.append(terminator)
    return fragments


__all__ = [
    "MAPPING_ASSIGN",
    "NULL_TEXT",
    "format_value",
    "mapping_fragments",
    "require_not_none",
    "require_text",
    "scalar_fragments",
    "sequence_fragments",
    "variadic_fragments",
]
