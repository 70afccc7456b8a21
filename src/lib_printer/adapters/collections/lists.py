"""Tuple-returning helpers for sequences and iterables.

``None`` in place of a required argument raises
:class:`~lib_printer.domain.errors.InvalidArgumentError`; only
:func:`null_to_empty` accepts it.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from lib_printer.domain.errors import InvalidArgumentError
from lib_printer.domain.formatting import require_not_none

T = TypeVar("T")
R = TypeVar("R")
D = TypeVar("D")


def null_to_empty(values: Sequence[T] | None) -> Sequence[T]:
    """Return *values*, or an empty tuple when it is ``None``.

    Example:
        >>> null_to_empty(None)
        ()
        >>> null_to_empty([1, 2])
        [1, 2]
    """
    if values is None:
        return ()
    return values


def copy(values: Iterable[T]) -> tuple[T, ...]:
    """Snapshot *values*; later changes to the source are not seen."""
    return tuple(require_not_none(values, "values"))


def concat(first: Iterable[T], second: Iterable[T]) -> tuple[T, ...]:
    """Return the elements of *first* followed by those of *second*.

    Example:
        >>> concat([1, 2], ())
        (1, 2)
    """
    require_not_none(first, "first")
    require_not_none(second, "second")
    return (*first, *second)


def convert(values: Iterable[T], mapper: Callable[[T], R]) -> tuple[R, ...]:
    """Apply *mapper* to each element.

    Example:
        >>> convert(["1", "2", "3"], int)
        (1, 2, 3)
    """
    require_not_none(values, "values")
    require_not_none(mapper, "mapper")
    return tuple(mapper(value) for value in values)


def filter_values(values: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T, ...]:
    """Keep the elements accepted by *predicate*, in order.

    Example:
        >>> filter_values([1, 2, 3, 4], lambda i: i < 4)
        (1, 2, 3)
    """
    require_not_none(values, "values")
    require_not_none(predicate, "predicate")
    return tuple(value for value in values if predicate(value))


def split(values: Iterable[T], size: int) -> tuple[tuple[T, ...], ...]:
    """Cut *values* into consecutive chunks of at most *size* elements.

    An empty input yields a single empty chunk.

    Example:
        >>> split([1, 2, 3, 4], 3)
        ((1, 2, 3), (4,))
        >>> split([], 5)
        ((),)
    """
    require_not_none(values, "values")
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidArgumentError(f"size must be a positive int, got {size!r}")
    iterator = iter(values)
    chunks = tuple(iter(lambda: tuple(itertools.islice(iterator, size)), ()))
    return chunks or ((),)


def partition(values: Iterable[T], predicate: Callable[[T], bool]) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """Return ``(accepted, rejected)`` according to *predicate*.

    Example:
        >>> partition([1, 2, 3, 4], lambda i: i < 2)
        ((1,), (2, 3, 4))
    """
    require_not_none(values, "values")
    require_not_none(predicate, "predicate")
    accepted: list[T] = []
    rejected: list[T] = []
    for value in values:
        (accepted if predicate(value) else rejected).append(value)
    return tuple(accepted), tuple(rejected)


def first(values: Iterable[T], default: D | None = None) -> T | D | None:
    """Return the first element, or *default* when there is none.

    Example:
        >>> first([1, 2]), first([]), first([], default=0)
        (1, None, 0)
    """
    return next(iter(require_not_none(values, "values")), default)


def find(values: Iterable[T], predicate: Callable[[T], bool], default: D | None = None) -> T | D | None:
    """Return the first element accepted by *predicate*, or *default*.

    Example:
        >>> find([1, 2], lambda i: i > 1)
        2
        >>> find([1], lambda i: i > 1) is None
        True
    """
    require_not_none(values, "values")
    require_not_none(predicate, "predicate")
    return next((value for value in values if predicate(value)), default)


__all__ = [
    "concat",
    "convert",
    "copy",
    "filter_values",
    "find",
    "first",
    "null_to_empty",
    "partition",
    "split",
]
