"""Read-only mapping helpers.

Results are ``types.MappingProxyType`` views over a dict no one else holds,
so callers cannot modify them and later changes to the inputs are not seen.
On duplicate keys the later entry wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import TypeVar

from lib_printer.domain.formatting import require_not_none

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")
U = TypeVar("U")


def _frozen(items: dict[K, V]) -> Mapping[K, V]:
    return MappingProxyType(items)


def null_to_empty(mapping: Mapping[K, V] | None) -> Mapping[K, V]:
    """Return *mapping*, or an empty read-only mapping when it is ``None``.

    Example:
        >>> dict(null_to_empty(None))
        {}
    """
    if mapping is None:
        return _frozen({})
    return mapping


def of_entries(*entries: tuple[K, V]) -> Mapping[K, V]:
    """Build a read-only mapping from ``(key, value)`` pairs.

    Neither keys nor values may be ``None``.

    Example:
        >>> dict(of_entries(("a", 1), ("b", 2)))
        {'a': 1, 'b': 2}
        >>> of_entries(("a", None))
        Traceback (most recent call last):
        ...
        lib_printer.domain.errors.InvalidArgumentError: value must not be None
    """
    items: dict[K, V] = {}
    for key, value in entries:
        items[require_not_none(key, "key")] = require_not_none(value, "value")
    return _frozen(items)


def convert(
    mapping: Mapping[K, V],
    value_mapper: Callable[[V], U],
    key_mapper: Callable[[K], R] | None = None,
) -> Mapping[K | R, U]:
    """Map every value, and every key when *key_mapper* is given.

    Example:
        >>> dict(convert({"a": "1"}, int, key_mapper=str.upper))
        {'A': 1}
    """
    require_not_none(mapping, "mapping")
    require_not_none(value_mapper, "value_mapper")
    if key_mapper is None:
        return _frozen({key: value_mapper(value) for key, value in mapping.items()})
    return _frozen({key_mapper(key): value_mapper(value) for key, value in mapping.items()})


def filter_items(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Mapping[K, V]:
    """Keep the entries for which ``predicate(key, value)`` is true.

    Example:
        >>> dict(filter_items({"a": 1, "b": 2}, lambda key, value: value > 1))
        {'b': 2}
    """
    require_not_none(mapping, "mapping")
    require_not_none(predicate, "predicate")
    return _frozen({key: value for key, value in mapping.items() if predicate(key, value)})


def merge(first: Mapping[K, V], second: Mapping[K, V]) -> Mapping[K, V]:
    """Combine two mappings; values from *second* win on shared keys.

    Example:
        >>> dict(merge({"a": 1, "b": 2}, {"b": 3}))
        {'a': 1, 'b': 3}
    """
    require_not_none(first, "first")
    require_not_none(second, "second")
    return _frozen({**first, **second})


def from_keys(keys: Iterable[K], value_maker: Callable[[K], V]) -> Mapping[K, V]:
    """Map each key to ``value_maker(key)``."""
    require_not_none(keys, "keys")
    require_not_none(value_maker, "value_maker")
    return _frozen({key: value_maker(key) for key in keys})


def from_values(values: Iterable[V], key_maker: Callable[[V], K]) -> Mapping[K, V]:
    """Index *values* by ``key_maker(value)``.

    Example:
        >>> dict(from_values(["apple", "banana"], lambda word: word[0]))
        {'a': 'apple', 'b': 'banana'}
    """
    require_not_none(values, "values")
    require_not_none(key_maker, "key_maker")
    return _frozen({key_maker(value): value for value in values})


__all__ = [
    "convert",
    "filter_items",
    "from_keys",
    "from_values",
    "merge",
    "null_to_empty",
    "of_entries",
]
