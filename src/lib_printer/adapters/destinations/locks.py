"""One reentrant lock per destination handle instance.

The lock is keyed on the handle's identity, not on the wrapper around it:
every destination built over the same handle object shares one lock, while
two distinct handle objects never do, even when both end up writing to the
same file descriptor.

Contents:
    * :class:`HandleLockRegistry` - identity-keyed lock table.
    * :func:`lock_for` - lookup in the process-wide registry.
    * :func:`forget_lock` - explicit removal from the process-wide registry.
"""

from __future__ import annotations

import threading
import weakref
from functools import partial


class HandleLockRegistry:
    """Identity-keyed table of ``threading.RLock`` objects.

    Entries for weak-referenceable handles vanish once the handle is
    collected. Handles that refuse weak references are held strongly, which
    keeps their ``id()`` from being reused while the entry lives; such
    entries stay until :meth:`forget` removes them.

    Example:
        >>> import io
        >>> registry = HandleLockRegistry()
        >>> buffer = io.StringIO()
        >>> registry.lock_for(buffer) is registry.lock_for(buffer)
        True
        >>> registry.lock_for(buffer) is registry.lock_for(io.StringIO())
        False
    """

    def __init__(self) -> None:
        # Reentrant: a weakref callback may fire from gc inside lock_for.
        self._guard = threading.RLock()
        self._entries: dict[int, tuple[object, threading.RLock]] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def lock_for(self, handle: object) -> threading.RLock:
        """Return the lock shared by every user of *handle*."""
        key = id(handle)
        with self._guard:
            entry = self._entries.get(key)
            if entry is not None and _anchors(entry[0], handle):
                return entry[1]
            lock = threading.RLock()
            self._entries[key] = (self._anchor(key, handle), lock)
            return lock

    def forget(self, handle: object) -> bool:
        """Drop the entry for *handle*; return whether one existed.

        Callers that are done with a handle which cannot be weakly referenced
        use this to release it. A later :meth:`lock_for` starts a new lock.
        """
        key = id(handle)
        with self._guard:
            entry = self._entries.get(key)
            if entry is None or not _anchors(entry[0], handle):
                return False
            del self._entries[key]
            return True

    def _anchor(self, key: int, handle: object) -> object:
        try:
            return weakref.ref(handle, partial(self._collected, key))
        except TypeError:
            return handle

    def _collected(self, key: int, ref: weakref.ref[object]) -> None:
        with self._guard:
            entry = self._entries.get(key)
            if entry is not None and entry[0] is ref:
                del self._entries[key]


def _anchors(anchor: object, handle: object) -> bool:
    if isinstance(anchor, weakref.ref):
        return anchor() is handle
    return anchor is handle


_REGISTRY = HandleLockRegistry()


def lock_for(handle: object) -> threading.RLock:
    """Return the process-wide lock for *handle*.

    Handles that cannot be weakly referenced stay registered until
    :func:`forget_lock` is called for them.

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> lock_for(sink) is lock_for(sink)
        True
    """
    return _REGISTRY.lock_for(handle)


def forget_lock(handle: object) -> bool:
    """Remove *handle* from the process-wide registry.

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> _ = lock_for(sink)
        >>> forget_lock(sink), forget_lock(sink)
        (True, False)
    """
    return _REGISTRY.forget(handle)


__all__ = ["HandleLockRegistry", "forget_lock", "lock_for"]
