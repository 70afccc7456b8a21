"""Handle lock registry: identity keys, entry lifetime."""

from __future__ import annotations

import gc
import io

import pytest

from lib_printer.adapters.destinations.locks import HandleLockRegistry, forget_lock, lock_for


class _NoWeakrefs:
    """Handle type that cannot be weakly referenced."""

    __slots__ = ("data",)

    def __init__(self) -> None:
        self.data: list[str] = []


@pytest.mark.os_agnostic
def test_same_handle_gets_the_same_lock() -> None:
    """Repeated lookups for one handle return one lock."""
    registry = HandleLockRegistry()
    handle = io.StringIO()

    assert registry.lock_for(handle) is registry.lock_for(handle)


@pytest.mark.os_agnostic
def test_equal_but_distinct_handles_get_different_locks() -> None:
    """Keys are identities, not equality."""
    registry = HandleLockRegistry()

    assert registry.lock_for(io.BytesIO(b"x")) is not registry.lock_for(io.BytesIO(b"x"))


@pytest.mark.os_agnostic
def test_entry_disappears_when_the_handle_is_collected() -> None:
    """Weak-referenceable handles do not keep their entry alive."""
    registry = HandleLockRegistry()
    handle = io.StringIO()
    registry.lock_for(handle)
    assert len(registry) == 1

    del handle
    gc.collect()

    assert len(registry) == 0


@pytest.mark.os_agnostic
def test_handles_without_weakref_support_are_held() -> None:
    """Handles that refuse weak references still get a stable lock."""
    registry = HandleLockRegistry()
    handle = _NoWeakrefs()

    first = registry.lock_for(handle)

    assert registry.lock_for(handle) is first
    assert len(registry) == 1


@pytest.mark.os_agnostic
def test_forget_releases_a_strongly_held_handle() -> None:
    """Explicit removal bounds the registry for handles without weak references."""
    registry = HandleLockRegistry()
    handle = _NoWeakrefs()
    first = registry.lock_for(handle)

    assert registry.forget(handle) is True
    assert len(registry) == 0
    assert registry.lock_for(handle) is not first


@pytest.mark.os_agnostic
def test_forget_ignores_unknown_handles() -> None:
    """Forgetting a handle that was never registered is a no-op."""
    registry = HandleLockRegistry()
    registry.lock_for(io.StringIO())

    assert registry.forget(_NoWeakrefs()) is False


@pytest.mark.os_agnostic
def test_process_wide_forget_drops_the_entry() -> None:
    """The module-level helper removes entries from the shared registry."""
    handle = _NoWeakrefs()
    first = lock_for(handle)

    assert forget_lock(handle) is True
    assert forget_lock(handle) is False
    assert lock_for(handle) is not first
    forget_lock(handle)


@pytest.mark.os_agnostic
def test_process_wide_lookup_is_stable() -> None:
    """The module-level helper shares one registry."""
    handle = io.StringIO()

    assert lock_for(handle) is lock_for(handle)


@pytest.mark.os_agnostic
def test_registry_locks_are_reentrant() -> None:
    """The same thread may acquire a handle lock twice."""
    lock = HandleLockRegistry().lock_for(io.StringIO())

    with lock, lock:
        pass
