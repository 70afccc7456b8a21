"""Named daemon-thread factory for worker pools."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from typing import Any

from lib_printer.domain.formatting import require_text


class NamedThreadFactory:
    """Create daemon threads named ``<pool_name>-worker-<n>``.

    Numbering starts at 1 and is shared by every thread this factory makes,
    across threads calling :meth:`new_thread` concurrently.

    Example:
        >>> factory = NamedThreadFactory("printer")
        >>> first = factory.new_thread(lambda: None)
        >>> second = factory.new_thread(lambda: None)
        >>> (first.name, second.name, first.daemon)
        ('printer-worker-1', 'printer-worker-2', True)
    """

    def __init__(self, pool_name: str) -> None:
        self._prefix = f"{require_text(pool_name, 'pool_name')}-worker-"
        self._sequence = itertools.count(1)
        self._guard = threading.Lock()

    @property
    def prefix(self) -> str:
        return self._prefix

    def new_thread(self, target: Callable[..., object], *args: Any, **kwargs: Any) -> threading.Thread:
        """Return an unstarted daemon thread running ``target(*args, **kwargs)``."""
        with self._guard:
            number = next(self._sequence)
        return threading.Thread(target=target, args=args, kwargs=kwargs, name=f"{self._prefix}{number}", daemon=True)

    def __call__(self, target: Callable[..., object], *args: Any, **kwargs: Any) -> threading.Thread:
        return self.new_thread(target, *args, **kwargs)


__all__ = ["NamedThreadFactory"]
