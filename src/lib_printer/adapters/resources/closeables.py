"""Close resources without letting cleanup failures escape.

Meant for ``finally`` blocks and error paths where a failing ``close()``
would otherwise mask the original exception.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SupportsClose(Protocol):
    """Anything with a ``close()`` method."""

    def close(self) -> object: ...


def close_quietly(*closeables: SupportsClose | None) -> None:
    """Close every non-``None`` argument in order, suppressing ``Exception``.

    Each failure is logged at debug level and the remaining resources are
    still closed. ``BaseException`` (``KeyboardInterrupt``, ``SystemExit``)
    is not suppressed.

    Example:
        >>> import io
        >>> first, second = io.StringIO(), io.BytesIO()
        >>> close_quietly(first, None, second)
        >>> first.closed and second.closed
        True
    """
    for closeable in closeables:
        if closeable is None:
            continue
        try:
            closeable.close()
        except Exception:
            logger.debug("Ignoring failure while closing %r", closeable, exc_info=True)


__all__ = ["SupportsClose", "close_quietly"]
