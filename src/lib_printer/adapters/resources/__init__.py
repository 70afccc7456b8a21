"""I/O helpers around caller-owned resources.

Contents:
    * :mod:`.closeables` - :func:`close_quietly`
    * :mod:`.empty` - :class:`EmptyInput` and the shared :data:`EMPTY_INPUT`
"""

from __future__ import annotations

from .closeables import SupportsClose, close_quietly
from .empty import EMPTY_INPUT, EmptyInput

__all__ = ["EMPTY_INPUT", "EmptyInput", "SupportsClose", "close_quietly"]
