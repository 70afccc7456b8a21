"""Thread helpers.

Contents:
    * :mod:`.factory` - :class:`NamedThreadFactory`
"""

from __future__ import annotations

from .factory import NamedThreadFactory

__all__ = ["NamedThreadFactory"]
