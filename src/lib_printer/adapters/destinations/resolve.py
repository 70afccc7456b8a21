"""Turn a raw handle into the matching destination variant."""

from __future__ import annotations

import io

from lib_printer.application.ports import Destination
from lib_printer.domain.errors import InvalidArgumentError
from lib_printer.domain.formatting import require_not_none

from .stream import DEFAULT_ENCODING, DEFAULT_ERRORS, StreamDestination
from .writer import WriterDestination


def resolve_destination(
    target: object,
    *,
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ERRORS,
) -> Destination:
    """Return *target* itself when it already is a destination, else wrap it.

    Text handles (``io.TextIOBase`` or anything exposing ``encoding``) become
    a :class:`WriterDestination`; binary handles (``io.RawIOBase`` or
    ``io.BufferedIOBase``) become a :class:`StreamDestination` using
    *encoding* and *errors*.

    Raises:
        InvalidArgumentError: *target* is ``None`` or its kind cannot be told
            apart; wrap it in a destination class explicitly instead.

    Example:
        >>> import io
        >>> resolve_destination(io.StringIO()).kind.value
        'writer'
        >>> resolve_destination(io.BytesIO()).kind.value
        'stream'
    """
    require_not_none(target, "destination")
    if isinstance(target, Destination):
        return target
    if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
        return StreamDestination(target, encoding=encoding, errors=errors)
    if isinstance(target, io.TextIOBase) or hasattr(target, "encoding"):
        return WriterDestination(target)  # type: ignore[arg-type]
    raise InvalidArgumentError(
        f"cannot tell whether {type(target).__name__} is a byte stream or a text writer; "
        "wrap it in StreamDestination or WriterDestination"
    )


__all__ = ["resolve_destination"]
