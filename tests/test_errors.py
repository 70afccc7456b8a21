"""Domain error types: hierarchy and message preservation."""

from __future__ import annotations

import pytest

from lib_printer.domain.errors import ConfigurationError, InvalidArgumentError, OutputIOError


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("[printer] must be a table")
    assert str(exc) == "[printer] must be a table"


@pytest.mark.os_agnostic
def test_invalid_argument_error_is_value_error() -> None:
    """Generic ValueError handlers still catch rejected arguments."""
    with pytest.raises(ValueError, match="separator must not be None"):
        raise InvalidArgumentError("separator must not be None")


@pytest.mark.os_agnostic
def test_output_io_error_is_os_error() -> None:
    """Generic OSError handlers still catch write failures."""
    with pytest.raises(OSError, match="write failed"):
        raise OutputIOError("write failed")


@pytest.mark.os_agnostic
def test_output_io_error_keeps_its_cause() -> None:
    """The wrapped failure stays reachable."""
    cause = BrokenPipeError(32, "Broken pipe")

    with pytest.raises(OutputIOError) as exc_info:
        raise OutputIOError("write failed") from cause

    assert exc_info.value.__cause__ is cause
