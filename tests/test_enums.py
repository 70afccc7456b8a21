"""Domain enums: values, string comparison, and lookup."""

from __future__ import annotations

import pytest

from lib_printer.domain.enums import DestinationKind, OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("member", "value"), [(OutputFormat.HUMAN, "human"), (OutputFormat.JSON, "json")])
def test_output_format_values(member: OutputFormat, value: str) -> None:
    """Members carry the CLI choice strings."""
    assert member.value == value
    assert member == value
    assert OutputFormat(value) is member


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("member", "value"), [(DestinationKind.STREAM, "stream"), (DestinationKind.WRITER, "writer")])
def test_destination_kind_values(member: DestinationKind, value: str) -> None:
    """Exactly two destination variants exist."""
    assert member.value == value
    assert DestinationKind(value) is member
    assert len(DestinationKind) == 2


@pytest.mark.os_agnostic
def test_unknown_output_format_is_rejected() -> None:
    """Lookup of an unknown value raises ValueError."""
    with pytest.raises(ValueError):
        OutputFormat("yaml")
