"""Unit and property tests for CLI configuration overrides (--set SECTION.KEY=VALUE)."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from lib_printer.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_simple_key() -> None:
    """SECTION.KEY=VALUE produces the section and a one-element key path."""
    assert parse_override("printer.separator=|") == ConfigOverride(
        section="printer", key_path=("separator",), value="|"
    )


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    """Further dots build a nested key path."""
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_value_containing_equals() -> None:
    """Only the first '=' splits; the value keeps the rest."""
    assert parse_override("printer.separator= = ").value == " = "


@pytest.mark.os_agnostic
def test_parse_override_empty_value() -> None:
    """An empty value is the empty string, useful for an empty separator."""
    assert parse_override("printer.separator=").value == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("printer.separator", "must contain '='"),
        ("separator=,", "at least one dot"),
        (".separator=,", "section name is empty"),
        ("printer..separator=,", "empty component"),
        ("printer.=,", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Malformed overrides raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("42", 42),
        ("1.5", 1.5),
        ("false", False),
        ("null", None),
        ('"\\t"', "\t"),
        ("[1, 2]", [1, 2]),
        (",", ","),
        ("not json", "not json"),
    ],
)
def test_coerce_value_decodes_json_or_keeps_text(raw: str, expected: object) -> None:
    """JSON literals are decoded; anything else stays a string."""
    assert coerce_value(raw) == expected


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_config() -> None:
    """No overrides means no copy."""
    config = Config({"printer": {"separator": " "}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section() -> None:
    """Overridden keys change; untouched keys survive."""
    config = Config({"printer": {"separator": " ", "encoding": "utf-8"}}, {})

    result = apply_overrides(config, ("printer.separator=,", 'printer.terminator=";"'))

    assert result.get("printer.separator") == ","
    assert result.get("printer.terminator") == ";"
    assert result.get("printer.encoding") == "utf-8"
    assert config.get("printer.separator") == " "


@pytest.mark.os_agnostic
def test_apply_overrides_last_one_wins() -> None:
    """Repeated keys keep the final value."""
    result = apply_overrides(Config({}, {}), ("printer.separator=a", "printer.separator=b"))

    assert result.get("printer.separator") == "b"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_scalar_parent() -> None:
    """A nested key under a scalar override raises TypeError."""
    with pytest.raises(TypeError, match="Expected dict"):
        apply_overrides(Config({}, {}), ("printer.separator=,", "printer.separator.inner=1"))


# ======================== properties ========================

ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_always_returns_a_plain_value(raw: str) -> None:
    """coerce_value never raises and yields only JSON-compatible types."""
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_round_trips_integers(value: int) -> None:
    """Integers survive a str -> coerce_value round trip."""
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(
    section=st.from_regex(r"[a-z_][a-z0-9_]{0,10}", fullmatch=True),
    key=st.from_regex(r"[a-z_][a-z0-9_]{0,10}", fullmatch=True),
    value=st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=10),
)
@settings(max_examples=200)
def test_parse_override_preserves_section_and_key(section: str, key: str, value: str) -> None:
    """Well-formed overrides always parse back to their section and key."""
    result = parse_override(f"{section}.{key}={value}")

    assert result.section == section
    assert result.key_path == (key,)
