"""Property-based checks for ``--set`` override parsing and merging."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from algebra.adapters.config.overrides import (
    apply_overrides,
    coerce_value,
    parse_override,
)

IDENTIFIERS = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)
ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_coerce_value_reads_integers(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(values=st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=8))
def test_coerce_value_reads_integer_lists(values: list[int]) -> None:
    assert coerce_value(str(values)) == values


@pytest.mark.os_agnostic
@given(raw=IDENTIFIERS)
@settings(max_examples=200)
def test_coerce_value_keeps_identifiers_as_strings(raw: str) -> None:
    """Policy names and other bare words stay strings; only JSON literals convert."""
    if raw in ("true", "false", "null"):
        return

    assert coerce_value(raw) == raw


@pytest.mark.os_agnostic
@given(section=IDENTIFIERS, keys=st.lists(IDENTIFIERS, min_size=1, max_size=4), value=st.text(max_size=30))
@settings(max_examples=200)
def test_parse_override_accepts_well_formed_assignments(section: str, keys: list[str], value: str) -> None:
    result = parse_override(f"{section}.{'.'.join(keys)}={value}")

    assert result.section == section
    assert result.key_path == tuple(keys)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
@settings(max_examples=200)
def test_parse_override_rejects_strings_without_equals(raw: str) -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)


@pytest.mark.os_agnostic
@given(bits=st.lists(st.integers(min_value=2, max_value=128), min_size=1, max_size=5))
def test_apply_overrides_last_assignment_wins(bits: list[int]) -> None:
    config = Config({"algebra": {"bits": 32, "overflow": "wrap"}}, {})

    result = apply_overrides(config, tuple(f"algebra.bits={value}" for value in bits))

    assert result["algebra"]["bits"] == bits[-1]
    assert result["algebra"]["overflow"] == "wrap"
