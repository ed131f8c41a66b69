"""Tests for models module."""

import dataclasses

import pytest

from lazyseq.sequence.models import (
    EXHAUSTED,
    NO_VALUE,
    Bindings,
    CoroutineStatus,
    Produced,
)


def test_exhausted_is_singleton():
    """Test that EXHAUSTED is a single shared instance."""
    assert type(EXHAUSTED)() is EXHAUSTED
    assert EXHAUSTED.exhausted is True
    assert repr(EXHAUSTED) == "EXHAUSTED"


def test_produced_carries_value():
    """Test that Produced holds its value and compares by value."""
    result = Produced(10)
    assert result.value == 10
    assert result.exhausted is False
    assert result == Produced(10)
    assert result != Produced(20)


def test_produced_is_immutable():
    """Test that a produced result cannot be changed after the fact."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Produced(1).value = 2


def test_no_value_is_distinct_sentinel():
    """Test that NO_VALUE differs from every ordinary value."""
    assert NO_VALUE is not None
    assert NO_VALUE != 0
    assert not NO_VALUE
    assert type(NO_VALUE)() is NO_VALUE
    assert repr(NO_VALUE) == "NO_VALUE"


def test_coroutine_status_values():
    """Test the string values of the coroutine status."""
    assert CoroutineStatus.NOT_STARTED == "not_started"
    assert CoroutineStatus.COMPLETED.value == "completed"


def test_bindings_attribute_access():
    """Test that bindings expose locals as attributes."""
    local = Bindings({"i": 1})
    local.i += 1
    local.total = 10

    assert local.i == 2
    assert local.to_dict() == {"i": 2, "total": 10}
    with pytest.raises(AttributeError):
        local.missing


def test_bindings_snapshot_is_a_copy():
    """Test that to_dict does not expose the live bindings."""
    local = Bindings({"i": 1})
    snapshot = local.to_dict()
    snapshot["i"] = 99
    assert local.i == 1
