"""Tests for the exit-code carrier and related value types."""

from __future__ import annotations

import pickle

import pytest

from exitstatus.errors import ERR_HELP, ErrorSlot, ExitCodeError, ExitCoder, HelpRequested


def test_carrier_is_read_only() -> None:
    """Verify code and wrapped error cannot be reassigned."""
    carrier = ExitCodeError(3, ValueError("x"))

    with pytest.raises(AttributeError):
        carrier.code = 4  # type: ignore[misc]
    with pytest.raises(AttributeError):
        carrier.err = ValueError("y")  # type: ignore[misc]


def test_carrier_unwrap_and_cause_point_at_payload() -> None:
    """Verify the payload is reachable through unwrap and __cause__."""
    original = ValueError("payload")
    carrier = ExitCodeError(3, original)

    assert carrier.unwrap() is original
    assert carrier.__cause__ is original
    assert carrier.exit_code == 3
    assert repr(carrier) == "ExitCodeError(3, ValueError('payload'))"


def test_carrier_satisfies_exit_coder_protocol() -> None:
    """Verify the carrier matches the exit-code capability shape."""
    assert isinstance(ExitCodeError(1, ValueError()), ExitCoder)
    assert not isinstance(ValueError(), ExitCoder)


@pytest.mark.parametrize("code", [True, "1", 1.5])
def test_carrier_rejects_non_int_codes(code: object) -> None:
    """Verify only integer codes are accepted."""
    with pytest.raises(TypeError, match="exit code must be an int"):
        ExitCodeError(code, ValueError())  # type: ignore[arg-type]


def test_carrier_rejects_non_exception_payload() -> None:
    """Verify only exceptions can be wrapped."""
    with pytest.raises(TypeError, match="can only wrap exceptions"):
        ExitCodeError(1, "not an error")  # type: ignore[arg-type]


def test_carrier_survives_pickling() -> None:
    """Verify carriers can cross process boundaries."""
    restored = pickle.loads(pickle.dumps(ExitCodeError(65, ValueError("bad data"))))

    assert restored.code == 65
    assert str(restored) == "bad data"
    assert isinstance(restored.__cause__, ValueError)


def test_help_sentinel_is_help_requested() -> None:
    """Verify the module sentinel is a HelpRequested instance."""
    assert isinstance(ERR_HELP, HelpRequested)


def test_error_slot_repr_and_truthiness() -> None:
    """Verify slots report whether they hold an error."""
    slot = ErrorSlot()
    assert not slot
    slot.error = ValueError("x")
    assert slot
    assert repr(slot) == "ErrorSlot(ValueError('x'))"
