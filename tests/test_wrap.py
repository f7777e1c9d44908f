"""Tests for exit-code constructors."""

from __future__ import annotations

from contextlib import ExitStack

import pytest

import exitstatus
from exitstatus import codes
from exitstatus.errors import ErrorSlot, ExitCodeError, FormattedError


def test_error_returns_none_for_none() -> None:
    """Verify wrapping nothing yields nothing."""
    assert exitstatus.error(127, None) is None


def test_error_wraps_exception() -> None:
    """Verify error builds a carrier around the given exception."""
    original = OSError("disk full")

    carrier = exitstatus.error(codes.IO_ERR, original)

    assert isinstance(carrier, ExitCodeError)
    assert carrier.code == codes.IO_ERR
    assert carrier.err is original
    assert str(carrier) == "disk full"


def test_errorf_formats_message() -> None:
    """Verify errorf renders printf-style operands."""
    carrier = exitstatus.errorf(codes.DATA_ERR, "bad record %d in %s (100%%)", 7, "input.csv")

    assert isinstance(carrier.err, FormattedError)
    assert str(carrier) == "bad record 7 in input.csv (100%)"
    assert exitstatus.status(carrier) == codes.DATA_ERR


def test_errorf_without_operands() -> None:
    """Verify errorf accepts a plain message."""
    assert str(exitstatus.errorf(3, "plain message")) == "plain message"


def test_errorf_wrap_verb_chains_cause() -> None:
    """Verify %w renders like %s and chains the operand as cause."""
    cause = exitstatus.error(codes.NO_PERM, PermissionError("no perm"))

    carrier = exitstatus.errorf(codes.CANT_CREAT, "writing %s: %w", "out.txt", cause)

    assert str(carrier) == "writing out.txt: no perm"
    assert carrier.err.__cause__ is cause
    # The outer carrier is found first.
    assert exitstatus.status(carrier) == codes.CANT_CREAT


def test_errorf_wrap_verb_with_mapping_key() -> None:
    """Verify %(name)w picks its operand from a mapping."""
    cause = ValueError("broken")

    carrier = exitstatus.errorf(1, "%(what)s failed: %(err)w", {"what": "parse", "err": cause})

    assert str(carrier) == "parse failed: broken"
    assert carrier.err.__cause__ is cause


def test_errorf_wrap_verb_after_star_width() -> None:
    """Verify * widths consume an operand before %w."""
    cause = ValueError("x")

    carrier = exitstatus.errorf(1, "[%*d] %w", 3, 5, cause)

    assert str(carrier) == "[  5] x"
    assert carrier.err.__cause__ is cause


def test_errorf_rejects_multiple_wrap_verbs() -> None:
    """Verify only one %w is accepted."""
    with pytest.raises(ValueError, match="at most one %w"):
        exitstatus.errorf(1, "%w and %w", ValueError("a"), ValueError("b"))


def test_errorf_rejects_non_exception_wrap_operand() -> None:
    """Verify %w operands must be exceptions."""
    with pytest.raises(ValueError, match="must be an exception"):
        exitstatus.errorf(1, "value: %w", 42)


def test_errorp_leaves_empty_slot_empty() -> None:
    """Verify errorp does nothing when no error was recorded."""
    slot = ErrorSlot()

    exitstatus.errorp(127, slot)

    assert slot.error is None
    assert not slot


def test_errorp_wraps_recorded_error() -> None:
    """Verify errorp replaces the slot content with a carrier."""
    original = ValueError("error")
    slot = ErrorSlot(original)

    exitstatus.errorp(127, slot)

    assert isinstance(slot.error, ExitCodeError)
    assert slot.error.err is original
    assert exitstatus.status(slot.error) == 127


def test_errorp_runs_on_every_exit_path() -> None:
    """Verify errorp registered as cleanup pins the code on early returns."""

    def load(fail_early: bool) -> ErrorSlot:
        slot = ErrorSlot()
        with ExitStack() as stack:
            stack.callback(exitstatus.errorp, codes.CONFIG, slot)
            if fail_early:
                slot.error = KeyError("missing key")
                return slot
            slot.error = None
        return slot

    assert exitstatus.status(load(True).error) == codes.CONFIG
    assert load(False).error is None


def test_exit_code_on_error_wraps_escaping_exception() -> None:
    """Verify the context manager re-raises failures as carriers."""
    with pytest.raises(ExitCodeError) as excinfo:
        with exitstatus.exit_code_on_error(codes.UNAVAILABLE):
            raise ConnectionError("refused")

    carrier = excinfo.value
    assert isinstance(carrier.err, ConnectionError)
    assert carrier.__cause__ is carrier.err
    assert exitstatus.status(carrier) == codes.UNAVAILABLE


def test_exit_code_on_error_as_decorator() -> None:
    """Verify the helper also decorates functions, once per call."""

    @exitstatus.exit_code_on_error(codes.TEMP_FAIL)
    def flaky(fail: bool) -> str:
        if fail:
            raise TimeoutError("slow")
        return "ok"

    assert flaky(False) == "ok"
    with pytest.raises(ExitCodeError) as excinfo:
        flaky(True)
    assert exitstatus.status(excinfo.value) == codes.TEMP_FAIL
    assert flaky(False) == "ok"


def test_exit_code_on_error_lets_keyboard_interrupt_through() -> None:
    """Verify non-Exception base exceptions are not wrapped."""
    with pytest.raises(KeyboardInterrupt):
        with exitstatus.exit_code_on_error(codes.SOFTWARE):
            raise KeyboardInterrupt


def test_nested_scopes_outermost_code_wins() -> None:
    """Verify the outermost scope's code is found first."""
    with pytest.raises(ExitCodeError) as excinfo:
        with exitstatus.exit_code_on_error(codes.USAGE):
            with exitstatus.exit_code_on_error(codes.DATA_ERR):
                raise ValueError("bad")

    assert exitstatus.status(excinfo.value) == codes.USAGE
