"""Attach exit codes to errors where they are created."""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from exitstatus.errors import ErrorSlot, ExitCodeError, FormattedError

# printf-style conversion: optional mapping key, flags, width, precision, length, verb.
_CONVERSION = re.compile(
    r"%(?P<key>\([^)]*\))?"
    r"(?P<flags>[#0 +\-]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?)"
    r"(?P<verb>[a-zA-Z%])"
)


def error(code: int, err: BaseException | None) -> ExitCodeError | None:
    """
    Wrap ``err`` so that it resolves to ``code``.

    ``None`` is returned unchanged, so ``error(code, maybe_failure())`` is safe
    to write without checking for success first.

    Parameters:
        code (int): Exit code the process should end with.
        err (BaseException | None): The error to wrap.

    Returns:
        ExitCodeError | None: The carrier, or ``None`` when ``err`` is ``None``.
    """
    if err is None:
        return None
    return ExitCodeError(code, err)


def _format_operands(args: tuple[Any, ...]) -> Any:
    if len(args) == 1 and isinstance(args[0], Mapping):
        return args[0]
    return args


def _rewrite_wrap_verbs(fmt: str, args: tuple[Any, ...]) -> tuple[str, list[Any]]:
    """Replace ``%w`` verbs with ``%s`` and collect the operands they wrap."""
    wrapped: list[Any] = []
    position = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal position
        text = match.group(0)
        if match.group("verb") == "%":
            return text

        key = match.group("key")
        index = position + match.group("flags").count("*")
        if key is None:
            position = index + 1
        if match.group("verb") != "w":
            return text

        if key is not None:
            operands = _format_operands(args)
            wrapped.append(operands.get(key[1:-1]) if isinstance(operands, Mapping) else None)
        else:
            wrapped.append(args[index] if index < len(args) else None)
        return text[:-1] + "s"

    return _CONVERSION.sub(substitute, fmt), wrapped


def errorf(code: int, fmt: str, *args: Any) -> ExitCodeError:
    """
    Build a new error from a printf-style format string and attach ``code``.

    The ``%w`` verb renders its operand like ``%s`` and makes it the
    ``__cause__`` of the new error, so the operand stays reachable from the
    chain::

        raise errorf(codes.IO_ERR, "reading %s: %w", path, exc)

    Parameters:
        code (int): Exit code the process should end with.
        fmt (str): Format string using ``%`` conversions.
        *args: Operands for ``fmt``; a single mapping serves ``%(name)s`` keys.

    Returns:
        ExitCodeError: The carrier around the formatted error.

    Raises:
        ValueError: If ``fmt`` has more than one ``%w`` or a ``%w`` operand is
            not an exception.
    """
    rewritten, wrapped = _rewrite_wrap_verbs(fmt, args)
    if len(wrapped) > 1:
        raise ValueError(f"errorf accepts at most one %w verb, got {len(wrapped)}")
    if wrapped and not isinstance(wrapped[0], BaseException):
        raise ValueError(f"%w operand must be an exception, got {type(wrapped[0]).__name__}")

    message = rewritten % _format_operands(args) if args else rewritten % ()
    formatted = FormattedError(message)
    if wrapped:
        formatted.__cause__ = wrapped[0]
    return ExitCodeError(code, formatted)


def errorp(code: int, slot: ErrorSlot) -> None:
    """
    Wrap the error held by ``slot`` in place.

    Meant to run as a cleanup action, so every exit path of a function pins
    ``code`` on whatever error it ends up reporting::

        slot = ErrorSlot()
        with ExitStack() as stack:
            stack.callback(errorp, codes.CONFIG, slot)
            slot.error = load_config()

    An empty slot stays empty.
    """
    slot.error = error(code, slot.error)


@contextmanager
def exit_code_on_error(code: int) -> Iterator[None]:
    """
    Re-raise any exception escaping the block wrapped so it resolves to ``code``.

    Works as a context manager and as a function decorator. ``KeyboardInterrupt``
    and ``SystemExit`` are not ``Exception`` subclasses and pass through as they
    are.
    """
    try:
        yield
    except Exception as exc:
        raise ExitCodeError(code, exc) from exc
