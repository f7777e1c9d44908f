"""Exceptions and value types shared by the exit-code resolver and constructors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class ExitStatusError(Exception):
    """Base exception for exitstatus-specific errors."""


@runtime_checkable
class ExitCoder(Protocol):
    """Shape of an error that carries the exit code it wants the process to end with.

    ``ExitCodeError`` implements it, and so does every ``click.ClickException``.
    Any other exception qualifies as soon as it exposes an integer ``exit_code``.
    """

    exit_code: int


class ExitCodeError(ExitStatusError):
    """Wrap an exception together with the exit code the process should use.

    The carrier is read-only: ``code`` and ``err`` cannot be reassigned once
    built. Its message is the message of the wrapped exception, and the wrapped
    exception is both its ``__cause__`` and the return value of ``unwrap()``.
    Build instances through ``exitstatus.error`` rather than directly so that
    ``None`` never gets wrapped.
    """

    def __init__(self, code: int, err: BaseException) -> None:
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f"exit code must be an int, got {type(code).__name__}")
        if not isinstance(err, BaseException):
            raise TypeError(f"can only wrap exceptions, got {type(err).__name__}")
        super().__init__(code, err)
        self._code = code
        self._err = err
        self.__cause__ = err

    @property
    def code(self) -> int:
        return self._code

    @property
    def exit_code(self) -> int:
        return self._code

    @property
    def err(self) -> BaseException:
        return self._err

    def unwrap(self) -> BaseException:
        """Return the wrapped exception."""
        return self._err

    def __str__(self) -> str:
        return str(self._err)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._code!r}, {self._err!r})"


class HelpRequested(ExitStatusError):
    """Raised when the user asked for help instead of running a command.

    Resolves to exit code 2 wherever it appears in an exception chain.
    """


# Sentinel for callers that return help requests instead of raising them.
ERR_HELP = HelpRequested("help requested")


class FormattedError(ExitStatusError):
    """Plain error built from a format string by ``exitstatus.errorf``."""


class ErrorSlot:
    """Mutable holder for the error a function is about to hand back.

    ``errorp`` rewrites ``error`` in place, which lets a cleanup action attach
    an exit code to whatever error ends up in the slot.
    """

    __slots__ = ("error",)

    def __init__(self, error: BaseException | None = None) -> None:
        self.error = error

    def __bool__(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        return f"ErrorSlot({self.error!r})"
