"""Choose a process exit code for an exception.

``status(err)`` walks the whole exception chain of ``err``:

- ``None`` means success and always gives ``OK`` (0).
- A custom error handler, when one is set, gets first refusal.
- A help request anywhere in the chain gives ``HELP_ERR`` (2).
- Otherwise the first link that carries its own exit code decides.
- Everything else gives ``ERR`` (1).

``exit(err)`` hands that code to the termination primitive, ``sys.exit`` by
default. The handler lives on an ``ExitPolicy``. The module-level functions use
``default_policy``, whose handler is process-wide state: set it once, early,
before any concurrent work starts.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

from click.exceptions import NoArgsIsHelpError

from exitstatus import codes
from exitstatus.chain import walk
from exitstatus.errors import HelpRequested

log = logging.getLogger(__name__)

ErrorHandler = Callable[[BaseException], tuple[int, bool]]
ExitFunc = Callable[[int], object]

HELP_ERRORS: tuple[type[BaseException], ...] = (HelpRequested, NoArgsIsHelpError)
# Attributes through which foreign errors report an exit code, in lookup order.
CODE_ATTRIBUTES: tuple[str, ...] = ("exit_code", "returncode")

# Overridden in tests.
_exit_fn: ExitFunc = sys.exit


def is_help_request(exc: BaseException) -> bool:
    """Return whether ``exc`` signals that the user asked for help."""
    return isinstance(exc, HELP_ERRORS)


def exit_code_of(exc: BaseException) -> int | None:
    """
    Return the exit code ``exc`` carries itself, if it carries one.

    Any exception with an integer ``exit_code`` (``ExitCodeError``, Click
    exceptions) or ``returncode`` (child-process failures) qualifies.

    Parameters:
        exc (BaseException): A single link of an exception chain.

    Returns:
        int | None: The carried code, or ``None`` for plain exceptions.
    """
    for name in CODE_ATTRIBUTES:
        try:
            value = getattr(exc, name, None)
        except Exception:
            # A broken property is no exit code.
            continue
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def builtin_status(err: BaseException) -> int:
    """Apply the builtin rules to a non-``None`` error."""
    chain = list(walk(err))
    if any(is_help_request(link) for link in chain):
        return codes.HELP_ERR

    for link in chain:
        code = exit_code_of(link)
        if code is not None:
            return code
    return codes.ERR


class ExitPolicy:
    """
    Exit-code policy: an optional custom handler plus a termination primitive.

    Parameters:
        handler (ErrorHandler | None): Consulted before the builtin rules for
            every non-``None`` error. Returns ``(code, handled)``; the code is
            used only when ``handled`` is true.
        exit_fn (ExitFunc | None): Called with the final code by ``exit``.
            Defaults to ``sys.exit``.
    """

    def __init__(
        self,
        handler: ErrorHandler | None = None,
        exit_fn: ExitFunc | None = None,
    ) -> None:
        self.handler = handler
        self.exit_fn = exit_fn

    def __repr__(self) -> str:
        return f"ExitPolicy(handler={self.handler!r}, exit_fn={self.exit_fn!r})"

    def with_handler(self, handler: ErrorHandler | None) -> "ExitPolicy":
        """Return a copy of this policy using ``handler``."""
        return ExitPolicy(handler=handler, exit_fn=self.exit_fn)

    def status(self, err: BaseException | None) -> int:
        """Pick a suitable exit code for ``err``."""
        if err is None:
            return codes.OK

        if self.handler is not None:
            code, handled = self.handler(err)
            if handled:
                return code

        return builtin_status(err)

    def exit(self, err: BaseException | None) -> None:
        """Terminate with the exit code chosen for ``err``.

        Returns only when a substituted ``exit_fn`` does.
        """
        code = self.status(err)
        log.debug("Exiting with status %d", code)
        exit_fn = self.exit_fn if self.exit_fn is not None else _exit_fn
        exit_fn(code)


default_policy = ExitPolicy()


def set_error_handler(handler: ErrorHandler | None) -> None:
    """
    Install ``handler`` on the default policy, or clear it with ``None``.

    Not thread-safe. Call it early in ``main`` before errors are handled
    concurrently.
    """
    default_policy.handler = handler


def status(err: BaseException | None, handler: ErrorHandler | None = None) -> int:
    """
    Pick a suitable exit code for ``err``.

    Parameters:
        err (BaseException | None): The error to classify; ``None`` is success.
        handler (ErrorHandler | None): Handler to consult instead of the one
            installed with ``set_error_handler``.

    Returns:
        int: The exit code.
    """
    if handler is not None:
        return default_policy.with_handler(handler).status(err)
    return default_policy.status(err)


def exit(err: BaseException | None) -> None:
    """Terminate the process with the exit code chosen for ``err``."""
    default_policy.exit(err)
