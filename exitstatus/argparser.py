"""An argparse parser that raises instead of ending the process.

``argparse`` has no help sentinel: ``-h`` prints help and calls ``sys.exit``.
This parser raises ``HelpRequested`` for ``-h`` and ``ParserExit`` for every
other exit, so the exit code is decided by ``exitstatus.status``::

    parser = ArgumentParser(prog="tool")
    try:
        args = parser.parse_args()
    except Exception as exc:
        exitstatus.exit(exc)
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, NoReturn, Sequence

from exitstatus.errors import ExitStatusError, HelpRequested


class ParserExit(ExitStatusError):
    """Raised by ``ArgumentParser.exit`` with the status argparse asked for."""

    def __init__(self, exit_code: int, message: str | None = None) -> None:
        super().__init__(message or f"parser exited with status {exit_code}")
        self.exit_code = exit_code
        self.message = message


class _HelpAction(argparse.Action):
    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str = argparse.SUPPRESS,
        default: Any = argparse.SUPPRESS,
        help: str | None = None,
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None) -> NoReturn:
        parser.print_help()
        raise HelpRequested(f"help requested via {option_string}")


class ArgumentParser(argparse.ArgumentParser):
    """``argparse.ArgumentParser`` whose help and error paths raise."""

    def __init__(self, *args: Any, add_help: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, add_help=False, **kwargs)
        if add_help:
            prefix = "-" if "-" in self.prefix_chars else self.prefix_chars[0]
            self.add_argument(
                prefix + "h",
                prefix * 2 + "help",
                action=_HelpAction,
                help="show this help message and exit",
            )

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:  # type: ignore[override]
        if message:
            self._print_message(message, sys.stderr)
        raise ParserExit(status, message)
