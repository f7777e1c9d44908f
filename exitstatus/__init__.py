"""Pick meaningful process exit codes for (chained) exceptions.

    exitstatus.exit(err)            # 0 for None, otherwise a code chosen for err
    code = exitstatus.status(err)

Pin a code where the error is created::

    raise exitstatus.error(codes.IO_ERR, exc)

or on every error escaping a block::

    @exitstatus.exit_code_on_error(codes.CONFIG)
    def load_config(path): ...
"""

from exitstatus import codes
from exitstatus.errors import (
    ERR_HELP,
    ErrorSlot,
    ExitCodeError,
    ExitCoder,
    ExitStatusError,
    FormattedError,
    HelpRequested,
)
from exitstatus.resolver import (
    ErrorHandler,
    ExitPolicy,
    default_policy,
    exit,
    set_error_handler,
    status,
)
from exitstatus.wrap import error, errorf, errorp, exit_code_on_error

__all__ = [
    "ERR_HELP",
    "ErrorHandler",
    "ErrorSlot",
    "ExitCodeError",
    "ExitCoder",
    "ExitPolicy",
    "ExitStatusError",
    "FormattedError",
    "HelpRequested",
    "codes",
    "default_policy",
    "error",
    "errorf",
    "errorp",
    "exit",
    "exit_code_on_error",
    "set_error_handler",
    "status",
]
