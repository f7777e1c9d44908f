"""Named process exit codes.

Two generic codes plus the codes defined in ``/usr/include/sysexits.h`` on
BSD-derived systems.
"""

from __future__ import annotations

# Generic codes.
OK = 0  # success
ERR = 1  # generic error
HELP_ERR = 2  # help was requested but no such flag is defined

# Codes as defined in /usr/include/sysexits.h on *nix systems.
USAGE = 64  # command line usage error
DATA_ERR = 65  # data format error
NO_INPUT = 66  # cannot open input
NO_USER = 67  # addressee unknown
NO_HOST = 68  # host name unknown
UNAVAILABLE = 69  # service unavailable
SOFTWARE = 70  # internal software error
OS_ERR = 71  # system error (e.g., can't fork)
OS_FILE = 72  # critical OS file missing
CANT_CREAT = 73  # can't create (user) output file
IO_ERR = 74  # input/output error
TEMP_FAIL = 75  # temp failure; user is invited to retry
PROTOCOL = 76  # remote error in protocol
NO_PERM = 77  # permission denied
CONFIG = 78  # configuration error

CODES: dict[int, tuple[str, str]] = {
    OK: ("OK", "success"),
    ERR: ("ERR", "generic error"),
    HELP_ERR: ("HELP_ERR", "help requested"),
    USAGE: ("USAGE", "command line usage error"),
    DATA_ERR: ("DATA_ERR", "data format error"),
    NO_INPUT: ("NO_INPUT", "cannot open input"),
    NO_USER: ("NO_USER", "addressee unknown"),
    NO_HOST: ("NO_HOST", "host name unknown"),
    UNAVAILABLE: ("UNAVAILABLE", "service unavailable"),
    SOFTWARE: ("SOFTWARE", "internal software error"),
    OS_ERR: ("OS_ERR", "system error"),
    OS_FILE: ("OS_FILE", "critical OS file missing"),
    CANT_CREAT: ("CANT_CREAT", "can't create (user) output file"),
    IO_ERR: ("IO_ERR", "input/output error"),
    TEMP_FAIL: ("TEMP_FAIL", "temporary failure, user is invited to retry"),
    PROTOCOL: ("PROTOCOL", "remote error in protocol"),
    NO_PERM: ("NO_PERM", "permission denied"),
    CONFIG: ("CONFIG", "configuration error"),
}


def describe(code: int) -> tuple[str, str] | None:
    """Return the ``(name, description)`` pair for a named code, if any."""
    return CODES.get(code)
