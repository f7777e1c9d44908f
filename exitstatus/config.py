"""Environment-backed settings for the exitstatus console script."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

LOG_LEVEL_ENV = "EXITSTATUS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_level: int = logging.WARNING


def parse_log_level(value: str) -> int:
    """Map a level name such as ``"debug"`` or a number to a logging level."""
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise ValueError(f"Unsupported log level {value!r} in {LOG_LEVEL_ENV}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build settings from the environment.

    Parameters:
        environ (Mapping[str, str] | None): Variables to read. Defaults to
            ``os.environ`` after loading a ``.env`` file from the working
            directory.

    Returns:
        Settings: The resolved settings.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    return Settings(log_level=parse_log_level(environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)))
