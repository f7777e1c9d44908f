import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configure logging for the console script.

    Configures the root logger to output logs to stdout with a custom format.

    Parameters:
        level (int): Root logger level.
    """
    stream_handler = logging.StreamHandler(sys.stdout)
    logging.basicConfig(
        handlers=[stream_handler],
        format=(
            "{asctime:^} | {levelname: ^8} | {filename: ^14} {lineno: <4} | {message}"
        ),
        style="{",
        datefmt="%d.%m.%Y %H:%M:%S",
        level=level,
        force=True,
    )

