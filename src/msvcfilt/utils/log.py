"""
Logging setup. stdout carries the filtered text, so diagnostics go to
stderr (through rich) or to a log file when one is configured.
"""
import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "msvcfilt"
FILE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def parse_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return logging.WARNING
    value = logging.getLevelName(str(level).upper())
    # getLevelName hands back "Level FOO" for names it does not know
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: Union[str, int, None] = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )

    logger.addHandler(handler)
    logger.setLevel(parse_level(level))
    logger.propagate = False
    return logger
