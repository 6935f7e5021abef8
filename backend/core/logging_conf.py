# core/logging_conf.py
import logging
import sys
from typing import Union

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class _AppConsoleHandler(logging.StreamHandler):
    """Marks the handler installed here so a re-run replaces only it."""


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the root logger with a console handler on stdout.
    Safe to call more than once: our handler is replaced, not stacked, and
    handlers installed by anyone else (e.g. a test runner) are left alone.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, _AppConsoleHandler):
            logger.removeHandler(handler)

    console_handler = _AppConsoleHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(console_handler)

    # httpx logs every request at INFO; keep that out of the app log
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    return logger
