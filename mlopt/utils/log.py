"""Logging configuration for the mlopt package.

Library modules only ever call `logging.getLogger(__name__)`; handlers are attached
by entrypoints through `setup_logger()`.
"""

import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "mlopt"
CONSOLE_HANDLER_NAME = "mlopt.console"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logger(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Args:
        verbose: Report per-pass progress (INFO) instead of only warnings
        stream: Where to write log lines. Defaults to stderr.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(CONSOLE_HANDLER_NAME)
    logger.addHandler(handler)
    return logger
