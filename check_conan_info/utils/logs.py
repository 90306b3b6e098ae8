"""Logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from check_conan_info.ui.console import err_console

LOGGER_NAME = "check_conan_info"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route package log records to stderr through Rich.

    Safe to call more than once; the handler is installed a single time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
