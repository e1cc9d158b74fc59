"""
Console logging for gitbook2pdf.

All modules log through children of the "gitbook2pdf" logger; setup_logging()
attaches a single stdout handler to that parent.
"""

import logging
import sys

APP_NAME = "gitbook2pdf"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the application logger with a console handler.

    Args:
        level: Logging level for console output (default: INFO)

    Returns:
        Configured application logger
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers when called more than once
    for handler in logger.handlers:
        if getattr(handler, "_gitbook2pdf_console", False):
            handler.setLevel(level)
            return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    console_handler._gitbook2pdf_console = True

    logger.addHandler(console_handler)
    return logger
