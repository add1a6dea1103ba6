"""
Centralized logging configuration for elastic_tabs.

The library itself only ever logs through the ``elastic_tabs`` logger
namespace; handlers are installed by ``setup_logging``, which applications
call once. Console output goes to stderr so that it never interleaves with
aligned text written to stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAME = "elastic_tabs"

# Logger configured by setup_logging, if any
_logger: Optional[logging.Logger] = None

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """
    Configure logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        verbose: Enable verbose (DEBUG) output
        quiet: Suppress console output (file only)
        propagate: Allow log propagation (useful for testing)

    Returns:
        Configured logger instance
    """
    global _logger

    if verbose:
        effective_level = "DEBUG"
    elif quiet:
        effective_level = "WARNING"
    else:
        effective_level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, effective_level))
    logger.handlers.clear()

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, effective_level))
        console_handler.setFormatter(ColoredFormatter(
            "%(levelname_colored)s %(name)s: %(message)s",
            use_colors=sys.stderr.isatty(),
        ))
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = propagate

    _logger = logger
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the package logger, or one of its children.

    Unlike setup_logging this never installs handlers, so importing and
    using the library stays silent until an application opts in.

    Args:
        name: Dotted child name, e.g. ``"writer"`` or ``"elastic_tabs.writer"``

    Returns:
        Logger instance
    """
    base = _logger if _logger is not None else logging.getLogger(LOGGER_NAME)
    if not name or name == LOGGER_NAME:
        return base
    if name.startswith(LOGGER_NAME + "."):
        name = name[len(LOGGER_NAME) + 1:]
    return base.getChild(name)


class ColoredFormatter(logging.Formatter):
    """
    Formatter with colored level names for terminal output.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[1;31m', # Bold Red
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            color = self.COLORS.get(record.levelname, '')
            record.levelname_colored = f"{color}{record.levelname}{self.RESET}"
        else:
            record.levelname_colored = record.levelname
        return super().format(record)
