"""
Utility functions for the genome matcher.
Contains logging setup and signal handling for the console front ends.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import LOG_DIR, LOG_FORMAT, LOG_LEVEL

# Handlers installed by setup_logging, replaced on every call
_installed_handlers: List[logging.Handler] = []


def setup_logging(log_dir: Optional[str] = LOG_DIR, log_level: str = LOG_LEVEL) -> None:
    """
    Set up the logging system.

    Args:
        log_dir: Directory for log files; None logs to the console only
        log_level: Console logging level
    """
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.DEBUG if log_level == "DEBUG" else logging.INFO)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # File handler for all logs
        file_handler = logging.FileHandler(log_path / "genome_matcher.log")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

        # File handler for errors
        error_handler = logging.FileHandler(log_path / "error.log")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(error_handler)
        _installed_handlers.append(error_handler)

    # Console handler on stderr so result output stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level, logging.INFO))
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    logging.debug("Logging system initialized")


def _handle_sigint(sig, frame):
    """Handle SIGINT signal for graceful exit."""
    try:
        print("\nOperation cancelled by user. Exiting gracefully.")
    finally:
        sys.exit(0)


__all__ = ['setup_logging']
