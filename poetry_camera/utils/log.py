# poetry_camera/utils/log.py
"""
Logging setup for the application shell.

Loggers are created at import time without handlers.
File handlers are added when reconfigure_loggers() is called at startup,
one append-mode log file per logger in the configured log directory.
"""

import logging
from pathlib import Path
from typing import Optional

# Module-level registry to track configured loggers
_configured_loggers = set()

LOG_FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def setup_logger(name: str, level: int = logging.DEBUG) -> logging.Logger:
    """
    Create or retrieve a logger without console handlers.

    File handlers are added later by reconfigure_loggers().

    Args:
        name: Logger name (e.g., "core.pending_deletion")
        level: Logging level (default: DEBUG)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # Prevent duplicate logs to root logger

    return logger


def reconfigure_loggers(log_dir: Optional[Path] = None) -> None:
    """
    Point all active loggers at log files in log_dir.

    Process:
    1. Remove all existing file handlers from all loggers
    2. Add new file handlers pointing to the log directory
    3. Preserve any stream handlers that were added separately

    Existing log files are preserved (append mode) rather than overwritten.

    Args:
        log_dir: Target directory (default: CFG.LOG_DIR)
    """
    if log_dir is None:
        from ..config import DEFAULT_CONFIG as CFG
        log_dir = CFG.LOG_DIR

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    clear_logger_configuration()

    loggers_to_configure = [
        lg for lg in list(logging.Logger.manager.loggerDict.values())
        if isinstance(lg, logging.Logger)
    ]

    formatter = logging.Formatter(LOG_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    for logger in loggers_to_configure:
        # Only loggers created by setup_logger() get a file
        if logger.propagate:
            continue

        log_file = log_dir / (logger.name.replace('.', '_') + ".log.txt")
        try:
            fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            print(f"Warning: Could not create log file handler for {logger.name}: {e}")
            continue

        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        _configured_loggers.add(logger.name)


def get_configured_loggers() -> set:
    """Return set of logger names that have been configured with file handlers."""
    return _configured_loggers.copy()


def clear_logger_configuration():
    """
    Remove all file handlers from all loggers.
    Used on shutdown so log files are flushed and closed.
    """
    logger_names = list(logging.Logger.manager.loggerDict.keys())
    loggers_to_clear = [logging.getLogger(name) for name in logger_names]
    loggers_to_clear.append(logging.getLogger())

    for logger in loggers_to_clear:
        handlers_to_remove = [
            h for h in logger.handlers
            if isinstance(h, logging.FileHandler)
        ]

        for handler in handlers_to_remove:
            handler.close()
            logger.removeHandler(handler)

    _configured_loggers.clear()
