"""
Logging Configuration
Sets up the 'ghanfoot' logger: console output plus an optional log file.
"""
import logging
import sys
from typing import Optional

from ghanfoot import __version__
from ghanfoot.config import LOG_FORMAT, LOG_DATE_FORMAT, DEFAULT_LOG_LEVEL, default_log_file


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'ghanfoot' namespace and returns it.

    Args:
        level: Logging level, DEFAULT_LOG_LEVEL when None.
        log_file: Path to mirror the log to. Falls back to $GHANFOOT_LOG_FILE.
    """
    level = DEFAULT_LOG_LEVEL if level is None else level
    log_file = log_file or default_log_file()

    logger = logging.getLogger("ghanfoot")
    logger.setLevel(level)

    # Re-running setup must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    target = f"stdout + {log_file}" if log_file else "stdout"
    logger.info(f"Logging initialized: ghanfoot {__version__}, level {logging.getLevelName(level)}, {target}.")
    return logger
