"""
Logging setup for podfeed

Library modules only call get_logger(__name__); handlers are installed by
the CLI through setup_logger(), so applications embedding podfeed keep
control over their own logging configuration.
"""

import logging
import logging.handlers
import os
import sys

from .config import CONFIG, LOG_LEVELS


def get_log_level() -> str:
    """Configured level name, upper-cased; unknown names fall back to INFO"""
    level = str(CONFIG['log']['level']).strip().upper()
    return level if level in LOG_LEVELS else 'INFO'


def setup_logger(name: str = 'podfeed') -> logging.Logger:
    """
    Attach console and rotating file handlers to the package logger.

    Calling it again is a no-op once handlers are installed.
    """
    level = get_log_level()
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(CONFIG['log']['format'])

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = CONFIG['log']['file']
    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=CONFIG['log']['max_bytes'],
                backupCount=CONFIG['log']['backup_count'],
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"File logging disabled, cannot open {log_file}: {e}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a podfeed module, usually get_logger(__name__)"""
    return logging.getLogger(name)


def setup_exception_handler():
    """Log uncaught exceptions through the podfeed logger before exiting."""
    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logging.getLogger('podfeed').critical(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception
