"""
Logging infrastructure.

Provides logging utilities for every layer except the domain.
Settings are consulted when the first record is emitted, never at import.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class SettingsLevelFilter(logging.Filter):
    """Drop records below the configured ``LOG_LEVEL``."""

    def filter(self, record: logging.LogRecord) -> bool:
        from order_core.settings import get_settings

        return record.levelno >= logging.getLevelName(get_settings().app.log_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance with a single stream handler, gated by the
        configured level
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.addFilter(SettingsLevelFilter())
        logger.setLevel(logging.DEBUG)
    return logger
