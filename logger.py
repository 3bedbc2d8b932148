"""Logging setup shared by every module.

All loggers live under the ``asset_tracker`` hierarchy; the parent is
configured once with a console handler and children inherit it.
"""

import logging
import threading

ROOT_LOGGER = "asset_tracker"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_lock = threading.Lock()
_configured = False


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach the console handler to the root application logger (idempotent)."""
    global _configured

    logger = logging.getLogger(ROOT_LOGGER)
    with _lock:
        if not _configured:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
            logger.propagate = False
            _configured = True
        logger.setLevel(level)
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Return a logger in the application hierarchy.

    Args:
        name (str): Dotted name, e.g. ``asset_tracker.assets``. Names outside
            the hierarchy are prefixed with it.

    Returns:
        logging.Logger: Child of the configured ``asset_tracker`` logger.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
