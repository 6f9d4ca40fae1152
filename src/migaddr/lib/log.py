"""
Logging helpers shared by the migaddr library modules.
"""

import logging
import os


def get_logger(name: str) -> logging.Logger:
    """Return a ``migaddr.<name>`` logger with the shared handler attached."""
    logger = logging.getLogger(f"migaddr.{name}")
    _setup_logging(logger)
    return logger


def _setup_logging(logger: logging.Logger):
    """Setup logging configuration for a migaddr logger."""
    if logger.handlers:
        return

    handler = logging.StreamHandler()

    level = os.getenv("MIGADDR_LOG_LEVEL", "WARNING").upper()
    logger.setLevel(getattr(logging, level, logging.WARNING))

    # Structured formatting
    formatter = logging.Formatter(
        "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
