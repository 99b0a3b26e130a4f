"""Logging configuration for the occtl package."""
import logging
import sys

from .config import Config


def setup_logging(debug_mode: bool = False) -> None:
    """Configure root logging based on debug mode.

    Log records go to stderr so that command output on stdout stays clean.
    """
    log_level = logging.DEBUG if debug_mode else Config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=Config.LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the occtl namespace.

    Args:
        name: The module name, usually __name__

    Returns:
        Logger instance
    """
    if not name.startswith("occtl"):
        name = f"occtl.{name}"
    return logging.getLogger(name)
