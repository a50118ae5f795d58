"""
Logging setup - one place to configure log format and level.

Modules log through logging.getLogger(__name__), which puts every logger
under the "app" hierarchy; this wires a console handler onto "app" once at
startup.
"""

import logging
import sys


LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", debug: bool = False) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        level: Log level name; unknown names fall back to INFO
        debug: Force DEBUG regardless of level

    Returns:
        The configured "app" logger
    """
    resolved = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("app")
    logger.setLevel(resolved)

    # Create console handler if not exists
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(resolved)

    return logger
