"""Package-wide logging setup for flowkit.

The package logger is configured once on import. Modules obtain their own
logger through :func:`get_logger`, which places them under the ``flowkit``
hierarchy so they share its handler and level.
"""

import logging
import sys

from flowkit.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

PACKAGE_LOGGER = "flowkit"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name, ``flowkit`` for the package logger.
        level: Log level name (DEBUG, INFO, ...). Defaults to ``settings.LOG_LEVEL``.
        format_string: Custom record format.

    Returns:
        The configured logger. Its stdout handler is named after the logger,
        so calling again with the same name returns the existing logger
        without adding a second handler.
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or DEFAULT_FORMAT

    configured = logging.getLogger(name)

    if not any(h.get_name() == name for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(name)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured


def get_logger(name: str) -> logging.Logger:
    """Return a module logger nested under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


logger = setup_logger()
