"""Logging setup shared by every modelgen module.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``configure_logging`` once to attach a rich handler writing to stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "modelgen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the ``modelgen`` hierarchy.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        Standard library logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), rich_tracebacks=True, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
