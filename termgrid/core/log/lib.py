"""Core logging implementation for termgrid.

Library modules only emit records; configuring handlers is left to the
host application (or the CLI via ``setup_logging``).
"""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

ROOT_LOGGER_NAME = "termgrid"


def setup_logging(level: int | str = logging.INFO, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level, as a number or a level name ("DEBUG").
        stream: Output stream.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Names are nested under the ``termgrid`` logger so a host can silence
    or raise the whole library with one call.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
