"""Logging setup for the papr command line."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING") -> None:
    """
    Install a stderr handler on the root logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...); unknown names fall back to WARNING

    Notes:
        - Calling it again is a no-op
    """
    if getattr(setup_logging, "_configured", False):
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(handler)

    setup_logging._configured = True  # type: ignore[attr-defined]
