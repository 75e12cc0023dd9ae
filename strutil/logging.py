"""Logging configuration for strutil."""

import logging
import sys

HANDLER_NAME = "strutil"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Configure logging for the strutil package.

    Calling it again only changes the level; the stderr handler is
    installed once, whatever other handlers the logger has.

    Args:
        level: The logging level to use, as a number or a name such as
            "DEBUG". Defaults to WARNING.
    """
    logger = logging.getLogger("strutil")
    logger.setLevel(level)

    if any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False
