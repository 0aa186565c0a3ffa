"""Console logging for programs that drive seamcarver."""

import logging
import sys

from .config import Config

_HANDLER_NAME = 'seamcarver-console'


def setup_logging(level: str = Config.LOG_LEVEL) -> logging.Logger:
    """Send seamcarver's log records to stdout.

    The seamcarver modules log seam costs and removals at DEBUG and picture
    loads at INFO, but never attach handlers themselves. Calling this more
    than once only changes the level; the console handler is installed once.

    Args:
        level: Level name such as 'DEBUG' or 'INFO'; unknown names mean INFO.

    Returns:
        The 'seamcarver' logger.
    """
    logger = logging.getLogger('seamcarver')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        datefmt='%H:%M:%S',
    ))
    logger.addHandler(handler)
    return logger
