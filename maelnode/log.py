from __future__ import annotations
import logging, os, sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ENV_LEVEL = "MAELNODE_LOG_LEVEL"

# stdout is the message transport; diagnostics only ever go to stderr
_handler: Optional[logging.Handler] = None


def configure_logging(level: Union[str, int, None] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stderr handler to the 'maelnode' logger. Safe to call twice."""
    global _handler
    logger = logging.getLogger("maelnode")

    if level is None:
        level = os.environ.get(ENV_LEVEL, "INFO")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.propagate = False
    return logger
