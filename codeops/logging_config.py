"""Logging setup.

Log output goes to stderr; stdout is left to whatever host protocol
embeds the server.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stderr handler on the ``codeops`` logger."""
    logger = logging.getLogger("codeops")
    logger.setLevel(level.upper())

    # Idempotent: reconfiguring replaces the previous handler
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
