from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# PUBLIC_INTERFACE
def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure standard logging for the service.

    Unknown level names fall back to INFO. Calling this more than once only
    adjusts the level of the package logger.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format=LOG_FORMAT, stream=sys.stdout, level=level)
    logging.getLogger("todo_api").setLevel(level)
