"""Logging setup for the stagenote command line.

Records go to stderr so the summary, diff and prompt written to stdout can be
piped on without log lines mixed in. At debug level each record also carries
a timestamp and the line it came from.
"""

import logging
import sys

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d: %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    """Map a -v count to a logging level (none: WARNING, -v: INFO, -vv: DEBUG)."""
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def configure_logging(verbosity: int) -> None:
    """Configure the root logger for the given -v count."""
    level = verbosity_to_level(verbosity)
    logging.basicConfig(
        level=level,
        format=DEBUG_LOG_FORMAT if level == logging.DEBUG else LOG_FORMAT,
        stream=sys.stderr,
    )
