import logging
import sys
from typing import IO, Optional

import structlog

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_log_file: Optional[IO[str]] = None


def setup_logger(log_path: Optional[str], level: str) -> IO[str]:
    """
    Configures JSON event logging for the playground. Events go to the file at log_path,
    or to stderr so they stay out of the exercise output on stdout.

    Calling it again replaces the previous configuration and closes a previously opened log file.
    """
    global _log_file

    log_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    close_logger()
    if log_path:
        _log_file = open(log_path, "a", encoding="utf-8")
    stream = _log_file or sys.stderr

    logging.basicConfig(format="%(message)s", stream=stream, level=log_level, force=True)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
    )
    return stream


def close_logger():
    """Close the log file opened by setup_logger, if any."""
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None
