"""Logging setup for torrentapi."""

import logging
import re
import time
from functools import wraps
from pathlib import Path

from platformdirs import user_log_dir

TOKEN_PARAM = re.compile(r"([?&])token=[^&]*")

# Requests slower than this are logged at WARNING.
SLOW_REQUEST_MS = 3000

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_logger() -> logging.Logger:
    """Get the torrentapi logger instance."""
    return logging.getLogger("torrentapi")


def get_log_path() -> Path:
    """Return the log file location for the current platform."""
    return Path(user_log_dir("torrentapi", appauthor=False)) / "torrentapi.log"


def init_logger(log_level: str) -> None:
    """Initialize file logging.

    Args:
        log_level: Log level (debug, info, warning, error, critical).
            Unknown names fall back to warning.
    """
    level = LEVELS.get(log_level.lower(), logging.WARNING)

    log_file = get_log_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        encoding="utf-8",
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        level=level,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    get_logger().info(
        f"Logging initialized: level={log_level.upper()}, file={log_file}"
    )


def log_request_time(fetch):
    """Decorator for Transport.fetch logging latency per request.

    Every request is logged at DEBUG with the token redacted. Requests
    slower than SLOW_REQUEST_MS are repeated at WARNING.
    """

    @wraps(fetch)
    def log_request_time_wrapper(self, url: str, *args, **kwargs):
        start_time = time.perf_counter()
        try:
            return fetch(self, url, *args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            message = f"GET {redact_token(url)} ({elapsed_ms:.0f} ms)"
            logger = get_logger()
            logger.debug(message)
            if elapsed_ms > SLOW_REQUEST_MS:
                logger.warning(f"Slow request: {message}")

    return log_request_time_wrapper


def redact_token(url: str) -> str:
    """Hide the token value in a request URL before logging it."""
    return TOKEN_PARAM.sub(r"\1token=***", url)
