"""Logging setup for the web app and maintenance scripts.

Plain stdlib logging to stdout. Never log passwords, activation codes or
session tokens; log the email address and the outcome only. Each record
carries the current request id ("-" outside a request).
"""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import get_request_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

# Third-party loggers that are chatty at INFO (request lines, SQL echo).
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


class RequestIdFilter(logging.Filter):
    """Attach request_id to every record passing through the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_logging(level: int | None = None) -> None:
    """Configure application-wide logging.

    Args:
        level: Explicit level (scripts pass logging.WARNING); when omitted,
            DEBUG if settings.debug else INFO.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
