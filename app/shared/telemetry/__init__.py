"""Shared telemetry: logging setup with request ids."""

from app.shared.telemetry.logging import RequestIdFilter, get_logger, setup_logging

__all__ = [
    "RequestIdFilter",
    "get_logger",
    "setup_logging",
]
