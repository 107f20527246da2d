"""Core: config, limiter, exception handlers and application lifespan."""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
