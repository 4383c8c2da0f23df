"""Core: configuration, exception handlers, lifespan."""

from docshare.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
