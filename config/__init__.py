"""Application configuration utilities."""

from .logging_config import configure_logging
from .settings import DEFAULT_API_BASE_URL, DEFAULT_POLL_INTERVAL_SECONDS, Settings, get_settings

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "Settings",
    "configure_logging",
    "get_settings",
]
