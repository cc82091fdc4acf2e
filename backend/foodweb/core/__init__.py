"""Settings and logging bootstrap."""

from .config import PROJECT_ROOT, Settings, get_settings, setup_logging

__all__ = [
    "PROJECT_ROOT",
    "Settings",
    "get_settings",
    "setup_logging",
]
