"""Core services for display settings and logging."""

from .config import DEFAULT_THEME, DisplayConfig, resolve_display_config
from .logging_setup import JsonFormatter, configure_logging, get_logger, install_crash_hooks

__all__ = [
    "DEFAULT_THEME",
    "DisplayConfig",
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "resolve_display_config",
]
