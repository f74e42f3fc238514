"""
Farkle Configuration.

Environment variables, settings, and logging configuration.
"""

from farkle.config.settings import LOG_LEVELS, Settings, configure_logging, get_settings

__all__ = ["LOG_LEVELS", "Settings", "configure_logging", "get_settings"]
