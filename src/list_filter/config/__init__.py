"""
Configuration management for list-filter.

This module handles loading and validating configuration from TOML files:

Configuration hierarchy:
1. Default values (built-in)
2. config/default.toml (project defaults)
3. config/local.toml (user overrides, gitignored)
4. File named by LISTFILTER_CONFIG_PATH
5. Environment variables (LISTFILTER_* prefix)

Example:
    >>> from list_filter.config import get_settings
    >>>
    >>> settings = get_settings()
    >>> print(f"Session key: {settings.filter.session_key}")

Configuration files use TOML format. See config/default.toml for all options.
"""

from list_filter.config.settings import (
    FilterSettings,
    LoggingSettings,
    Settings,
    get_settings,
    load_settings,
    reload_settings,
)

__all__ = [
    "FilterSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "load_settings",
    "reload_settings",
]
