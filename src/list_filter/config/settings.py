"""
Configuration settings for list-filter.

This module handles loading and validating configuration from TOML files
and environment variables.

Configuration hierarchy (later overrides earlier):
1. Default values (built-in)
2. config/default.toml
3. config/local.toml (gitignored)
4. File named by LISTFILTER_CONFIG_PATH
5. Environment variables (LISTFILTER_* prefix)

Example:
    >>> from list_filter.config import get_settings
    >>>
    >>> settings = get_settings()
    >>> print(f"Request group: {settings.filter.param_group}")
    >>> print(f"Session key: {settings.filter.session_key}")
"""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "LISTFILTER_"


class FilterSettings(BaseModel):
    """Filter accumulation settings."""

    model_config = ConfigDict(extra="ignore")

    param_group: str = Field(
        default="filter_by",
        description="Request parameter group holding filter values",
    )
    session_key: str = Field(
        default="filter_by",
        description="Top-level session key for remembered values",
    )
    placeholder: str = Field(
        default="?",
        min_length=1,
        description="Bound parameter placeholder used in SQL fragments",
    )
    true_condition: str = Field(
        default="1",
        description="SQL returned when there is nothing to filter on",
    )


class LoggingSettings(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="console", description="Output format")
    include_timestamp: bool = Field(default=True)
    include_location: bool = Field(default=False)


class Settings(BaseModel):
    """Main settings container."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="list-filter")

    filter: FilterSettings = Field(default_factory=FilterSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _find_config_files() -> list[Path]:
    """Find configuration files in standard locations.

    Returns:
        List of config file paths (in order of priority)
    """
    files = []

    cwd = Path.cwd()
    for name in ["config/default.toml", "config/local.toml"]:
        path = cwd / name
        if path.exists():
            files.append(path)

    env_config = os.environ.get(f"{ENV_PREFIX}CONFIG_PATH")
    if env_config:
        path = Path(env_config)
        if path.exists():
            files.append(path)

    return files


def _load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML content
    """
    with open(path, "rb") as f:
        return tomllib.load(f)


def _merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def _coerce_like(original: Any, value: str) -> Any:
    """Convert an environment string to the type of the value it replaces."""
    if isinstance(original, bool):
        return value.lower() in ("true", "1", "yes")
    if isinstance(original, int):
        return int(value)
    if isinstance(original, float):
        return float(value)
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides.

    Environment variables with the LISTFILTER_ prefix override config values
    that are already present. Example: LISTFILTER_LOGGING_LEVEL -> logging.level,
    LISTFILTER_FILTER_PARAM_GROUP -> filter.param_group

    Args:
        config: Configuration dictionary

    Returns:
        Modified configuration
    """
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key == f"{ENV_PREFIX}CONFIG_PATH":
            continue

        config_key = key[len(ENV_PREFIX) :].lower()
        parts = config_key.split("_")

        # Walk into nested tables while a prefix of the remaining parts names one
        current = config
        for i, part in enumerate(parts[:-1]):
            if part in current and isinstance(current[part], dict):
                current = current[part]
            else:
                remaining = "_".join(parts[i:])
                if remaining in current:
                    current[remaining] = _coerce_like(current[remaining], value)
                break
        else:
            final_key = parts[-1]
            if final_key in current:
                current[final_key] = _coerce_like(current[final_key], value)

    return config


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from configuration files.

    Args:
        config_path: Optional explicit config file path

    Returns:
        Settings instance
    """
    # Seed with defaults so environment overrides apply without a config file
    config: dict[str, Any] = Settings().model_dump()

    if config_path:
        files = [Path(config_path)]
    else:
        files = _find_config_files()

    for path in files:
        file_config = _load_toml(path)
        config = _merge_dicts(config, file_config)

    config = _apply_env_overrides(config)

    return Settings(**config)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance (cached after first call)

    Example:
        >>> settings = get_settings()
        >>> print(settings.filter.session_key)
    """
    return load_settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache).

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
