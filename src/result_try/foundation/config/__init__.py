"""Configuration management using pydantic-settings."""

from .settings import (
    InspectSettings,
    ResultTrySettings,
    WrapSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "InspectSettings",
    "ResultTrySettings",
    "WrapSettings",
    "clear_settings_cache",
    "get_settings",
]
