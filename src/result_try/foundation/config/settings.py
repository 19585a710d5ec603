"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated knobs for the inspection engine and the wrap
functions. Values come from environment variables (or a .env file) and are
loaded once per process.

Example:
    >>> from result_try.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.inspect.max_depth
    64
    >>> settings.wrap.capture_cancellation
    True

    # Or with environment variables:
    # RESULT_TRY_INSPECT_MAX_DEPTH=16
    # RESULT_TRY_WRAP_CAPTURE_CANCELLATION=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InspectSettings(BaseSettings):
    """Limits applied by ``inspect()``."""

    model_config = SettingsConfigDict(
        env_prefix="RESULT_TRY_INSPECT_",
        extra="ignore",
    )

    # A mapping level nests three JSON containers; 80 levels stay under orjson's 255 limit
    max_depth: Annotated[int, Field(ge=1, le=80)] = Field(
        default=64,
        description="Nested compound levels expanded before emitting [MaxDepth]",
    )
    max_nodes: Annotated[int, Field(ge=1, le=1_000_000)] = Field(
        default=10_000,
        description="Values visited by one inspect() call before emitting [Truncated]",
    )
    bytes_preview: Annotated[int, Field(ge=0, le=4096)] = Field(
        default=32,
        description="Leading bytes of a binary buffer rendered as hex",
    )


class WrapSettings(BaseSettings):
    """Behaviour of ``try_result`` / ``try_result_sync``."""

    model_config = SettingsConfigDict(
        env_prefix="RESULT_TRY_WRAP_",
        extra="ignore",
    )

    capture_cancellation: bool = Field(
        default=True,
        description="Convert asyncio.CancelledError into a failure Result instead of re-raising",
    )


class ResultTrySettings(BaseSettings):
    """Root settings for result-try.

    Loads configuration from environment variables with RESULT_TRY_ prefix.

    Example environment variables:
        RESULT_TRY_INSPECT_MAX_DEPTH=32
        RESULT_TRY_INSPECT_MAX_NODES=2000
        RESULT_TRY_INSPECT_BYTES_PREVIEW=0
        RESULT_TRY_WRAP_CAPTURE_CANCELLATION=false
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULT_TRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    inspect: InspectSettings = Field(default_factory=InspectSettings)
    wrap: WrapSettings = Field(default_factory=WrapSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultTrySettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().inspect.bytes_preview
        32
    """
    return ResultTrySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
