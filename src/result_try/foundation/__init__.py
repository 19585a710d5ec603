"""Foundation - Core building blocks for result-try.

Contains: inspection engine, Result container, error taxonomy, config.
"""

from __future__ import annotations

__all__ = [
    # Inspection
    "inspect",
    # Errors
    "Result", "Ok", "Err", "ResultError", "ErrorPayload", "HTTP_ERRORS",
    "is_result_error", "is_result_error_code", "is_result_error_status",
    "find_http_error_from_code", "get_http_error_message_from_code",
    # Config
    "ResultTrySettings", "get_settings", "clear_settings_cache",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name == "inspect":
        from .inspection import inspect
        return inspect
    if name in ("ResultTrySettings", "get_settings", "clear_settings_cache"):
        from . import config
        return getattr(config, name)
    if name in __all__:
        from . import errors
        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
