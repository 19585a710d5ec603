"""Type guards and catalog lookups. All accept arbitrary input and never raise.

Guards check ``type(value)`` rather than ``isinstance``, which would consult a
possibly raising ``__class__`` attribute.
"""

from __future__ import annotations

from typing import TypeGuard

from .catalog import HTTP_ERRORS, HttpErrorInfo
from .errors import ResultError


def is_result_error(value: object) -> TypeGuard[ResultError]:
    """True if ``value`` is a structured error."""
    return issubclass(type(value), ResultError)


def is_result_error_code(value: object, code: str) -> TypeGuard[ResultError]:
    """True if ``value`` is a structured error with the given code."""
    return is_result_error(value) and value.code == code


def is_result_error_status(value: object, status: int) -> TypeGuard[ResultError]:
    """True if ``value`` is a structured error with the given status."""
    return is_result_error(value) and value.status == status


def find_http_error_from_code(code: str) -> HttpErrorInfo | None:
    """Catalog entry for ``code``, None if unknown."""
    return HTTP_ERRORS.get(code) if issubclass(type(code), str) else None


def get_http_error_message_from_code(code: str, fallback: str) -> str:
    """Catalog default message for ``code``, ``fallback`` if unknown."""
    info = find_http_error_from_code(code)
    return info.message if info is not None else fallback
