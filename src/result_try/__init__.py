"""result-try - Explicit, inspectable results instead of implicit exceptions.

Wrap unreliable operations (network calls, parsing, database access) so that
failures come back as data: a ``Result`` whose error is a structured
``ResultError`` with a stable code, an HTTP-style status, a message and the
original cause.

Quick Start:
    >>> from result_try import try_result, try_result_sync, NotFoundError
    >>>
    >>> result = try_result_sync(lambda: int("42"))
    >>> result.ok, result.value
    (True, 42)
    >>>
    >>> value, error = try_result_sync(lambda: int("nope"))
    >>> error.code, error.status
    ('INTERNAL_SERVER_ERROR', 500)

Async operations never raise out of the wrapper:
    >>> result = await try_result(fetch_user(42), map_error=NotFoundError.from_)
    >>> if not result.ok:
    ...     print(result.error.status, result.error.code)
    404 NOT_FOUND

Structured errors:
    >>> from result_try import ResultError, BadRequestError
    >>> ResultError.from_(None).message
    'None'
    >>> BadRequestError.result("missing field 'name'")
    Err(BadRequestError(code='BAD_REQUEST', status=400, message="missing field 'name'"))

Safe inspection of anything you caught:
    >>> from result_try import inspect
    >>> a = {}; a["self"] = a
    >>> inspect(a)
    '[dict]: [["self","[Circular]"]]'

Decorators:
    >>> from result_try import wrap_result
    >>> @wrap_result
    ... def parse(text: str) -> int:
    ...     return int(text)
    >>> parse("7")
    Ok(7)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Config
from .foundation.config import ResultTrySettings, clear_settings_cache, get_settings

# Inspection
from .foundation.inspection import CIRCULAR, MAX_DEPTH, TRUNCATED, inspect

# Result container
from .foundation.errors import Err, Ok, Result, collect_results, sequence

# Structured errors
from .foundation.errors import (
    BadGatewayError,
    BadRequestError,
    ClientClosedRequestError,
    ConflictError,
    ErrorPayload,
    ForbiddenError,
    GatewayTimeoutError,
    GoneError,
    HttpResultError,
    InternalServerError,
    MethodNotAllowedError,
    NotFoundError,
    PayloadTooLargeError,
    PaymentRequiredError,
    PreconditionFailedError,
    RequestTimeoutError,
    ResultError,
    ServiceUnavailableError,
    TooManyRequestsError,
    UnauthorizedError,
    UnimplementedError,
    UnprocessableEntityError,
    UnsupportedMediaTypeError,
    error_class_for_code,
)

# Catalog & guards
from .foundation.errors import (
    HTTP_ERRORS,
    HttpErrorCode,
    HttpErrorInfo,
    find_http_error_from_code,
    get_http_error_message_from_code,
    is_result_error,
    is_result_error_code,
    is_result_error_status,
)

# Wrap functions & decorators
from .runtime import MapError, try_result, try_result_sync, wrap_methods, wrap_result

__all__ = [
    "__version__",
    # Config
    "ResultTrySettings", "get_settings", "clear_settings_cache",
    # Inspection
    "inspect", "CIRCULAR", "MAX_DEPTH", "TRUNCATED",
    # Result container
    "Result", "Ok", "Err", "sequence", "collect_results",
    # Structured errors
    "ResultError", "HttpResultError", "ErrorPayload", "error_class_for_code",
    "BadRequestError", "UnauthorizedError", "PaymentRequiredError", "ForbiddenError",
    "NotFoundError", "MethodNotAllowedError", "RequestTimeoutError", "ConflictError",
    "GoneError", "PreconditionFailedError", "PayloadTooLargeError", "UnsupportedMediaTypeError",
    "UnprocessableEntityError", "TooManyRequestsError", "ClientClosedRequestError",
    "InternalServerError", "UnimplementedError", "BadGatewayError", "ServiceUnavailableError",
    "GatewayTimeoutError",
    # Catalog & guards
    "HTTP_ERRORS", "HttpErrorCode", "HttpErrorInfo",
    "is_result_error", "is_result_error_code", "is_result_error_status",
    "find_http_error_from_code", "get_http_error_message_from_code",
    # Wrap functions & decorators
    "try_result", "try_result_sync", "MapError", "wrap_result", "wrap_methods",
]
