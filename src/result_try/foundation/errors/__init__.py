"""Unified error handling for result-try.

- Result/Ok/Err: explicit success/failure container with positional access
- ResultError + catalog subtypes: structured errors with code/status/message/cause
- HTTP_ERRORS/HttpErrorCode/HttpErrorInfo: static read-only error catalog
- ErrorPayload: transportable snapshot of a structured error
- Guards: is_result_error*, find_http_error_from_code, get_http_error_message_from_code
"""

from .catalog import DEFAULT_ERROR, HTTP_ERRORS, HttpErrorCode, HttpErrorInfo
from .errors import (
    BadGatewayError,
    BadRequestError,
    ClientClosedRequestError,
    ConflictError,
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
from .guards import (
    find_http_error_from_code,
    get_http_error_message_from_code,
    is_result_error,
    is_result_error_code,
    is_result_error_status,
)
from .result import Err, Ok, Result, collect_results, sequence
from .types import ErrorPayload, JsonDict

__all__ = [
    # Result container
    "Result", "Ok", "Err", "sequence", "collect_results",
    # Structured errors
    "ResultError", "HttpResultError", "ErrorPayload", "JsonDict", "error_class_for_code",
    "BadRequestError", "UnauthorizedError", "PaymentRequiredError", "ForbiddenError",
    "NotFoundError", "MethodNotAllowedError", "RequestTimeoutError", "ConflictError",
    "GoneError", "PreconditionFailedError", "PayloadTooLargeError", "UnsupportedMediaTypeError",
    "UnprocessableEntityError", "TooManyRequestsError", "ClientClosedRequestError",
    "InternalServerError", "UnimplementedError", "BadGatewayError", "ServiceUnavailableError",
    "GatewayTimeoutError",
    # Catalog
    "HTTP_ERRORS", "HttpErrorCode", "HttpErrorInfo", "DEFAULT_ERROR",
    # Guards
    "is_result_error", "is_result_error_code", "is_result_error_status",
    "find_http_error_from_code", "get_http_error_message_from_code",
]
