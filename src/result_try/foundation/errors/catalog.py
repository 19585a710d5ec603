"""Static HTTP error catalog.

Maps each stable error code to its HTTP status and default message. The
mapping is built once at import time and exposed read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class HttpErrorCode(StrEnum):
    """Stable machine-readable error codes, one per catalog entry."""
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
    CONFLICT = "CONFLICT"
    GONE = "GONE"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    CLIENT_CLOSED_REQUEST = "CLIENT_CLOSED_REQUEST"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    BAD_GATEWAY = "BAD_GATEWAY"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    GATEWAY_TIMEOUT = "GATEWAY_TIMEOUT"


@dataclass(frozen=True, slots=True)
class HttpErrorInfo:
    """One catalog entry: status, code and default message."""

    status: int
    code: str
    message: str


def _entry(status: int, code: HttpErrorCode, message: str) -> tuple[str, HttpErrorInfo]:
    return code.value, HttpErrorInfo(status, code.value, message)


HTTP_ERRORS: Mapping[str, HttpErrorInfo] = MappingProxyType(dict([
    _entry(400, HttpErrorCode.BAD_REQUEST, "Bad Request"),
    _entry(401, HttpErrorCode.UNAUTHORIZED, "Unauthorized"),
    _entry(402, HttpErrorCode.PAYMENT_REQUIRED, "Payment Required"),
    _entry(403, HttpErrorCode.FORBIDDEN, "Forbidden"),
    _entry(404, HttpErrorCode.NOT_FOUND, "Not Found"),
    _entry(405, HttpErrorCode.METHOD_NOT_ALLOWED, "Method Not Allowed"),
    _entry(408, HttpErrorCode.REQUEST_TIMEOUT, "Request Timeout"),
    _entry(409, HttpErrorCode.CONFLICT, "Conflict"),
    _entry(410, HttpErrorCode.GONE, "Gone"),
    _entry(412, HttpErrorCode.PRECONDITION_FAILED, "Precondition Failed"),
    _entry(413, HttpErrorCode.PAYLOAD_TOO_LARGE, "Payload Too Large"),
    _entry(415, HttpErrorCode.UNSUPPORTED_MEDIA_TYPE, "Unsupported Media Type"),
    _entry(422, HttpErrorCode.UNPROCESSABLE_ENTITY, "Unprocessable Entity"),
    _entry(429, HttpErrorCode.TOO_MANY_REQUESTS, "Too Many Requests"),
    _entry(499, HttpErrorCode.CLIENT_CLOSED_REQUEST, "Client Closed Request"),
    _entry(500, HttpErrorCode.INTERNAL_SERVER_ERROR, "Internal Server Error"),
    _entry(501, HttpErrorCode.NOT_IMPLEMENTED, "Not Implemented"),
    _entry(502, HttpErrorCode.BAD_GATEWAY, "Bad Gateway"),
    _entry(503, HttpErrorCode.SERVICE_UNAVAILABLE, "Service Unavailable"),
    _entry(504, HttpErrorCode.GATEWAY_TIMEOUT, "Gateway Timeout"),
]))

DEFAULT_ERROR: HttpErrorInfo = HTTP_ERRORS[HttpErrorCode.INTERNAL_SERVER_ERROR]
