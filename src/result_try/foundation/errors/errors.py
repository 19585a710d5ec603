"""Structured error taxonomy.

``ResultError`` represents a fault as data: a stable ``code``, an HTTP-style
``status``, a human-readable ``message`` and the original ``cause``. One
subtype per catalog entry pins ``code`` and ``status``:

    >>> err = NotFoundError("user 42 does not exist")
    >>> err.code, err.status
    ('NOT_FOUND', 404)

``from_`` normalizes anything a caller might catch; it is total and idempotent:

    >>> ResultError.from_("boom").message
    'boom'
    >>> ResultError.from_(ValueError("bad")).cause
    ValueError('bad')
    >>> ResultError.from_({"weird": True}).message
    '[dict]: [["weird",true]]'

Fields are read-only once constructed. Errors are exceptions, so
``Result.unwrap()`` can raise them at a trust boundary.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

import orjson

from result_try.foundation.inspection import inspect

from .catalog import DEFAULT_ERROR, HTTP_ERRORS, HttpErrorCode
from .result import Err, Result
from .types import ErrorPayload, JsonDict

_FROZEN_FIELDS: frozenset[str] = frozenset({"code", "status", "message", "cause"})

# code -> subtype, filled by HttpResultError.__init_subclass__
_SUBTYPES: dict[str, type[HttpResultError]] = {}


def _exception_message(exc: BaseException) -> str:
    """Message of a native exception, falling back to its type name when empty."""
    if issubclass(type(exc), ResultError):
        return exc.message
    try:
        text = str(exc)
    except Exception:
        text = ""
    return text or type(exc).__name__


class ResultError(Exception):
    """Base structured error carrying ``{code, status, message, cause}``.

    Attributes:
        code: Stable machine-readable identifier (e.g. ``NOT_FOUND``)
        status: HTTP-style status code; any integer is legal
        message: Human-readable message, never empty
        cause: The original value this error was normalized from, if any
    """

    default_code: ClassVar[str] = DEFAULT_ERROR.code
    default_status: ClassVar[int] = DEFAULT_ERROR.status
    default_message: ClassVar[str] = DEFAULT_ERROR.message

    code: str
    status: int
    message: str
    cause: Any

    def __init__(
        self,
        message: str | None = None,
        status: int | None = None,
        code: str | None = None,
        cause: object = None,
    ) -> None:
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.status = self.default_status if status is None else int(status)
        self.code = str(code or self.default_code)
        self.cause = cause
        if issubclass(type(cause), BaseException) and cause is not self:
            self.__cause__ = cause

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FROZEN_FIELDS and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _FROZEN_FIELDS:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__delattr__(name)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.status, self.code, self.cause))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, status={self.status}, message={self.message!r})"

    # ─── Normalization ─────────────────────────────────────────────────

    @classmethod
    def from_(cls, value: object) -> Self:
        """Normalize any value into an instance of this class. Never raises.

        - an instance of this class is returned unchanged
        - a string becomes the message, with no cause
        - an exception supplies its message and becomes the cause
        - anything else is inspected for the message and kept as the cause

        Dispatch looks at ``type(value)`` only, so a value whose attribute
        access raises is still normalized.
        """
        kind = type(value)
        if issubclass(kind, cls):
            return value  # type: ignore[return-value]
        if issubclass(kind, str):
            return cls(str.__str__(value))
        if issubclass(kind, BaseException):
            return cls(_exception_message(value), cause=value)
        return cls(inspect(value), cause=value)

    @classmethod
    def result(cls, value: object) -> Result[Any, Self]:
        """Shorthand for ``Err(cls.from_(value))``."""
        return Err(cls.from_(value))

    # ─── Serialization ─────────────────────────────────────────────────

    def to_payload(self) -> ErrorPayload:
        """Snapshot as a frozen, always-serializable payload."""
        return ErrorPayload(
            name=type(self).__name__,
            code=self.code,
            status=self.status,
            message=self.message,
            cause=None if self.cause is None else inspect(self.cause),
        )

    def to_dict(self) -> JsonDict:
        """Payload as a plain dict, ``cause`` omitted when absent."""
        return self.to_payload().model_dump(exclude_none=True)

    def to_json(self) -> str:
        """Payload encoded as compact JSON."""
        return orjson.dumps(self.to_dict()).decode()

    @classmethod
    def from_payload(cls, payload: ErrorPayload | JsonDict) -> ResultError:
        """Rebuild an error from its payload, restoring the registered subtype for its code.

        Raises:
            pydantic.ValidationError: If ``payload`` is not a valid error payload
        """
        data = payload if isinstance(payload, ErrorPayload) else ErrorPayload.model_validate(payload)
        subtype = _SUBTYPES.get(data.code)
        if subtype is not None and subtype.default_status == data.status:
            return subtype(data.message, cause=data.cause)
        return ResultError(data.message, data.status, data.code, data.cause)


class HttpResultError(ResultError):
    """Base of the catalog subtypes: ``code`` and ``status`` come from the catalog.

    Subclasses name their catalog entry with a class keyword:

        >>> class TeapotError(HttpResultError, code="BAD_REQUEST"): ...
    """

    def __init_subclass__(cls, code: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if code is None:
            return
        info = HTTP_ERRORS[code]
        cls.default_code = info.code
        cls.default_status = info.status
        cls.default_message = info.message
        _SUBTYPES.setdefault(info.code, cls)

    def __init__(self, message: str | None = None, cause: object = None) -> None:
        super().__init__(message, self.default_status, self.default_code, cause)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.cause))


def error_class_for_code(code: str) -> type[HttpResultError] | None:
    """Subtype registered for a catalog code, None if the code is unknown."""
    return _SUBTYPES.get(code)


# ═══════════════════════════════════════════════════════════════════════════════
# Client errors (4xx)
# ═══════════════════════════════════════════════════════════════════════════════


class BadRequestError(HttpResultError, code=HttpErrorCode.BAD_REQUEST):
    """Malformed or invalid input."""


class UnauthorizedError(HttpResultError, code=HttpErrorCode.UNAUTHORIZED):
    """Missing or invalid credentials."""


class PaymentRequiredError(HttpResultError, code=HttpErrorCode.PAYMENT_REQUIRED):
    pass


class ForbiddenError(HttpResultError, code=HttpErrorCode.FORBIDDEN):
    """Authenticated but not allowed."""


class NotFoundError(HttpResultError, code=HttpErrorCode.NOT_FOUND):
    """Requested resource does not exist."""


class MethodNotAllowedError(HttpResultError, code=HttpErrorCode.METHOD_NOT_ALLOWED):
    pass


class RequestTimeoutError(HttpResultError, code=HttpErrorCode.REQUEST_TIMEOUT):
    pass


class ConflictError(HttpResultError, code=HttpErrorCode.CONFLICT):
    """State conflict, e.g. a duplicate or a concurrent edit."""


class GoneError(HttpResultError, code=HttpErrorCode.GONE):
    pass


class PreconditionFailedError(HttpResultError, code=HttpErrorCode.PRECONDITION_FAILED):
    pass


class PayloadTooLargeError(HttpResultError, code=HttpErrorCode.PAYLOAD_TOO_LARGE):
    pass


class UnsupportedMediaTypeError(HttpResultError, code=HttpErrorCode.UNSUPPORTED_MEDIA_TYPE):
    pass


class UnprocessableEntityError(HttpResultError, code=HttpErrorCode.UNPROCESSABLE_ENTITY):
    """Well-formed input that fails semantic validation."""


class TooManyRequestsError(HttpResultError, code=HttpErrorCode.TOO_MANY_REQUESTS):
    """Rate limit exceeded."""


class ClientClosedRequestError(HttpResultError, code=HttpErrorCode.CLIENT_CLOSED_REQUEST):
    """Caller went away before the operation finished."""


# ═══════════════════════════════════════════════════════════════════════════════
# Server errors (5xx)
# ═══════════════════════════════════════════════════════════════════════════════


class InternalServerError(HttpResultError, code=HttpErrorCode.INTERNAL_SERVER_ERROR):
    """Unhandled internal fault."""


class UnimplementedError(HttpResultError, code=HttpErrorCode.NOT_IMPLEMENTED):
    """Path not implemented (NOT_IMPLEMENTED, 501)."""


class BadGatewayError(HttpResultError, code=HttpErrorCode.BAD_GATEWAY):
    """Upstream returned an invalid response."""


class ServiceUnavailableError(HttpResultError, code=HttpErrorCode.SERVICE_UNAVAILABLE):
    pass


class GatewayTimeoutError(HttpResultError, code=HttpErrorCode.GATEWAY_TIMEOUT):
    """Upstream did not answer in time."""
