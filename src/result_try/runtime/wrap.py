"""Wrap unreliable operations into a Result.

``try_result_sync`` guards a synchronous call; ``try_result`` guards an
awaitable. Neither raises for a fault of the wrapped operation: the fault is
normalized through ``map_error`` (when given) or ``ResultError.from_`` and
returned as a failure Result.

Example:
    >>> def parse(text: str) -> int:
    ...     return int(text)
    >>> try_result_sync(lambda: parse("42"))
    Ok(42)
    >>> try_result_sync(lambda: parse("x")).error.code
    'INTERNAL_SERVER_ERROR'

    >>> async def fetch_user(user_id: int) -> dict[str, object]:
    ...     raise LookupError(f"user {user_id}")
    >>> result = await try_result(fetch_user(7), map_error=NotFoundError.from_)
    >>> result.error.status
    404
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias, TypeVar

from result_try.foundation.config import get_settings
from result_try.foundation.errors import Err, Ok, Result, ResultError

logger = logging.getLogger("result_try.wrap")

T = TypeVar("T")

MapError: TypeAlias = Callable[[BaseException], Any]


def _normalize(fault: BaseException, map_error: MapError | None) -> ResultError:
    """Turn a caught fault into a ResultError; a failing ``map_error`` never escapes."""
    if map_error is None:
        return ResultError.from_(fault)
    try:
        mapped = map_error(fault)
    except Exception as mapping_fault:
        logger.warning(
            "map_error %r raised %s while mapping %s; falling back to ResultError.from_",
            map_error, type(mapping_fault).__name__, type(fault).__name__,
        )
        return ResultError.from_(fault)
    return ResultError.from_(mapped)


def _capture_cancellation() -> bool:
    try:
        return get_settings().wrap.capture_cancellation
    except Exception as exc:
        logger.debug("try_result: settings unavailable (%r), capturing cancellation", exc)
        return True


def try_result_sync(fn: Callable[[], T], map_error: MapError | None = None) -> Result[T, ResultError]:
    """Call ``fn()``; return Ok with its value or Err with the normalized fault.

    Only faults raised by the call itself are captured.

    Args:
        fn: Zero-argument callable (use a lambda or functools.partial for arguments)
        map_error: Optional mapper from the raised exception to a ResultError
    """
    try:
        value = fn()
    except Exception as fault:
        return Err(_normalize(fault, map_error))
    return Ok(value)


async def try_result(
    operation: Awaitable[T] | Callable[[], Awaitable[T] | T] | T,
    map_error: MapError | None = None,
) -> Result[T, ResultError]:
    """Await ``operation``; return Ok with its value or Err with the normalized fault.

    The coroutine never raises for a fault of the operation. It suspends only
    where the operation itself suspends.

    Args:
        operation: An awaitable (coroutine, task, future), a zero-argument
            callable returning an awaitable or a plain value, or a plain value
        map_error: Optional mapper from the raised exception to a ResultError

    Note:
        ``asyncio.CancelledError`` is converted like any other fault unless
        ``RESULT_TRY_WRAP_CAPTURE_CANCELLATION=false``, in which case it re-raises.
        Unreadable settings count as the default.
    """
    try:
        value: Any = operation
        if not inspect.isawaitable(value) and callable(value):
            value = value()
        if inspect.isawaitable(value):
            value = await value
    except Exception as fault:
        return Err(_normalize(fault, map_error))
    except asyncio.CancelledError as fault:
        if not _capture_cancellation():
            raise
        logger.debug("try_result: operation cancelled, returning failure Result")
        return Err(_normalize(fault, map_error))
    return Ok(value)
