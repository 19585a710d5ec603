"""Decorator adapters over the wrap functions.

``wrap_result`` turns a function into one that returns a Result instead of
raising; ``wrap_methods`` applies it to every method of a class.

Example:
    >>> @wrap_result
    ... def parse(text: str) -> int:
    ...     return int(text)
    >>> parse("7")
    Ok(7)
    >>> parse("x").ok
    False

    >>> @wrap_methods(map_error=NotFoundError.from_)
    ... class UserRepo:
    ...     async def get(self, user_id: int) -> dict[str, object]:
    ...         raise KeyError(user_id)
    >>> (await UserRepo().get(1)).error.status
    404
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, overload

from .wrap import MapError, try_result, try_result_sync

F = TypeVar("F", bound=Callable[..., Any])
C = TypeVar("C", bound=type)

_WRAPPED_MARKER = "__result_wrapped__"


def _wrap(fn: Callable[..., Any], map_error: MapError | None) -> Callable[..., Any]:
    if getattr(fn, _WRAPPED_MARKER, False):
        return fn

    if inspect.iscoroutinefunction(fn):
        @wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            return await try_result(lambda: fn(*args, **kwargs), map_error)
        wrapper: Callable[..., Any] = async_wrapper
    else:
        @wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            return try_result_sync(lambda: fn(*args, **kwargs), map_error)
        wrapper = sync_wrapper

    setattr(wrapper, _WRAPPED_MARKER, True)
    return wrapper


@overload
def wrap_result(fn: F, *, map_error: MapError | None = None) -> Callable[..., Any]: ...
@overload
def wrap_result(fn: None = None, *, map_error: MapError | None = None) -> Callable[[F], Callable[..., Any]]: ...


def wrap_result(
    fn: Callable[..., Any] | None = None,
    *,
    map_error: MapError | None = None,
) -> Callable[..., Any]:
    """Make ``fn`` return a Result instead of raising.

    Usable bare (``@wrap_result``) or configured (``@wrap_result(map_error=...)``).
    Coroutine functions stay coroutine functions and go through ``try_result``;
    plain functions go through ``try_result_sync``.
    """
    if fn is not None:
        return _wrap(fn, map_error)
    return lambda f: _wrap(f, map_error)


def _wrap_member(member: Any, map_error: MapError | None) -> Any:
    """Wrap a class-body member, or return None when it is not a method."""
    if isinstance(member, staticmethod):
        return staticmethod(_wrap(member.__func__, map_error))
    if isinstance(member, classmethod):
        return classmethod(_wrap(member.__func__, map_error))
    if inspect.isfunction(member):
        return _wrap(member, map_error)
    return None


def _apply(cls: C, map_error: MapError | None, include_private: bool) -> C:
    for name, member in list(vars(cls).items()):
        if name.startswith("__") and name.endswith("__"):
            continue
        if name.startswith("_") and not include_private:
            continue
        wrapped = _wrap_member(member, map_error)
        if wrapped is not None:
            setattr(cls, name, wrapped)
    return cls


@overload
def wrap_methods(cls: C, *, map_error: MapError | None = None, include_private: bool = False) -> C: ...
@overload
def wrap_methods(
    cls: None = None, *, map_error: MapError | None = None, include_private: bool = False,
) -> Callable[[C], C]: ...


def wrap_methods(
    cls: type | None = None,
    *,
    map_error: MapError | None = None,
    include_private: bool = False,
) -> Any:
    """Class decorator: every method defined in the class body returns a Result.

    Plain, static and class methods are wrapped. Dunder methods, properties
    and inherited methods are left alone; ``_private`` methods only when
    ``include_private`` is set.
    """
    if cls is not None:
        return _apply(cls, map_error, include_private)
    return lambda c: _apply(c, map_error, include_private)
