"""Result container: explicit success/failure instead of implicit raising.

A ``Result`` is a discriminated union with exactly two shapes:
- success: ``ok is True``, ``value`` set, ``error is None``
- failure: ``ok is False``, ``error`` set (never None), ``value is None``

Two access modes are observationally equivalent:
- named: ``r.ok``, ``r.value``, ``r.error``
- positional: ``r[0]`` is the value, ``r[1]`` is the error, so
  ``value, error = r`` destructures a fixed-length pair

Instances are immutable and slotted; combinators always return a new Result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, overload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

# Discriminant values stored in ``_is_ok``
_OK = True
_ERR = False


class Result(Generic[T, E]):
    """One outcome of an operation that can fail, as a value.

    Examples:
        >>> r = Ok(42)
        >>> r.ok, r.value, r.error
        (True, 42, None)
        >>> value, error = r
        >>> value
        42
        >>> Err(NotFoundError("user 7")).unwrap_or(None) is None
        True
        >>> Result.void().value is None
        True
    """

    __slots__ = ("_value", "_error", "_is_ok")
    __match_args__ = ("ok", "value", "error")

    def __init__(self, payload: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok()/Err() or Result.success()/failure().

        Raises:
            ValueError: If a failure is built with a None error
        """
        if not is_ok and payload is None:
            raise ValueError("a failure Result needs an error; use Result.void() for an empty success")
        object.__setattr__(self, "_is_ok", is_ok)
        object.__setattr__(self, "_value", payload if is_ok else None)
        object.__setattr__(self, "_error", None if is_ok else payload)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    # ─── Construction ──────────────────────────────────────────────────

    @classmethod
    def success(cls, value: T) -> Result[T, E]:
        """Success variant carrying ``value``."""
        return cls(value, _OK)

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        """Failure variant carrying ``error``."""
        return cls(error, _ERR)

    @classmethod
    def void(cls) -> Result[None, E]:
        """Success with no meaningful payload, for operations that only validate."""
        return cls(None, _OK)  # type: ignore[arg-type]

    # ─── Named Access ──────────────────────────────────────────────────

    @property
    def ok(self) -> bool:
        """Discriminant: True for success."""
        return self._is_ok

    @property
    def value(self) -> T | None:
        """Success payload, None on failure."""
        return self._value

    @property
    def error(self) -> E | None:
        """Failure payload, None on success."""
        return self._error

    def is_ok(self) -> bool:
        """Same as ``ok``, as a method."""
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Positional Access ─────────────────────────────────────────────

    def __len__(self) -> int:
        return 2

    @overload
    def __getitem__(self, index: int) -> T | E | None: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T | E | None, ...]: ...

    def __getitem__(self, index: int | slice) -> object:
        """Position 0 is the value, position 1 the error."""
        return (self._value, self._error)[index]

    def __iter__(self) -> Iterator[T | E | None]:
        """Yield (value, error) so ``value, error = result`` works."""
        yield self._value
        yield self._error

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Snapshot as a plain ``(value, error)`` tuple."""
        return (self._value, self._error)

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Return the success payload or raise the failure payload.

        This is the one deliberate way back into raising control flow, meant
        for trust boundaries (request handlers, CLI entry points, tests).

        Raises:
            The stored error when it is an exception, otherwise RuntimeError
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        if issubclass(type(self._error), BaseException):
            raise self._error  # type: ignore[misc]
        raise RuntimeError(f"unwrap() on Err: {self._error!r}")

    def unwrap_or(self, default: T) -> T:
        if not self._is_ok:
            return default
        return self._value  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Success payload, or ``f(error)`` on failure."""
        if not self._is_ok:
            return f(self._error)  # type: ignore[arg-type]
        return self._value  # type: ignore[return-value]

    def expect(self, msg: str) -> T:
        """Like unwrap(), but raises RuntimeError(``msg``) chained to the stored error."""
        if not self._is_ok:
            cause = self._error if issubclass(type(self._error), BaseException) else None
            raise RuntimeError(f"{msg}: {self._error}") from cause
        return self._value  # type: ignore[return-value]

    # ─── Combinators ───────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the success payload; failures pass through untouched."""
        if not self._is_ok:
            return self  # type: ignore[return-value]
        return Result(f(self._value), _OK)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure payload, e.g. ``r.map_err(NotFoundError.from_)``."""
        if self._is_ok:
            return self  # type: ignore[return-value]
        return Result(f(self._error), _ERR)  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that itself returns a Result. Stops at the first failure.

        Example:
            >>> parse = lambda s: Ok(int(s)) if s.isdigit() else Err(f"not a number: {s!r}")
            >>> Ok("42").flat_map(parse)
            Ok(42)
        """
        if not self._is_ok:
            return self  # type: ignore[return-value]
        return f(self._value)  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self.flat_map(f)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from a failure with ``f(error)``; successes pass through."""
        if self._is_ok:
            return self  # type: ignore[return-value]
        return f(self._error)  # type: ignore[arg-type]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Fold both shapes into one value: ``ok(value)`` or ``err(error)``."""
        if self._is_ok:
            return ok(self._value)  # type: ignore[arg-type]
        return err(self._error)  # type: ignore[arg-type]

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Truthiness follows the discriminant, not the pair length."""
        return self._is_ok

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value, self._error))

    def __repr__(self) -> str:
        if self._is_ok:
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return self.to_tuple() == other.to_tuple() and self._is_ok == other._is_ok
        return NotImplemented


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Success Result; ``Ok(None)`` is still a success."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Failure Result carrying ``error``, which must not be None."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Aggregation
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """All payloads as one success, or the first failure encountered."""
    values: list[T] = []
    for result in results:
        if not result._is_ok:
            return result  # type: ignore[return-value]
        values.append(result._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Like sequence(), but keeps going and fails with every error at once.

    Useful for validating a batch where the caller wants all problems reported.
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result._is_ok:
            values.append(result._value)  # type: ignore[arg-type]
        else:
            errors.append(result._error)  # type: ignore[arg-type]
    if errors:
        return Result(errors, _ERR)
    return Result(values, _OK)
