"""Safe, cycle-tolerant inspection of arbitrary values.

``inspect()`` turns anything a caller might catch into a readable string for
diagnostics. It never raises: an unreadable field becomes an error marker, a
reference back into the current path becomes ``[Circular]``, graphs nested
deeper than the configured limit are cut at ``[MaxDepth]`` and once the node
budget of a call is spent the rest is emitted as ``[Truncated]``.

Compound values are rendered as ``[<TypeName>]: <json>`` so that two objects
with the same attributes but different classes stay distinguishable. Inside
the JSON a nested compound is the single-key object ``{"[<TypeName>]": ...}``;
the whole tree is encoded once, so output grows linearly with the number of
nodes visited.

Examples:
    >>> inspect("plain text")
    'plain text'
    >>> inspect({"k": "v"})
    '[dict]: [["k","v"]]'
    >>> inspect({1, 2, 3})
    '[set]: [1,2,3]'
    >>> class User:
    ...     def __init__(self, id: int) -> None:
    ...         self.id = id
    >>> inspect(User(1))
    '[User]: {"id":1}'
    >>> inspect({"owner": User(1)})
    '[dict]: [["owner",{"[User]":{"id":1}}]]'
    >>> a: dict[str, object] = {}
    >>> a["self"] = a
    >>> inspect(a)
    '[dict]: [["self","[Circular]"]]'

Dispatch order (most specific first):
    primitives -> enum members -> numbers -> binary buffers -> canonical-string
    types (URLs, patterns, dates, UUIDs, paths, classes, functions) ->
    exceptions -> mappings -> sets -> sequences -> models/dataclasses/objects
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import logging
import math
import re
import types
from collections import deque
from collections.abc import Mapping, Set
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from typing import Any, Callable, Iterable
from urllib.parse import ParseResult, SplitResult
from uuid import UUID

import orjson
from pydantic import AnyUrl, BaseModel
from pydantic_core import MultiHostUrl, Url

from result_try.foundation.config import get_settings

logger = logging.getLogger("result_try.inspect")

# JSON node produced for every inspected value before encoding
JsonNode = Any

CIRCULAR = "[Circular]"
MAX_DEPTH = "[MaxDepth]"
TRUNCATED = "[Truncated]"

# Largest integer a float-based JSON reader round-trips exactly
MAX_SAFE_INTEGER = 2**53 - 1

_DEFAULT_MAX_DEPTH = 64
_DEFAULT_MAX_NODES = 10_000
_DEFAULT_BYTES_PREVIEW = 32

_BINARY_TYPES = (bytes, bytearray, memoryview)
_EXACT_NUMBER_TYPES = (Decimal, Fraction, complex)
_URL_TYPES = (ParseResult, SplitResult, Url, MultiHostUrl, AnyUrl)
_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)
_SEQUENCE_TYPES = (list, tuple, deque)


class _Tagged(dict):
    """Compound node ``{"[TypeName]": payload}``; orjson encodes it as a plain dict."""

    __slots__ = ()

    @classmethod
    def of(cls, name: str, payload: JsonNode) -> _Tagged:
        return cls({f"[{name}]": payload})


def error_marker(exc: BaseException) -> str:
    """Marker substituted for a single field whose inspection failed."""
    return f"[InspectError: {type(exc).__name__}]"


def type_name(value: object) -> str:
    """Runtime class name of ``value``, ``object`` when none is available."""
    try:
        name = type(value).__name__
    except Exception:
        return "object"
    return name if isinstance(name, str) and name else "object"


def _dumps(node: JsonNode) -> str:
    return orjson.dumps(node).decode()


def _text(value: str) -> str:
    """Plain ``str`` copy that UTF-8 can encode (lone surrogates are escaped)."""
    text = str.__str__(value)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return text


def _canonical(value: Any, kind: type) -> tuple[str, str] | None:
    """(tag, text) for types whose canonical string form says everything."""
    if issubclass(kind, _URL_TYPES):
        text = value.geturl() if issubclass(kind, (ParseResult, SplitResult)) else str(value)
        return type_name(value), text
    if issubclass(kind, re.Pattern):
        return "Pattern", repr(value)
    if issubclass(kind, (dt.datetime, dt.date, dt.time)):
        return type_name(value), value.isoformat()
    if issubclass(kind, (dt.timedelta, UUID, PurePath)):
        return type_name(value), str(value)
    if issubclass(kind, type):
        return "class", value.__qualname__
    if issubclass(kind, _FUNCTION_TYPES):
        return "function", getattr(value, "__qualname__", None) or getattr(value, "__name__", "<anonymous>")
    return None


def _slot_names(cls: type) -> Iterable[str]:
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        yield from ((slots,) if isinstance(slots, str) else slots)


def _attribute_names(value: object) -> list[str]:
    """Own attribute names: instance ``__dict__`` first, then slots, dunders skipped."""
    names: dict[str, None] = {}
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        names.update(dict.fromkeys(str(k) for k in instance_dict))
    names.update(dict.fromkeys(_slot_names(type(value))))
    return [n for n in names if not (n.startswith("__") and n.endswith("__"))]


class _Inspector:
    """State for one top-level ``inspect()`` call. Never shared between calls."""

    __slots__ = ("_visiting", "_max_depth", "_budget", "_bytes_preview")

    def __init__(self, max_depth: int, max_nodes: int, bytes_preview: int) -> None:
        self._visiting: set[int] = set()
        self._max_depth = max_depth
        self._budget = max_nodes
        self._bytes_preview = bytes_preview

    # ─── Entry ─────────────────────────────────────────────────────────────

    def render(self, value: Any) -> str:
        kind = type(value)
        if value is None or kind is bool:
            return str(value)
        if not issubclass(kind, Enum):
            if issubclass(kind, str):
                return _text(value)
            if issubclass(kind, int):
                return int.__repr__(value)
            if issubclass(kind, float):
                return float.__repr__(value)
        node = self.node(value, 0)
        if isinstance(node, _Tagged):
            ((tag, payload),) = node.items()
            return f"{tag}: {payload if isinstance(payload, str) else _dumps(payload)}"
        return node if isinstance(node, str) else _dumps(node)

    # ─── Dispatch ──────────────────────────────────────────────────────────

    def node(self, value: Any, depth: int) -> JsonNode:
        """Convert ``value`` to a JSON node; compounds come back as ``_Tagged``.

        Dispatch looks at ``type(value)`` only; ``isinstance`` would read
        ``__class__`` through the value's own attribute hooks.
        """
        self._budget -= 1
        if self._budget < 0:
            return TRUNCATED
        kind = type(value)
        if value is None or kind is bool:
            return value
        if issubclass(kind, Enum):
            return f"{type_name(value)}.{value.name}"
        if issubclass(kind, str):
            return _text(value)
        if issubclass(kind, int):
            number = int(value)
            return number if -MAX_SAFE_INTEGER <= number <= MAX_SAFE_INTEGER else str(number)
        if issubclass(kind, float):
            return float(value) if math.isfinite(value) else repr(float(value))
        if issubclass(kind, _EXACT_NUMBER_TYPES):
            return str(value)
        if issubclass(kind, _BINARY_TYPES):
            return self._binary(value)
        if (canonical := _canonical(value, kind)) is not None:
            tag, text = canonical
            return f"[{tag}]: {text}"
        if depth >= self._max_depth:
            return MAX_DEPTH

        key = id(value)
        if key in self._visiting:
            return CIRCULAR
        self._visiting.add(key)
        try:
            return self._compound(value, depth + 1)
        finally:
            self._visiting.discard(key)

    def _compound(self, value: Any, depth: int) -> JsonNode:
        kind = type(value)
        name = type_name(value)
        if issubclass(kind, BaseException):
            return self._tagged(value, name, depth, self._error_fields)
        if kind is list:
            items = self._collect(value, name, depth, self._elements)
            return items if type(items) is list else _Tagged.of(name, items)
        if issubclass(kind, Mapping):
            return self._tagged(value, name, depth, self._pairs)
        if issubclass(kind, Set):
            return self._tagged(value, name, depth, self._elements)
        if issubclass(kind, tuple) and isinstance(getattr(kind, "_fields", None), tuple):
            return self._tagged(value, name, depth, self._named_fields)
        if issubclass(kind, _SEQUENCE_TYPES):
            return self._tagged(value, name, depth, self._elements)
        if issubclass(kind, BaseModel):
            return self._tagged(value, name, depth, self._model_fields)
        if dataclasses.is_dataclass(kind):
            return self._tagged(value, name, depth, self._dataclass_fields)
        return self._tagged(value, name, depth, self._object_fields)

    # ─── Containment ───────────────────────────────────────────────────────

    def _collect(self, value: Any, name: str, depth: int, build: Callable[[Any, int], JsonNode]) -> JsonNode:
        try:
            return build(value, depth)
        except Exception as exc:
            logger.debug("inspect: could not read %s: %r", name, exc)
            return error_marker(exc)

    def _tagged(self, value: Any, name: str, depth: int, build: Callable[[Any, int], JsonNode]) -> _Tagged:
        return _Tagged.of(name, self._collect(value, name, depth, build))

    def _safe(self, value: object, depth: int) -> JsonNode:
        try:
            return self.node(value, depth)
        except Exception as exc:
            return error_marker(exc)

    def _field(self, value: object, attr: str, depth: int) -> JsonNode:
        """Read and inspect one attribute; a failure only affects this field."""
        try:
            return self.node(getattr(value, attr), depth)
        except Exception as exc:
            logger.debug("inspect: field %r of %s raised %r", attr, type_name(value), exc)
            return error_marker(exc)

    # ─── Builders ──────────────────────────────────────────────────────────

    def _elements(self, items: Iterable[Any], depth: int) -> list[JsonNode]:
        return [self._safe(v, depth) for v in items]

    def _pairs(self, mapping: Mapping[Any, Any], depth: int) -> list[list[JsonNode]]:
        pairs: list[list[JsonNode]] = []
        for key in list(mapping):
            try:
                item = self.node(mapping[key], depth)
            except Exception as exc:
                item = error_marker(exc)
            pairs.append([self._safe(key, depth), item])
        return pairs

    def _named_fields(self, value: tuple[Any, ...], depth: int) -> dict[str, JsonNode]:
        names = type(value)._fields  # type: ignore[attr-defined]
        return {str(f): self._safe(v, depth) for f, v in zip(names, value)}

    def _model_fields(self, model: BaseModel, depth: int) -> dict[str, JsonNode]:
        cls = type(model)
        return {n: self._field(model, n, depth) for n in (*cls.model_fields, *cls.model_computed_fields)}

    def _dataclass_fields(self, value: Any, depth: int) -> dict[str, JsonNode]:
        return {f.name: self._field(value, f.name, depth) for f in dataclasses.fields(value)}

    def _object_fields(self, value: object, depth: int) -> dict[str, JsonNode]:
        fields: dict[str, JsonNode] = {}
        for attr in _attribute_names(value):
            try:
                raw = getattr(value, attr)
            except AttributeError:
                continue  # unset slot
            except Exception as exc:
                fields[attr] = error_marker(exc)
                continue
            fields[attr] = self._safe(raw, depth)
        return fields

    def _error_fields(self, exc: BaseException, depth: int) -> dict[str, JsonNode]:
        fields: dict[str, JsonNode] = {"name": type_name(exc)}
        try:
            fields["message"] = _text(str(exc))
        except Exception as inner:
            fields["message"] = error_marker(inner)
        for attr in _attribute_names(exc):
            if attr.startswith("_") or attr in ("name", "args"):
                continue
            fields[attr] = self._field(exc, attr, depth)

        notes = getattr(exc, "__notes__", None)
        if isinstance(notes, list) and notes:
            fields["notes"] = self._elements(notes, depth)

        # An explicit ``cause`` attribute wins over the interpreter's chain
        cause = fields.pop("cause", None)
        if cause is None:
            chained = exc.__cause__ or (None if exc.__suppress_context__ else exc.__context__)
            if chained is not None:
                cause = self._safe(chained, depth)
        if cause is not None:
            fields["cause"] = cause
        return fields

    def _binary(self, value: bytes | bytearray | memoryview) -> _Tagged:
        name = type_name(value)
        try:
            view = memoryview(value)
            data = view.tobytes()
            preview = data[: self._bytes_preview].hex()
            if len(data) > self._bytes_preview:
                preview += "..."
            summary: JsonNode = {"length": view.nbytes, "hex": preview}
        except Exception as exc:
            summary = error_marker(exc)
        return _Tagged.of(name, summary)


def _limits() -> tuple[int, int, int]:
    try:
        settings = get_settings().inspect
    except Exception as exc:
        logger.debug("inspect: settings unavailable (%r), using defaults", exc)
        return _DEFAULT_MAX_DEPTH, _DEFAULT_MAX_NODES, _DEFAULT_BYTES_PREVIEW
    return settings.max_depth, settings.max_nodes, settings.bytes_preview


def inspect(value: object) -> str:
    """Render any value as a diagnostic string. Never raises.

    Args:
        value: Anything: a caught exception, a rejected payload, an object graph

    Returns:
        A readable string; compound values carry a ``[<TypeName>]:`` tag
    """
    max_depth, max_nodes, bytes_preview = _limits()
    try:
        return _Inspector(max_depth, max_nodes, bytes_preview).render(value)
    except Exception as exc:  # includes RecursionError
        logger.debug("inspect: gave up on %s: %r", type_name(value), exc)
        return f"[{type_name(value)}]: <unprintable>"
