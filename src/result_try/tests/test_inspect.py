"""Tests for inspect(): totality, cycle handling and type-tagged rendering."""

from __future__ import annotations

import re
from collections import namedtuple
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse
from uuid import UUID

import orjson
import pytest
from pydantic import BaseModel

from result_try import CIRCULAR, MAX_DEPTH, TRUNCATED, NotFoundError, inspect
from result_try.foundation.inspection import MAX_SAFE_INTEGER, error_marker, type_name


class User:
    def __init__(self, id: int) -> None:
        self.id = id


class Account:
    def __init__(self, id: int) -> None:
        self.id = id


class Node:
    def __init__(self, label: str) -> None:
        self.label = label
        self.next: Node | None = None


class Leaf:
    def __init__(self) -> None:
        self.v = 1


class Color(Enum):
    RED = "red"


Point = namedtuple("Point", "x y")


@dataclass
class Pair:
    x: int
    y: str


class Settings(BaseModel):
    retries: int = 3


def helper() -> None:
    pass


def _payload(rendered: str, tag: str) -> Any:
    prefix = f"[{tag}]: "
    assert rendered.startswith(prefix), rendered
    return orjson.loads(rendered[len(prefix):])


# ─────────────────────────────────────────────────────────────────────────────
# Primitives
# ─────────────────────────────────────────────────────────────────────────────


class TestPrimitives:
    def test_string_verbatim(self) -> None:
        assert inspect("hello") == "hello"
        assert inspect("") == ""

    def test_scalars(self) -> None:
        assert inspect(None) == "None"
        assert inspect(True) == "True"
        assert inspect(123) == "123"
        assert inspect(1.5) == "1.5"

    def test_big_int_stays_exact(self) -> None:
        assert inspect(2**70) == str(2**70)
        assert inspect([2**70]) == f'["{2**70}"]'
        assert inspect([MAX_SAFE_INTEGER]) == f"[{MAX_SAFE_INTEGER}]"

    def test_non_finite_floats_nested(self) -> None:
        assert inspect([float("nan"), float("inf")]) == '["nan","inf"]'

    def test_enum_member(self) -> None:
        assert inspect(Color.RED) == "Color.RED"
        assert inspect([Color.RED]) == '["Color.RED"]'

    def test_decimal_nested(self) -> None:
        assert inspect([Decimal("1.10")]) == '["1.10"]'


# ─────────────────────────────────────────────────────────────────────────────
# Type-tagged compounds
# ─────────────────────────────────────────────────────────────────────────────


class TestCompounds:
    def test_list_is_untagged(self) -> None:
        assert inspect([1, "a", None]) == '[1,"a",null]'

    def test_mapping_as_pairs(self) -> None:
        assert inspect({"k": "v"}) == '[dict]: [["k","v"]]'
        assert inspect({}) == "[dict]: []"

    def test_non_string_keys(self) -> None:
        assert _payload(inspect({1: "one"}), "dict") == [[1, "one"]]

    def test_set(self) -> None:
        assert inspect({1, 2, 3}) == "[set]: [1,2,3]"
        assert inspect(frozenset()) == "[frozenset]: []"

    def test_tuple_tagged(self) -> None:
        assert inspect((1, 2)) == "[tuple]: [1,2]"

    def test_namedtuple_fields(self) -> None:
        assert inspect(Point(1, 2)) == '[Point]: {"x":1,"y":2}'

    def test_plain_object(self) -> None:
        assert inspect(User(1)) == '[User]: {"id":1}'

    def test_same_shape_different_class(self) -> None:
        assert inspect(User(1)) != inspect(Account(1))

    def test_dataclass(self) -> None:
        assert inspect(Pair(1, "a")) == '[Pair]: {"x":1,"y":"a"}'

    def test_pydantic_model(self) -> None:
        assert inspect(Settings()) == '[Settings]: {"retries":3}'

    def test_nested_compound_is_single_key_object(self) -> None:
        assert inspect({"user": User(7)}) == '[dict]: [["user",{"[User]":{"id":7}}]]'

    def test_nested_compound_encoded_once(self) -> None:
        rendered = inspect([{"a": User(1)}])
        assert "\\" not in rendered
        assert orjson.loads(rendered) == [{"[dict]": [["a", {"[User]": {"id": 1}}]]}]

    def test_binary_summary(self) -> None:
        assert inspect(b"\x00\x01") == '[bytes]: {"length":2,"hex":"0001"}'
        assert inspect(bytearray(b"\xff")) == '[bytearray]: {"length":1,"hex":"ff"}'

    def test_binary_preview_truncated(self) -> None:
        summary = _payload(inspect(bytes(100)), "bytes")
        assert summary["length"] == 100
        assert summary["hex"].endswith("...")


# ─────────────────────────────────────────────────────────────────────────────
# Canonical-string types
# ─────────────────────────────────────────────────────────────────────────────


class TestCanonical:
    def test_pattern(self) -> None:
        assert inspect(re.compile("ab+c", re.IGNORECASE)) == "[Pattern]: re.compile('ab+c', re.IGNORECASE)"

    def test_url(self) -> None:
        assert inspect(urlparse("https://example.com/a?b=1")) == "[ParseResult]: https://example.com/a?b=1"

    def test_dates(self) -> None:
        assert inspect(datetime(2024, 1, 2, 3, 4, 5)) == "[datetime]: 2024-01-02T03:04:05"
        assert inspect(date(2024, 1, 2)) == "[date]: 2024-01-02"

    def test_uuid_and_path(self) -> None:
        uid = UUID(int=1)
        assert inspect(uid) == f"[UUID]: {uid}"
        assert inspect(PurePosixPath("/tmp/x")) == "[PurePosixPath]: /tmp/x"

    def test_class_and_function(self) -> None:
        assert inspect(int) == "[class]: int"
        assert inspect(helper) == "[function]: helper"


# ─────────────────────────────────────────────────────────────────────────────
# Cycles & shared references
# ─────────────────────────────────────────────────────────────────────────────


class TestCycles:
    def test_self_referencing_dict(self) -> None:
        a: dict[str, Any] = {}
        a["self"] = a
        assert inspect(a) == f'[dict]: [["self","{CIRCULAR}"]]'

    def test_self_referencing_list(self) -> None:
        items: list[Any] = []
        items.append(items)
        assert inspect(items) == f'["{CIRCULAR}"]'

    def test_mutual_references(self) -> None:
        first, second = Node("a"), Node("b")
        first.next, second.next = second, first

        rendered = inspect(first)

        assert rendered.startswith("[Node]: ")
        assert CIRCULAR in rendered
        assert '{"[Node]":{"label":"b","next":"[Circular]"}}' in rendered

    def test_shared_reference_expands_each_time(self) -> None:
        shared = Leaf()
        rendered = inspect({"x": shared, "y": shared})

        assert CIRCULAR not in rendered
        assert rendered.count("[Leaf]") == 2

    def test_calls_are_independent(self) -> None:
        a: dict[str, Any] = {}
        a["self"] = a
        assert inspect(a) == inspect(a)
        assert inspect([a, a]).count(CIRCULAR) == 2


# ─────────────────────────────────────────────────────────────────────────────
# Exceptions
# ─────────────────────────────────────────────────────────────────────────────


class TestExceptions:
    def test_plain_exception(self) -> None:
        assert inspect(ValueError("bad")) == '[ValueError]: {"name":"ValueError","message":"bad"}'

    def test_explicit_chain(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError as inner:
                raise RuntimeError("outer") from inner
        except RuntimeError as exc:
            rendered = inspect(exc)

        fields = _payload(rendered, "RuntimeError")
        assert fields["message"] == "outer"
        assert fields["cause"] == {"[KeyError]": {"name": "KeyError", "message": "'k'"}}

    def test_implicit_context(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError:
                raise RuntimeError("while handling")
        except RuntimeError as exc:
            rendered = inspect(exc)

        assert "[KeyError]" in _payload(rendered, "RuntimeError")["cause"]

    def test_suppressed_context(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError:
                raise RuntimeError("clean") from None
        except RuntimeError as exc:
            rendered = inspect(exc)

        assert "cause" not in _payload(rendered, "RuntimeError")

    def test_custom_attributes(self) -> None:
        class ApiError(Exception):
            def __init__(self, message: str, status_code: int) -> None:
                super().__init__(message)
                self.status_code = status_code

        fields = _payload(inspect(ApiError("upstream", 503)), "ApiError")
        assert fields == {"name": "ApiError", "message": "upstream", "status_code": 503}

    def test_notes(self) -> None:
        exc = ValueError("bad")
        exc.add_note("while parsing row 3")
        assert _payload(inspect(exc), "ValueError")["notes"] == ["while parsing row 3"]

    def test_result_error_fields(self) -> None:
        fields = _payload(inspect(NotFoundError("missing")), "NotFoundError")
        assert fields == {"name": "NotFoundError", "message": "missing", "status": 404, "code": "NOT_FOUND"}

    def test_cyclic_exception_chain(self) -> None:
        first, second = ValueError("a"), ValueError("b")
        first.__cause__, second.__cause__ = second, first
        assert CIRCULAR in inspect(first)


# ─────────────────────────────────────────────────────────────────────────────
# Hostile values
# ─────────────────────────────────────────────────────────────────────────────


class Hostile:
    __slots__ = ("fine", "bad")

    def __init__(self) -> None:
        self.fine = 1
        self.bad = 2

    def __getattribute__(self, name: str) -> Any:
        if name == "bad":
            raise RuntimeError("nope")
        return object.__getattribute__(self, name)


class Evil:
    def __getattribute__(self, name: str) -> Any:
        raise RuntimeError("everything fails")


class BadStr(Exception):
    def __str__(self) -> str:
        raise RuntimeError("no message")


class BadMap(Mapping[str, int]):
    def __getitem__(self, key: str) -> int:
        return 1

    def __len__(self) -> int:
        return 1

    def __iter__(self) -> Iterator[str]:
        raise RuntimeError("cannot iterate")


class PartialSlots:
    __slots__ = ("set_", "unset")

    def __init__(self) -> None:
        self.set_ = 1


class TestHostile:
    def test_throwing_field_is_marked(self) -> None:
        assert inspect(Hostile()) == f'[Hostile]: {{"fine":1,"bad":"{error_marker(RuntimeError())}"}}'

    def test_throwing_message(self) -> None:
        fields = _payload(inspect(BadStr()), "BadStr")
        assert fields["message"] == "[InspectError: RuntimeError]"

    def test_throwing_iteration(self) -> None:
        assert inspect(BadMap()) == "[BadMap]: [InspectError: RuntimeError]"

    def test_unset_slot_skipped(self) -> None:
        assert inspect(PartialSlots()) == '[PartialSlots]: {"set_":1}'

    def test_nested_evil_element(self) -> None:
        rendered = inspect([1, Evil()])
        assert rendered.startswith("[1,")
        assert "[InspectError: RuntimeError]" in rendered

    def test_top_level_evil_never_raises(self) -> None:
        rendered = inspect(Evil())
        assert isinstance(rendered, str)
        assert rendered.startswith("[Evil]")

    def test_evil_keeps_its_tag(self) -> None:
        assert inspect(Evil()) == "[Evil]: [InspectError: RuntimeError]"

    def test_evil_value_leaves_siblings_intact(self) -> None:
        assert inspect({"a": Evil(), "b": 2}) == (
            '[dict]: [["a",{"[Evil]":"[InspectError: RuntimeError]"}],["b",2]]'
        )


# ─────────────────────────────────────────────────────────────────────────────
# Depth bound
# ─────────────────────────────────────────────────────────────────────────────




DEPTH_BOUND_CHARS = 20_000


def _chain(length: int) -> Node:
    head = Node("0")
    current = head
    for i in range(1, length):
        current.next = Node(str(i))
        current = current.next
    return head


def _error_chain(length: int) -> ValueError:
    errors = [ValueError(f"level {i}") for i in range(length)]
    for outer, inner in zip(errors, errors[1:]):
        outer.__cause__ = inner
    return errors[0]


class Fork:
    def __init__(self, branch: object) -> None:
        self.left = branch
        self.right = branch


class TestDepth:
    def test_deep_list(self) -> None:
        nested: list[Any] = []
        for _ in range(10_000):
            nested = [nested]

        rendered = inspect(nested)

        assert MAX_DEPTH in rendered

    @pytest.mark.parametrize("length", [30, 100, 1_000])
    def test_deep_object_chain_is_bounded(self, length: int) -> None:
        rendered = inspect(_chain(length))

        assert rendered.startswith("[Node]: ")
        assert len(rendered) < DEPTH_BOUND_CHARS
        assert (MAX_DEPTH in rendered) == (length > 64)

    @pytest.mark.parametrize("length", [30, 100])
    def test_deep_dict_is_bounded(self, length: int) -> None:
        nested: dict[str, Any] = {}
        for _ in range(length):
            nested = {"k": nested}

        rendered = inspect(nested)

        assert len(rendered) < DEPTH_BOUND_CHARS
        assert (MAX_DEPTH in rendered) == (length >= 64)

    @pytest.mark.parametrize("length", [32, 100])
    def test_deep_exception_chain_is_bounded(self, length: int) -> None:
        rendered = inspect(_error_chain(length))

        assert rendered.startswith("[ValueError]: ")
        assert len(rendered) < DEPTH_BOUND_CHARS
        assert rendered.count("[ValueError]") == min(length, 64)

    def test_output_grows_linearly(self) -> None:
        short, long = inspect(_chain(10)), inspect(_chain(20))
        assert len(long) < 3 * len(short)

    def test_shallow_graph_not_cut(self) -> None:
        assert MAX_DEPTH not in inspect({"a": [1, {"b": User(1)}]})


class TestNodeBudget:
    def test_shared_fan_out_is_truncated(self) -> None:
        graph: object = Leaf()
        for _ in range(40):
            graph = Fork(graph)

        rendered = inspect(graph)

        assert rendered.startswith("[Fork]: ")
        assert TRUNCATED in rendered
        assert len(rendered) < 1_000_000

    def test_small_graph_not_truncated(self) -> None:
        assert TRUNCATED not in inspect({"a": [1, 2, 3], "b": User(1)})


def test_type_name() -> None:
    assert type_name(User(1)) == "User"
    assert type_name(None) == "NoneType"
