"""Unit tests for debug/formatters.py — rendering of the standard Python types."""

from __future__ import annotations

import enum
from array import array
from collections import OrderedDict, UserList, UserString, deque
from collections.abc import Set
from dataclasses import dataclass, field
from typing import NamedTuple

from todebug import to_debug
from todebug.debug.formatters import format_float, format_str


class Color(enum.Enum):
    Red = 1
    Green = 2


class Level(enum.IntEnum):
    Low = 1


class Point(NamedTuple):
    x: int
    y: int


class Empty(NamedTuple):
    pass


@dataclass
class Unit:
    pass


@dataclass
class Account:
    owner: str
    password: str = field(repr=False)


@dataclass
class Secret:
    token: str = field(repr=False)


@dataclass
class Node:
    value: int
    children: list = field(default_factory=list)


class Plain:
    def __init__(self, name, age):
        self.name = name
        self._age = age


class Group(Set):
    def __init__(self):
        self.members = []

    def __contains__(self, item):
        return any(item is m for m in self.members)

    def __iter__(self):
        return iter(self.members)

    def __len__(self):
        return len(self.members)


class WithRepr:
    def __repr__(self):
        return "WithRepr<custom>"


# ============================================================================
# Scalars
# ============================================================================


class TestScalars:
    def test_none_and_bools(self):
        assert to_debug(None) == "None"
        assert to_debug(True) == "true"
        assert to_debug(False) == "false"

    def test_ints(self):
        assert to_debug(0) == "0"
        assert to_debug(-42) == "-42"
        assert to_debug(10**20) == "100000000000000000000"

    def test_enum_members_render_by_name(self):
        assert to_debug(Color.Red) == "Red"
        assert to_debug(Level.Low) == "Low"

    def test_floats(self):
        assert format_float(1.0) == "1.0"
        assert format_float(0.1) == "0.1"
        assert format_float(-0.0) == "-0.0"
        assert format_float(1e16) == "1e16"
        assert format_float(1.5e16) == "1.5e16"
        assert format_float(1e-5) == "1e-5"
        assert format_float(2.5e-7) == "2.5e-7"

    def test_non_finite_floats(self):
        assert format_float(float("inf")) == "inf"
        assert format_float(float("-inf")) == "-inf"
        assert format_float(float("nan")) == "NaN"

    def test_bytes_render_as_list(self):
        assert to_debug(b"hi") == "[104, 105]"
        assert to_debug(bytearray()) == "[]"


class TestStrings:
    def test_quoted(self):
        assert format_str("Joseph") == '"Joseph"'

    def test_escapes(self):
        assert format_str('say "hi"') == '"say \\"hi\\""'
        assert format_str("a\\b") == '"a\\\\b"'
        assert format_str("line\nnext\ttab\r") == '"line\\nnext\\ttab\\r"'
        assert format_str("\0") == '"\\0"'

    def test_single_quote_not_escaped(self):
        assert format_str("it's") == '"it\'s"'

    def test_non_printable_as_unicode_escape(self):
        assert format_str("\x07") == '"\\u{7}"'
        assert format_str("\x1b[0m") == '"\\u{1b}[0m"'

    def test_printable_unicode_kept(self):
        assert format_str("Zūm ✓") == '"Zūm ✓"'


# ============================================================================
# Structs and tuples
# ============================================================================


class TestStructs:
    def test_unit_dataclass(self):
        assert to_debug(Unit()) == "Unit"

    def test_hidden_fields_make_struct_non_exhaustive(self):
        assert to_debug(Account("ann", "hunter2")) == 'Account { owner: "ann", .. }'
        assert to_debug(Secret("t")) == "Secret { .. }"

    def test_hidden_fields_pretty(self):
        assert to_debug(Account("ann", "x"), pretty=True) == (
            'Account {\n'
            '    owner: "ann",\n'
            '    ..\n'
            '}'
        )

    def test_namedtuple(self):
        assert to_debug(Point(1, 2)) == "Point(1, 2)"
        assert to_debug(Empty()) == "Empty"

    def test_anonymous_tuples(self):
        assert to_debug((1,)) == "(1,)"
        assert to_debug((1, "a")) == '(1, "a")'

    def test_one_tuple_pretty_has_no_extra_comma(self):
        assert to_debug((1,), pretty=True) == "(\n    1,\n)"

    def test_plain_object_exposes_private_attributes(self):
        assert to_debug(Plain("Joseph", 20)) == 'Plain { name: "Joseph", _age: 20 }'

    def test_custom_repr_used_verbatim(self):
        assert to_debug(WithRepr()) == "WithRepr<custom>"
        assert to_debug([WithRepr()]) == "[WithRepr<custom>]"

    def test_classes_use_repr(self):
        assert to_debug(Unit) == repr(Unit)


# ============================================================================
# Containers
# ============================================================================


class TestContainers:
    def test_list_and_deque(self):
        assert to_debug([1, 2, 3]) == "[1, 2, 3]"
        assert to_debug(deque(["a"])) == '["a"]'

    def test_other_sequences_render_as_lists(self):
        assert to_debug(UserList(["a", 1])) == '["a", 1]'
        assert to_debug(array("i", [1, 2])) == "[1, 2]"

    def test_user_string_is_quoted_text(self):
        assert to_debug(UserString("it's")) == '"it\'s"'
        assert to_debug([UserString("a\nb")]) == '["a\\nb"]'

    def test_range_keeps_repr(self):
        assert to_debug(range(3)) == "range(0, 3)"

    def test_mapping(self):
        assert to_debug({"a": 1, "b": [True]}) == '{"a": 1, "b": [true]}'
        assert to_debug(OrderedDict([(1, None)])) == "{1: None}"

    def test_sets(self):
        assert to_debug({7}) == "{7}"
        assert to_debug(frozenset()) == "{}"

    def test_nested_pretty(self):
        value = Node(1, [Node(2)])
        assert to_debug(value, pretty=True) == (
            "Node {\n"
            "    value: 1,\n"
            "    children: [\n"
            "        Node {\n"
            "            value: 2,\n"
            "            children: [],\n"
            "        },\n"
            "    ],\n"
            "}"
        )

    def test_map_pretty(self):
        assert to_debug({"a": [1]}, pretty=True) == (
            '{\n'
            '    "a": [\n'
            '        1,\n'
            '    ],\n'
            '}'
        )


class TestRecursion:
    def test_self_referencing_list(self):
        items = [1]
        items.append(items)
        assert to_debug(items) == "[1, [...]]"

    def test_self_referencing_dict(self):
        data = {}
        data["self"] = data
        assert to_debug(data) == '{"self": {...}}'

    def test_cycle_through_dataclass(self):
        root = Node(1)
        root.children.append(root)
        assert to_debug(root) == "Node { value: 1, children: [Node { .. }] }"

    def test_shared_value_is_not_a_cycle(self):
        """The same object appearing twice side by side renders both times."""
        shared = [1]
        assert to_debug([shared, shared]) == "[[1], [1]]"

    def test_self_referencing_set(self):
        group = Group()
        group.members.append(group)
        assert to_debug(group) == "{{...}}"

    def test_cycle_through_tuple(self):
        items = []
        pair = (1, items)
        items.append(pair)
        assert to_debug(pair) == "(1, [(...)])"

    def test_cycle_through_named_tuple(self):
        items = []
        point = Point(items, 0)
        items.append(point)
        assert to_debug(point) == "Point([Point(..)], 0)"

    def test_self_referencing_user_list(self):
        items = UserList([1])
        items.append(items)
        assert to_debug(items) == "[1, [...]]"
