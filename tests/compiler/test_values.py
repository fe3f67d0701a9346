# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for literal value deserialization."""

import pytest
from graphql import parse_value
from graphql.language import FloatValueNode, NameNode, VariableNode

from gqlmodel.compiler.errors import UnsupportedValueKindError
from gqlmodel.compiler.values import deserialize_value
from gqlmodel.model.values import (
    BooleanValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
)

# ###############
# Helpers
# ###############


def _value(source: str):
    """Parse a literal and deserialize it."""
    return deserialize_value(parse_value(source))


# ###############
# Scalars
# ###############


class TestScalars:
    def test_int(self) -> None:
        assert _value("1") == IntValue(value=1)

    def test_negative_int(self) -> None:
        assert _value("-42") == IntValue(value=-42)

    def test_float(self) -> None:
        assert _value("1.1") == FloatValue(value=1.1)

    def test_float_with_exponent(self) -> None:
        assert _value("1e3") == FloatValue(value=1000.0)

    def test_string(self) -> None:
        assert _value('"test"') == StringValue(value="test")

    def test_block_string(self) -> None:
        assert _value('"""multi"""') == StringValue(value="multi")

    def test_boolean(self) -> None:
        assert _value("true") == BooleanValue(value=True)
        assert _value("false") == BooleanValue(value=False)

    def test_enum_is_carried_as_string(self) -> None:
        assert _value("ASC") == StringValue(value="ASC")

    def test_null(self) -> None:
        assert _value("null") == NullValue()

    def test_float_node_built_by_hand(self) -> None:
        assert deserialize_value(FloatValueNode(value="2.5")) == FloatValue(value=2.5)


# ###############
# Lists and objects
# ###############


class TestComposites:
    def test_list(self) -> None:
        assert _value("[1, 2]") == ListValue(values=[IntValue(value=1), IntValue(value=2)])

    def test_empty_list(self) -> None:
        assert _value("[]") == ListValue(values=[])

    def test_object(self) -> None:
        assert _value("{test: 1}") == ObjectValue(fields={"test": IntValue(value=1)})

    def test_nested(self) -> None:
        value = _value('{a: [1, {b: "x"}], c: null}')
        assert value.to_python() == {"a": [1, {"b": "x"}], "c": None}

    def test_duplicate_object_key_keeps_last(self) -> None:
        assert _value("{a: 1, a: 2}") == ObjectValue(fields={"a": IntValue(value=2)})

    def test_to_python_mixed_list(self) -> None:
        assert _value('[true, 1.5, "s", RED, null]').to_python() == [True, 1.5, "s", "RED", None]


# ###############
# Unsupported kinds
# ###############


class TestUnsupported:
    def test_variable_is_rejected(self) -> None:
        node = VariableNode(name=NameNode(value="x"))
        with pytest.raises(UnsupportedValueKindError, match="variable") as exc_info:
            deserialize_value(node)
        assert exc_info.value.kind == "variable"
