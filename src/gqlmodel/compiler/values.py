# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deserialization of literal value nodes."""

from graphql.language import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
)

from gqlmodel.compiler.errors import UnsupportedValueKindError
from gqlmodel.model.values import (
    BooleanValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
)

# ###############
# Public Interface
# ###############


def deserialize_value(node: ValueNode) -> Value:
    """Convert a literal value node into a :data:`~gqlmodel.model.values.Value`.

    Enum literals are carried as strings. Repeated keys in an object literal
    keep the last value.

    Raises:
        UnsupportedValueKindError: For variables and any other non-literal node.
    """
    if isinstance(node, BooleanValueNode):
        return BooleanValue(value=node.value)
    if isinstance(node, (EnumValueNode, StringValueNode)):
        return StringValue(value=node.value)
    if isinstance(node, FloatValueNode):
        return FloatValue(value=float(node.value))
    if isinstance(node, IntValueNode):
        return IntValue(value=int(node.value, 10))
    if isinstance(node, NullValueNode):
        return NullValue()
    if isinstance(node, ObjectValueNode):
        return _deserialize_object(node)
    if isinstance(node, ListValueNode):
        return ListValue(values=[deserialize_value(v) for v in node.values])
    raise UnsupportedValueKindError(node.kind)


# ################
# Implementation
# ################


def _deserialize_object(node: ObjectValueNode) -> ObjectValue:
    fields: dict[str, Value] = {}
    for field in node.fields:
        fields[field.name.value] = deserialize_value(field.value)
    return ObjectValue(fields=fields)
