# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of field type nodes into nullability, collection and leaf type.

The unwrap runs in a fixed order:

1. An outer ``NonNullType`` marks the field as non-null.
2. A ``ListType`` marks the field as a collection. A ``NonNullType`` directly
   inside the list is unwrapped; element nullability is not recorded.
3. What remains must be a ``NamedType``.
"""

from __future__ import annotations

from dataclasses import dataclass

from graphql.language import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from gqlmodel.compiler.errors import UnexpectedTypeShapeError
from gqlmodel.model.types import FieldType, ModelTypeRef, PrimitiveType, PrimitiveTypeRef

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ResolvedFieldType:
    """Outcome of unwrapping a field type node."""

    non_null: bool
    collection: bool
    type: FieldType


def resolve_field_type(node: TypeNode, default_source_name: str | None = None) -> ResolvedFieldType:
    """Unwrap a field type node.

    Args:
        node: The type node of a field definition.
        default_source_name: Provisional source for relation types.

    Raises:
        UnexpectedTypeShapeError: If the node is not a named type once the
            non-null and list wrappers are removed (e.g. ``[[Int]]``).
    """
    non_null = isinstance(node, NonNullTypeNode)
    if isinstance(node, NonNullTypeNode):
        node = node.type

    collection = isinstance(node, ListTypeNode)
    if isinstance(node, ListTypeNode):
        node = node.type
        if isinstance(node, NonNullTypeNode):
            node = node.type

    if not isinstance(node, NamedTypeNode):
        raise UnexpectedTypeShapeError(node.kind)

    return ResolvedFieldType(
        non_null=non_null,
        collection=collection,
        type=map_scalar(node.name.value, default_source_name),
    )


def map_scalar(name: str, default_source_name: str | None = None) -> FieldType:
    """Map a named type to a primitive, or to a reference to another model."""
    primitive = _SCALAR_TYPES.get(name)
    if primitive is not None:
        return PrimitiveTypeRef(primitive=primitive)
    # TODO: attribute the relation to the target model's source once models are resolved together.
    return ModelTypeRef(model=name, source=default_source_name)


# ################
# Implementation
# ################

_SCALAR_TYPES: dict[str, PrimitiveType] = {
    "String": PrimitiveType.STRING,
    "Int": PrimitiveType.INT,
    "Boolean": PrimitiveType.BOOLEAN,
    "Float": PrimitiveType.FLOAT,
    "Date": PrimitiveType.DATE,
    "ID": PrimitiveType.UUID,
    "Buffer": PrimitiveType.BUFFER,
}
