# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for field type unwrapping and scalar mapping."""

import pytest
from graphql import parse_type

from gqlmodel.compiler.errors import UnexpectedTypeShapeError
from gqlmodel.compiler.field_types import ResolvedFieldType, map_scalar, resolve_field_type
from gqlmodel.model.types import ModelTypeRef, PrimitiveType, PrimitiveTypeRef

# ###############
# Nullability and collections
# ###############

_UUID = PrimitiveTypeRef(primitive=PrimitiveType.UUID)


@pytest.mark.parametrize(
    ("source", "non_null", "collection"),
    [
        ("ID", False, False),
        ("ID!", True, False),
        ("[ID]", False, True),
        ("[ID]!", True, True),
        ("[ID!]", False, True),
        ("[ID!]!", True, True),
    ],
)
def test_wrappers(source: str, non_null: bool, collection: bool) -> None:
    assert resolve_field_type(parse_type(source)) == ResolvedFieldType(
        non_null=non_null,
        collection=collection,
        type=_UUID,
    )


def test_nested_list_is_rejected() -> None:
    with pytest.raises(UnexpectedTypeShapeError) as exc_info:
        resolve_field_type(parse_type("[[Int]]"))
    assert exc_info.value.kind == "list_type"


def test_relation_carries_default_source() -> None:
    resolved = resolve_field_type(parse_type("[User]!"), default_source_name="main")
    assert resolved.type == ModelTypeRef(model="User", source="main")
    assert resolved.non_null
    assert resolved.collection


# ###############
# Scalar mapping
# ###############


@pytest.mark.parametrize(
    ("name", "primitive"),
    [
        ("String", PrimitiveType.STRING),
        ("Int", PrimitiveType.INT),
        ("Boolean", PrimitiveType.BOOLEAN),
        ("Float", PrimitiveType.FLOAT),
        ("Date", PrimitiveType.DATE),
        ("ID", PrimitiveType.UUID),
        ("Buffer", PrimitiveType.BUFFER),
    ],
)
def test_builtin_scalars(name: str, primitive: PrimitiveType) -> None:
    assert map_scalar(name) == PrimitiveTypeRef(primitive=primitive)


def test_unknown_name_is_relation() -> None:
    assert map_scalar("Author") == ModelTypeRef(model="Author", source=None)


def test_scalar_names_are_case_sensitive() -> None:
    assert map_scalar("string") == ModelTypeRef(model="string")
