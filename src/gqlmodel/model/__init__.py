# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model for GqlModel (models, fields, directives and values)."""

from gqlmodel.model.entities import Directive, Field, Model
from gqlmodel.model.types import FieldType, ModelTypeRef, PrimitiveType, PrimitiveTypeRef
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

__all__ = [
    # Values
    "NullValue",
    "BooleanValue",
    "StringValue",
    "IntValue",
    "FloatValue",
    "ListValue",
    "ObjectValue",
    "Value",
    # Type system
    "PrimitiveType",
    "PrimitiveTypeRef",
    "ModelTypeRef",
    "FieldType",
    # Entities
    "Directive",
    "Field",
    "Model",
]
