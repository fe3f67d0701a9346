# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field type representations for the GqlModel schema model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Primitive types understood by the data-modeling host."""

    STRING = "string"
    INT = "int"
    BOOLEAN = "boolean"
    FLOAT = "float"
    DATE = "date"
    UUID = "uuid"
    BUFFER = "buffer"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType


class ModelTypeRef(BaseModel):
    """Reference to another model by name.

    The reference is weak: the referenced model is never looked up. ``source``
    is a provisional tag taken from the configured default data source and is
    not reconciled against the target model's own source.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["reference"] = "reference"
    model: str
    source: str | None = None


# The resolved type of a field, either a primitive or a relation to another model.
FieldType = Annotated[PrimitiveTypeRef | ModelTypeRef, _Field(discriminator="kind")]
