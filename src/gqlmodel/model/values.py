# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Literal values carried by directive arguments."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class NullValue(BaseModel):
    """The ``null`` literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["null"] = "null"

    def to_python(self) -> None:
        return None


class BooleanValue(BaseModel):
    """A ``true`` or ``false`` literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"
    value: bool

    def to_python(self) -> bool:
        return self.value


class StringValue(BaseModel):
    """A string literal. Enum literals are carried as strings as well."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str

    def to_python(self) -> str:
        return self.value


class IntValue(BaseModel):
    """An integer literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["int"] = "int"
    value: int

    def to_python(self) -> int:
        return self.value


class FloatValue(BaseModel):
    """A floating-point literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["float"] = "float"
    value: float

    def to_python(self) -> float:
        return self.value


class ListValue(BaseModel):
    """An ordered list of values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    values: list[Value] = _Field(default_factory=list)

    def to_python(self) -> list[Any]:
        return [v.to_python() for v in self.values]


class ObjectValue(BaseModel):
    """A keyed object of values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    fields: dict[str, Value] = _Field(default_factory=dict)

    def to_python(self) -> dict[str, Any]:
        return {k: v.to_python() for k, v in self.fields.items()}


# A literal value: one of the scalar, list, or object variants.
Value = Annotated[
    NullValue | BooleanValue | StringValue | IntValue | FloatValue | ListValue | ObjectValue,
    _Field(discriminator="kind"),
]


# Resolve forward references for the recursive variants.
ListValue.model_rebuild()
ObjectValue.model_rebuild()
