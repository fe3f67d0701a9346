# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models, fields and directives produced from SDL object type definitions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from gqlmodel.model.types import FieldType
from gqlmodel.model.values import Value

# ###############
# Public Interface
# ###############


class Directive(BaseModel):
    """An ``@directive`` annotation attached to a model or a field.

    ``provider`` is only populated when directive names are split into a
    ``<provider>_<name>`` pair.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    provider: str | None = None
    args: dict[str, Value] = _Field(default_factory=dict)

    def plain_args(self) -> dict[str, object]:
        """Return the arguments as untagged Python values."""
        return {k: v.to_python() for k, v in self.args.items()}


class Field(BaseModel):
    """A typed field of a model.

    Only the outer non-null and list wrappers are recorded: ``[T!]`` and
    ``[T]`` produce the same field.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    non_null: bool = False
    collection: bool = False
    directives: list[Directive] = _Field(default_factory=list)


class Model(BaseModel):
    """A model built from one object type definition."""

    model_config = ConfigDict(frozen=True)

    name: str
    source: str
    fields: list[Field] = _Field(default_factory=list)
    directives: list[Directive] = _Field(default_factory=list)

    def field(self, name: str) -> Field | None:
        """Return the field called *name*, or ``None``."""
        for f in self.fields:
            if f.name == name:
                return f
        return None
