# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of introspected model artifacts.

Artifacts are stored as compact JSON files for portability and human-readability.
The format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

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

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".models.json"


def serialize(models: list[Model]) -> str:
    """Serialize a list of models to a compact JSON string."""
    return json.dumps(_models_to_dict(models), separators=(",", ":"))


def deserialize(data: str) -> list[Model]:
    """Deserialize a list of models from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed models, in their original order.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return [_model_from_dict(m) for m in obj.get("models", [])]


def write_artifact(models: list[Model], path: Path) -> None:
    """Write an artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(models), encoding="utf-8")


def read_artifact(path: Path) -> list[Model]:
    """Read and deserialize an artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _models_to_dict(models: list[Model]) -> dict[str, Any]:
    return {"v": ARTIFACT_FORMAT_VERSION, "models": [_model_to_dict(m) for m in models]}


def _model_to_dict(model: Model) -> dict[str, Any]:
    return {
        "name": model.name,
        "source": model.source,
        "fields": [_field_to_dict(f) for f in model.fields],
        "directives": [_directive_to_dict(d) for d in model.directives],
    }


def _model_from_dict(obj: dict[str, Any]) -> Model:
    return Model(
        name=obj["name"],
        source=obj["source"],
        fields=[_field_from_dict(f) for f in obj.get("fields", [])],
        directives=[_directive_from_dict(d) for d in obj.get("directives", [])],
    )


def _field_to_dict(f: Field) -> dict[str, Any]:
    return {
        "name": f.name,
        "type": _type_to_dict(f.type),
        "nonNull": f.non_null,
        "collection": f.collection,
        "directives": [_directive_to_dict(d) for d in f.directives],
    }


def _field_from_dict(obj: dict[str, Any]) -> Field:
    return Field(
        name=obj["name"],
        type=_type_from_dict(obj["type"]),
        non_null=obj.get("nonNull", False),
        collection=obj.get("collection", False),
        directives=[_directive_from_dict(d) for d in obj.get("directives", [])],
    )


def _type_to_dict(t: FieldType) -> dict[str, Any]:
    if isinstance(t, PrimitiveTypeRef):
        return {"kind": "primitive", "primitive": t.primitive.value}
    d: dict[str, Any] = {"kind": "reference", "model": t.model}
    if t.source is not None:
        d["source"] = t.source
    return d


def _type_from_dict(obj: dict[str, Any]) -> FieldType:
    kind = obj["kind"]
    if kind == "primitive":
        return PrimitiveTypeRef(primitive=PrimitiveType(obj["primitive"]))
    if kind == "reference":
        return ModelTypeRef(model=obj["model"], source=obj.get("source"))
    raise ValueError(f"Unknown field type kind: {kind!r}")


def _directive_to_dict(directive: Directive) -> dict[str, Any]:
    d: dict[str, Any] = {"name": directive.name, "args": {k: _value_to_dict(v) for k, v in directive.args.items()}}
    if directive.provider is not None:
        d["provider"] = directive.provider
    return d


def _directive_from_dict(obj: dict[str, Any]) -> Directive:
    return Directive(
        name=obj["name"],
        provider=obj.get("provider"),
        args={k: _value_from_dict(v) for k, v in obj.get("args", {}).items()},
    )


def _value_to_dict(value: Value) -> dict[str, Any]:
    if isinstance(value, NullValue):
        return {"kind": "null"}
    if isinstance(value, ListValue):
        return {"kind": "list", "values": [_value_to_dict(v) for v in value.values]}
    if isinstance(value, ObjectValue):
        return {"kind": "object", "fields": {k: _value_to_dict(v) for k, v in value.fields.items()}}
    return {"kind": value.kind, "value": value.value}


def _value_from_dict(obj: dict[str, Any]) -> Value:
    kind = obj["kind"]
    if kind == "null":
        return NullValue()
    if kind == "boolean":
        return BooleanValue(value=obj["value"])
    if kind == "string":
        return StringValue(value=obj["value"])
    if kind == "int":
        return IntValue(value=obj["value"])
    if kind == "float":
        return FloatValue(value=obj["value"])
    if kind == "list":
        return ListValue(values=[_value_from_dict(v) for v in obj["values"]])
    if kind == "object":
        return ObjectValue(fields={k: _value_from_dict(v) for k, v in obj["fields"].items()})
    raise ValueError(f"Unknown value kind: {kind!r}")
