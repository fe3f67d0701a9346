# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deserialization engine turning SDL syntax trees into models."""

from gqlmodel.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from gqlmodel.compiler.deserializer import deserialize_document, deserialize_field, deserialize_model
from gqlmodel.compiler.directives import deserialize_directive
from gqlmodel.compiler.errors import (
    DeserializationError,
    InvalidDefinitionKindError,
    InvalidDirectiveNameError,
    MissingSourceError,
    UnexpectedTypeShapeError,
    UnsupportedDefinitionKindError,
    UnsupportedValueKindError,
)
from gqlmodel.compiler.field_types import ResolvedFieldType, map_scalar, resolve_field_type
from gqlmodel.compiler.naming import (
    DirectiveName,
    DirectiveNameStrategy,
    DirectiveNaming,
    plain_directive_name,
    provider_directive_name,
)
from gqlmodel.compiler.observer import IntrospectionObserver, LoggingObserver, NullObserver
from gqlmodel.compiler.options import DeserializerOptions
from gqlmodel.compiler.values import deserialize_value

__all__ = [
    "deserialize_value",
    "deserialize_directive",
    "resolve_field_type",
    "map_scalar",
    "ResolvedFieldType",
    "deserialize_field",
    "deserialize_model",
    "deserialize_document",
    "DeserializerOptions",
    "DirectiveName",
    "DirectiveNameStrategy",
    "DirectiveNaming",
    "plain_directive_name",
    "provider_directive_name",
    "IntrospectionObserver",
    "LoggingObserver",
    "NullObserver",
    "DeserializationError",
    "UnsupportedDefinitionKindError",
    "InvalidDefinitionKindError",
    "UnexpectedTypeShapeError",
    "InvalidDirectiveNameError",
    "MissingSourceError",
    "UnsupportedValueKindError",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
