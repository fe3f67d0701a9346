# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deserialization of SDL object type definitions into models.

Operates on syntax trees produced by :func:`graphql.parse`. Each object type
definition becomes one :class:`~gqlmodel.model.entities.Model`; any other
top-level definition aborts the whole document.

The ``@source(name: "...")`` directive is reserved: on a type it declares the
model's data source, and it is never reported among a field's directives.
"""

from __future__ import annotations

from graphql.language import (
    DirectiveNode,
    DocumentNode,
    FieldDefinitionNode,
    Node,
    ObjectTypeDefinitionNode,
    StringValueNode,
)

from gqlmodel.compiler.directives import deserialize_directive
from gqlmodel.compiler.errors import InvalidDefinitionKindError, MissingSourceError, UnsupportedDefinitionKindError
from gqlmodel.compiler.field_types import resolve_field_type
from gqlmodel.compiler.naming import plain_directive_name
from gqlmodel.compiler.observer import IntrospectionObserver
from gqlmodel.compiler.options import DeserializerOptions
from gqlmodel.model.entities import Directive, Field, Model

# ###############
# Public Interface
# ###############

SOURCE_DIRECTIVE = "source"
SOURCE_NAME_ARGUMENT = "name"


def deserialize_document(
    document: DocumentNode,
    options: DeserializerOptions,
    observer: IntrospectionObserver | None = None,
) -> list[Model]:
    """Deserialize every definition of a parsed SDL document.

    Args:
        document: The document returned by :func:`graphql.parse`.
        options: Deserializer settings.
        observer: Optional observer notified of each produced model.

    Returns:
        One model per object type definition, in document order.

    Raises:
        UnsupportedDefinitionKindError: If any top-level definition is not an
            object type definition. No models are returned in that case.
        DeserializationError: For any failure inside a definition.
    """
    models: list[Model] = []
    for definition in document.definitions:
        if not isinstance(definition, ObjectTypeDefinitionNode):
            raise UnsupportedDefinitionKindError(definition.kind)
        models.append(deserialize_model(definition, options))

    if observer is not None:
        for model in models:
            observer.on_model(model)
    return models


def deserialize_model(node: Node, options: DeserializerOptions) -> Model:
    """Deserialize an object type definition into a model.

    The model source comes from the string ``name`` argument of ``@source``,
    even when that name is empty. When the directive or its argument is
    missing, the configured default source is used.

    Raises:
        InvalidDefinitionKindError: If *node* is not an object type definition.
        MissingSourceError: If no non-empty source can be determined.
    """
    if not isinstance(node, ObjectTypeDefinitionNode):
        raise InvalidDefinitionKindError("ObjectTypeDefinition", node.kind)

    name = node.name.value
    directives = node.directives or ()

    source = _declared_source(node)
    if source is None:
        source = options.default_source_name
    if not source:
        raise MissingSourceError(name)

    fields = [deserialize_field(f, options) for f in node.fields or ()]

    return Model(
        name=name,
        source=source,
        fields=fields,
        directives=[_deserialize_model_directive(d, options) for d in directives],
    )


def deserialize_field(node: Node, options: DeserializerOptions) -> Field:
    """Deserialize a field definition.

    Raises:
        InvalidDefinitionKindError: If *node* is not a field definition.
        UnexpectedTypeShapeError: If the field type cannot be unwrapped.
    """
    if not isinstance(node, FieldDefinitionNode):
        raise InvalidDefinitionKindError("FieldDefinition", node.kind)

    resolved = resolve_field_type(node.type, options.default_source_name)

    return Field(
        name=node.name.value,
        type=resolved.type,
        non_null=resolved.non_null,
        collection=resolved.collection,
        directives=[
            deserialize_directive(d, options.directive_naming)
            for d in node.directives or ()
            if d.name.value not in _CORE_DIRECTIVES
        ],
    )


# ################
# Implementation
# ################

# Directives consumed by the model itself, never reported per field.
_CORE_DIRECTIVES: frozenset[str] = frozenset({SOURCE_DIRECTIVE})


def _deserialize_model_directive(node: DirectiveNode, options: DeserializerOptions) -> Directive:
    # Core directives carry no provider prefix under any naming convention.
    if node.name.value in _CORE_DIRECTIVES:
        return deserialize_directive(node, plain_directive_name)
    return deserialize_directive(node, options.directive_naming)


def _declared_source(node: ObjectTypeDefinitionNode) -> str | None:
    """Return the string ``name`` argument of the ``@source`` directive, if any.

    A declared empty name is returned as-is and does not fall back to the default.
    """
    for directive in node.directives or ():
        if directive.name.value != SOURCE_DIRECTIVE:
            continue
        for argument in directive.arguments or ():
            if argument.name.value == SOURCE_NAME_ARGUMENT and isinstance(argument.value, StringValueNode):
                return argument.value.value
        return None
    return None
