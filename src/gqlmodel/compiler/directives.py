# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deserialization of ``@directive`` annotations."""

from graphql.language import DirectiveNode

from gqlmodel.compiler.naming import DirectiveNameStrategy, plain_directive_name
from gqlmodel.compiler.values import deserialize_value
from gqlmodel.model.entities import Directive
from gqlmodel.model.values import Value

# ###############
# Public Interface
# ###############


def deserialize_directive(node: DirectiveNode, naming: DirectiveNameStrategy = plain_directive_name) -> Directive:
    """Convert a directive node into a :class:`Directive`.

    Args:
        node: The directive node.
        naming: Strategy resolving the raw name into name and provider.

    Returns:
        The directive with its arguments deserialized. A repeated argument name
        keeps the last value.

    Raises:
        InvalidDirectiveNameError: If the naming strategy rejects the name.
        UnsupportedValueKindError: If an argument value is not a literal.
    """
    resolved = naming(node.name.value)
    args: dict[str, Value] = {}
    for argument in node.arguments or ():
        args[argument.name.value] = deserialize_value(argument.value)
    return Directive(name=resolved.name, provider=resolved.provider, args=args)
