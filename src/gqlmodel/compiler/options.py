# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Options consumed by the deserializers."""

from __future__ import annotations

from dataclasses import dataclass

from gqlmodel.compiler.naming import DirectiveNameStrategy, plain_directive_name

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DeserializerOptions:
    """Settings shared by the model, field and directive deserializers.

    Attributes:
        default_source_name: Source assigned to models that do not declare a
            ``@source(name: ...)`` directive. Also used as the provisional
            source of relation field types.
        directive_naming: Strategy resolving raw directive names.
    """

    default_source_name: str | None = None
    directive_naming: DirectiveNameStrategy = plain_directive_name
