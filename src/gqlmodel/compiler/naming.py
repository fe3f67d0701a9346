# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Directive naming strategies.

A strategy turns the raw ``@directive`` name found in a document into a
:class:`DirectiveName`. Two conventions are supported:

* **plain**: ``@custom`` becomes ``name="custom"`` with no provider.
* **provider**: ``@sql_table`` becomes ``provider="sql", name="table"``. The
  raw name is split on its first underscore; a name without an underscore is
  rejected with :class:`~gqlmodel.compiler.errors.InvalidDirectiveNameError`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

from gqlmodel.compiler.errors import InvalidDirectiveNameError

# ###############
# Public Interface
# ###############


class DirectiveName(NamedTuple):
    """The resolved name of a directive."""

    name: str
    provider: str | None = None


DirectiveNameStrategy = Callable[[str], DirectiveName]


def plain_directive_name(raw: str) -> DirectiveName:
    """Use the raw directive name as-is."""
    return DirectiveName(name=raw)


def provider_directive_name(raw: str) -> DirectiveName:
    """Split ``<provider>_<name>`` on the first underscore.

    Raises:
        InvalidDirectiveNameError: If *raw* has no underscore separating two
            non-empty segments.
    """
    match = _PROVIDER_NAME_PATTERN.match(raw)
    if match is None:
        raise InvalidDirectiveNameError(raw)
    return DirectiveName(name=match.group(2), provider=match.group(1))


class DirectiveNaming(Enum):
    """Named selection of a directive naming strategy, used by configuration."""

    PLAIN = "plain"
    PROVIDER = "provider"

    @property
    def strategy(self) -> DirectiveNameStrategy:
        """Return the strategy function for this convention."""
        return _STRATEGIES[self]


# ################
# Implementation
# ################

_PROVIDER_NAME_PATTERN = re.compile(r"^([^_]+)_(.+)$", re.IGNORECASE)

_STRATEGIES: dict[DirectiveNaming, DirectiveNameStrategy] = {
    DirectiveNaming.PLAIN: plain_directive_name,
    DirectiveNaming.PROVIDER: provider_directive_name,
}
