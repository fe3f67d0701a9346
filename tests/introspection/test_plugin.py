# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the host plugin adapter."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from gqlmodel.introspection.introspector import IntrospectionError, IntrospectorOptions
from gqlmodel.introspection.plugin import introspector_plugin
from gqlmodel.model.entities import Model

DATA_DIR = Path(__file__).parent.parent / "data"


@dataclass
class _Context:
    models: list[Model] = field(default_factory=list)


def _run_host(*plugins) -> _Context:
    """Drive plugins the way a host does: start each, then resume each to completion."""
    context = _Context()
    running = [p(context) for p in plugins]
    for gen in running:
        next(gen)
    for gen in running:
        with pytest.raises(StopIteration):
            next(gen)
    return context


def test_plugin_appends_models() -> None:
    options = IntrospectorOptions(patterns=[str(DATA_DIR / "simple-model.graphql")])
    context = _run_host(introspector_plugin(options))
    assert [m.name for m in context.models] == ["Test"]


def test_plugins_share_context() -> None:
    first = introspector_plugin(IntrospectorOptions(patterns=[str(DATA_DIR / "simple-model.graphql")]))
    second = introspector_plugin(
        IntrospectorOptions(patterns=[str(DATA_DIR / "simple-relations.graphql")], default_source_name="main")
    )
    context = _run_host(first, second)
    assert [m.name for m in context.models] == ["Test", "Author", "Post"]


def test_plugin_is_lazy_and_propagates_errors() -> None:
    options = IntrospectorOptions(patterns=[str(DATA_DIR / "invalid" / "enum-definition.graphql")])
    gen = introspector_plugin(options)(_Context())
    with pytest.raises(IntrospectionError):
        next(gen)
