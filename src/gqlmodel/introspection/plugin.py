# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Adapter registering the introspector with a host framework.

The host calls each registered plugin with a shared context and drives it as
a generator: the plugin contributes its models before its first ``yield`` and
the host resumes it once all plugins have run.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Protocol

from gqlmodel.compiler.observer import IntrospectionObserver
from gqlmodel.introspection.introspector import IntrospectorOptions, introspect
from gqlmodel.model.entities import Model

# ###############
# Public Interface
# ###############


class PluginContext(Protocol):
    """Shared container passed by the host to every plugin."""

    models: list[Model]


Plugin = Callable[[PluginContext], Generator[None, None, None]]


def introspector_plugin(options: IntrospectorOptions, observer: IntrospectionObserver | None = None) -> Plugin:
    """Return a plugin appending the introspected models to ``context.models``."""

    def plugin(context: PluginContext) -> Generator[None, None, None]:
        context.models.extend(introspect(options, observer))
        yield

    return plugin
