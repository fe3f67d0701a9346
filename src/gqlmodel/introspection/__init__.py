# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""File discovery and host integration around the deserialization engine."""

from gqlmodel.introspection.introspector import (
    IntrospectionError,
    IntrospectorOptions,
    find_schema_files,
    introspect,
    introspect_file,
    introspect_text,
)
from gqlmodel.introspection.plugin import Plugin, PluginContext, introspector_plugin

__all__ = [
    "IntrospectionError",
    "IntrospectorOptions",
    "find_schema_files",
    "introspect",
    "introspect_file",
    "introspect_text",
    "Plugin",
    "PluginContext",
    "introspector_plugin",
]
