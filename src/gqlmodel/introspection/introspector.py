# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery, reading and parsing of SDL files.

Glob patterns are expanded in order; within one pattern, files are processed
in sorted order. A file matched by several patterns is read once. Models are
returned in file-processing order.
"""

from __future__ import annotations

import glob
from dataclasses import dataclass, field
from pathlib import Path

from graphql import GraphQLError, parse

from gqlmodel.compiler.deserializer import deserialize_document
from gqlmodel.compiler.errors import DeserializationError
from gqlmodel.compiler.naming import DirectiveNameStrategy, plain_directive_name
from gqlmodel.compiler.observer import IntrospectionObserver
from gqlmodel.compiler.options import DeserializerOptions
from gqlmodel.model.entities import Model

# ###############
# Public Interface
# ###############


class IntrospectionError(Exception):
    """Raised when a schema file cannot be read, parsed or deserialized."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class IntrospectorOptions:
    """Settings for :func:`introspect`.

    Attributes:
        patterns: Glob patterns selecting the SDL files (``**`` is supported).
        encoding: Text encoding of the SDL files.
        default_source_name: Source for models without ``@source``.
        directive_naming: Strategy resolving raw directive names.
    """

    patterns: list[str] = field(default_factory=list)
    encoding: str = "utf-8"
    default_source_name: str | None = None
    directive_naming: DirectiveNameStrategy = plain_directive_name

    def deserializer_options(self) -> DeserializerOptions:
        """Return the options handed to the deserializers."""
        return DeserializerOptions(
            default_source_name=self.default_source_name,
            directive_naming=self.directive_naming,
        )


def find_schema_files(patterns: list[str]) -> list[Path]:
    """Expand glob patterns into a deduplicated list of files."""
    seen: set[Path] = set()
    files: list[Path] = []
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match)
            if not path.is_file() or path in seen:
                continue
            seen.add(path)
            files.append(path)
    return files


def introspect(options: IntrospectorOptions, observer: IntrospectionObserver | None = None) -> list[Model]:
    """Build models from every SDL file matched by *options*.

    Args:
        options: Introspector settings.
        observer: Optional observer notified per file and per model.

    Returns:
        The models of all files, concatenated in processing order. An empty
        list when no file matches.

    Raises:
        IntrospectionError: If any file cannot be read, is not valid SDL, or
            cannot be deserialized. Models of other files are discarded.
    """
    deserializer_options = options.deserializer_options()
    output: list[Model] = []
    for path in find_schema_files(options.patterns):
        if observer is not None:
            observer.on_file_start(path)
        output.extend(introspect_file(path, deserializer_options, encoding=options.encoding, observer=observer))
    return output


def introspect_file(
    path: Path,
    options: DeserializerOptions,
    *,
    encoding: str = "utf-8",
    observer: IntrospectionObserver | None = None,
) -> list[Model]:
    """Build models from a single SDL file.

    Raises:
        IntrospectionError: On read, syntax or deserialization failures.
    """
    try:
        content = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise IntrospectionError(f"Cannot read schema file '{path}': {exc}", path) from exc

    return introspect_text(content, options, observer=observer, label=str(path))


def introspect_text(
    content: str,
    options: DeserializerOptions,
    *,
    observer: IntrospectionObserver | None = None,
    label: str = "<string>",
) -> list[Model]:
    """Build models from SDL source text.

    Args:
        content: The SDL document.
        options: Deserializer settings.
        observer: Optional observer notified per model.
        label: Human-readable name used in error messages.

    Raises:
        IntrospectionError: On syntax or deserialization failures.
    """
    try:
        document = parse(content)
    except GraphQLError as exc:
        raise IntrospectionError(f"Error parsing graphql document '{label}': {exc.message}", _as_path(label)) from exc

    try:
        return deserialize_document(document, options, observer)
    except DeserializationError as exc:
        raise IntrospectionError(f"Error parsing graphql document '{label}': {exc}", _as_path(label)) from exc


# ################
# Implementation
# ################


def _as_path(label: str) -> Path | None:
    return None if label.startswith("<") else Path(label)
