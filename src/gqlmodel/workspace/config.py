# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the GqlModel project configuration file."""

from __future__ import annotations

import codecs
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gqlmodel.compiler.naming import DirectiveNaming
from gqlmodel.introspection.introspector import IntrospectorOptions

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".gqlmodel.yaml"


class ConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


class ProjectConfig(BaseModel):
    """The parsed configuration of a GqlModel project.

    Attributes:
        path: Glob patterns selecting the SDL files, relative to the
            configuration file's directory unless absolute.
        encoding: Text encoding of the SDL files.
        default_source: Source for models without a ``@source`` directive.
        directive_naming: Directive naming convention.
        output: Optional artifact path written by ``gqlmodel introspect``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    path: list[str]
    encoding: str = "utf-8"
    default_source: str | None = Field(alias="default-source", default=None)
    directive_naming: DirectiveNaming = Field(alias="directive-naming", default=DirectiveNaming.PLAIN)
    output: str | None = None

    @field_validator("path", mode="before")
    @classmethod
    def split_single_pattern(cls, value: object) -> object:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding '{value}'") from None
        return value

    def to_options(self, root: Path) -> IntrospectorOptions:
        """Build introspector options, resolving patterns against *root*."""
        return IntrospectorOptions(
            patterns=[p if os.path.isabs(p) else str(root / p) for p in self.path],
            encoding=self.encoding,
            default_source_name=self.default_source,
            directive_naming=self.directive_naming.strategy,
        )


def load_config(path: Path) -> ProjectConfig:
    """Load and validate a project configuration file.

    Args:
        path: Path to the `.gqlmodel.yaml` file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML, or
            does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse configuration YAML text into a ProjectConfig.

    Raises:
        ConfigError: If the YAML is invalid or the configuration is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {source_label}: {exc}") from exc


def default_config_text(pattern: str = "schema/**/*.graphql") -> str:
    """Return the content of a starter configuration file."""
    data = {
        "path": pattern,
        "encoding": "utf-8",
        "directive-naming": DirectiveNaming.PLAIN.value,
    }
    return "# GqlModel project configuration\n" + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
