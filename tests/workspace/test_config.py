# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the project configuration module."""

from pathlib import Path

import pytest

from gqlmodel.compiler.naming import DirectiveNaming, plain_directive_name, provider_directive_name
from gqlmodel.workspace import (
    CONFIG_FILE_NAME,
    ConfigError,
    ProjectConfig,
    default_config_text,
    load_config,
    parse_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only a path uses the defaults."""
    config = load_config(_write_config(tmp_path, "path: schema/*.graphql\n"))

    assert isinstance(config, ProjectConfig)
    assert config.path == ["schema/*.graphql"]
    assert config.encoding == "utf-8"
    assert config.default_source is None
    assert config.directive_naming == DirectiveNaming.PLAIN
    assert config.output is None


def test_full_config(tmp_path: Path) -> None:
    """All keys are read, including the hyphenated ones."""
    content = """\
path:
  - a/*.graphql
  - b/**/*.graphql
encoding: latin-1
default-source: main
directive-naming: provider
output: build/models.json
"""
    config = load_config(_write_config(tmp_path, content))

    assert config.path == ["a/*.graphql", "b/**/*.graphql"]
    assert config.encoding == "latin-1"
    assert config.default_source == "main"
    assert config.directive_naming == DirectiveNaming.PROVIDER
    assert config.output == "build/models.json"


def test_to_options_resolves_relative_patterns(tmp_path: Path) -> None:
    """Relative patterns are anchored at the given root; absolute ones are kept."""
    config = parse_config("path: [schema/*.graphql, /abs/*.graphql]\ndefault-source: db\n")
    options = config.to_options(tmp_path)

    assert options.patterns == [str(tmp_path / "schema/*.graphql"), "/abs/*.graphql"]
    assert options.default_source_name == "db"
    assert options.directive_naming is plain_directive_name


def test_to_options_provider_naming(tmp_path: Path) -> None:
    config = parse_config("path: x\ndirective-naming: provider\n")
    assert config.to_options(tmp_path).directive_naming is provider_directive_name


def test_default_config_text_is_loadable() -> None:
    config = parse_config(default_config_text())
    assert config.path == ["schema/**/*.graphql"]


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "path: [unclosed\n"))


def test_not_a_mapping() -> None:
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        parse_config("- a\n- b\n")


def test_missing_path() -> None:
    with pytest.raises(ConfigError, match="Invalid config"):
        parse_config("encoding: utf-8\n")


def test_unknown_key() -> None:
    with pytest.raises(ConfigError):
        parse_config("path: x\nunknown: 1\n")


def test_unknown_naming() -> None:
    with pytest.raises(ConfigError):
        parse_config("path: x\ndirective-naming: camel\n")


def test_unknown_encoding() -> None:
    with pytest.raises(ConfigError, match="unknown encoding 'utf-99'"):
        parse_config("path: x\nencoding: utf-99\n")
