# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for GqlModel."""

from gqlmodel.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ProjectConfig,
    default_config_text,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ProjectConfig",
    "default_config_text",
    "load_config",
    "parse_config",
]
