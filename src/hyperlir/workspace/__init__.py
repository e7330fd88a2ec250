# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for HyperLIR."""

from hyperlir.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_BUILD_DIRECTORY,
    ConfigError,
    ProjectConfig,
    default_config_text,
    load_project_config,
    parse_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_BUILD_DIRECTORY",
    "ConfigError",
    "ProjectConfig",
    "default_config_text",
    "load_project_config",
    "parse_project_config",
]
