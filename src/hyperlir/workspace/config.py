# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the HyperLIR project configuration file."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from hyperlir.transport.client import DEFAULT_ENDPOINT

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".hyperlir.yaml"
DEFAULT_BUILD_DIRECTORY = ".hyperlir-build"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The parsed configuration of a HyperLIR project.

    Attributes:
        endpoint: URL of the execution service that receives artifacts.
        build_directory: Relative path (from the project root) for compiled artifacts.
        timeout: Transmission timeout in seconds, or ``None`` for no timeout.
        parser_command: Command line of the external DSL parser. When empty,
            inputs must already be JSON declaration trees.
    """

    endpoint: str = DEFAULT_ENDPOINT
    build_directory: str = DEFAULT_BUILD_DIRECTORY
    timeout: float | None = None
    parser_command: list[str] = field(default_factory=list)


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse a HyperLIR configuration file.

    Args:
        path: Path to the `.hyperlir.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_project_config(text, source_label=str(path))


def parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse configuration YAML text into a ProjectConfig.

    An empty document yields the defaults.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    config = ProjectConfig()
    if "endpoint" in data:
        config.endpoint = _require_string(data, "endpoint", source_label)
    if "build-directory" in data:
        config.build_directory = _require_string(data, "build-directory", source_label)
    if "timeout" in data:
        config.timeout = _parse_timeout(data["timeout"], source_label)
    if "parser-command" in data:
        config.parser_command = _parse_command(data["parser-command"], source_label)
    return config


def default_config_text() -> str:
    """Return the content written by ``hyperlir init``."""
    return (
        "# HyperLIR project configuration\n"
        f"endpoint: {DEFAULT_ENDPOINT}\n"
        f"build-directory: {DEFAULT_BUILD_DIRECTORY}\n"
        "# timeout: 30\n"
        "# parser-command: [node, parse.js]\n"
    )


# ################
# Implementation
# ################


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ConfigError if it has another type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _parse_timeout(value: object, source_label: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ConfigError(f"{source_label}: 'timeout' must be a positive number")
    return float(value)


def _parse_command(value: object, source_label: str) -> list[str]:
    """Accept a command as a list of strings or a single shell-quoted string."""
    if isinstance(value, str):
        try:
            return shlex.split(value)
        except ValueError as exc:
            raise ConfigError(f"{source_label}: invalid 'parser-command': {exc}") from exc
    if isinstance(value, list) and all(isinstance(part, str) for part in value):
        return list(value)
    raise ConfigError(f"{source_label}: 'parser-command' must be a string or a list of strings")
