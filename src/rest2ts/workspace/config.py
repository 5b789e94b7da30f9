# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the rest2ts configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from rest2ts.discovery.markers import DEFAULT_ENTITY_MARKER, DEFAULT_PROJECTION_MARKER
from rest2ts.generator.emitter import DEFAULT_LINK_TYPE_NAME, DEFAULT_MAX_DEPTH, DEFAULT_TYPE_SUFFIX

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".rest2ts.yaml"
DEFAULT_OUTPUT = "output.ts"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """The parsed configuration of one generator run.

    Attributes:
        base_package: Dotted name of the package to scan; None scans every
            module found in the source roots.
        output: Output file path, relative to the project directory.
        link_type_name: Name of the generated link interface.
        type_suffix: Suffix appended to every generated interface name.
        source_roots: Directories (relative to the project directory) put on
            ``sys.path`` while scanning.
        entity_marker: Dotted name of the entity marker, or None.
        projection_marker: Dotted name of the projection marker, or None.
        max_depth: Deepest property level rendered inside an interface.
    """

    base_package: str | None = None
    output: str = DEFAULT_OUTPUT
    link_type_name: str = DEFAULT_LINK_TYPE_NAME
    type_suffix: str = DEFAULT_TYPE_SUFFIX
    source_roots: list[str] = field(default_factory=lambda: ["."])
    entity_marker: str | None = DEFAULT_ENTITY_MARKER
    projection_marker: str | None = DEFAULT_PROJECTION_MARKER
    max_depth: int = DEFAULT_MAX_DEPTH


def load_config(path: Path) -> GeneratorConfig:
    """Load and parse a rest2ts configuration file.

    Args:
        path: Path to the `.rest2ts.yaml` file.

    Returns:
        A GeneratorConfig with defaults for every key the file omits.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    An empty document yields the default configuration.

    Raises:
        ConfigError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = GeneratorConfig()
    config.base_package = _optional_string(data, "base-package", config.base_package, source_label)
    config.output = _string(data, "output", config.output, source_label)
    config.link_type_name = _string(data, "link-type-name", config.link_type_name, source_label)
    config.type_suffix = _string(data, "type-suffix", config.type_suffix, source_label)
    config.entity_marker = _optional_string(data, "entity-marker", config.entity_marker, source_label)
    config.projection_marker = _optional_string(data, "projection-marker", config.projection_marker, source_label)

    if "source-roots" in data:
        roots = data["source-roots"]
        if not isinstance(roots, list) or not all(isinstance(r, str) for r in roots):
            raise ConfigError(f"{source_label}: 'source-roots' must be a list of strings")
        config.source_roots = roots

    if "max-depth" in data:
        max_depth = data["max-depth"]
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 1:
            raise ConfigError(f"{source_label}: 'max-depth' must be a positive integer")
        config.max_depth = max_depth

    _validate(config, source_label)
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset(
    {
        "base-package",
        "output",
        "link-type-name",
        "type-suffix",
        "source-roots",
        "entity-marker",
        "projection-marker",
        "max-depth",
    }
)


def _string(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional string field from a mapping, falling back to *default*."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _optional_string(mapping: dict[str, object], key: str, default: str | None, source_label: str) -> str | None:
    """Like :func:`_string`, but an explicit ``null`` disables the setting."""
    if key in mapping and mapping[key] is None:
        return None
    return _string(mapping, key, default, source_label) if key in mapping else default


def _validate(config: GeneratorConfig, source_label: str) -> None:
    if not config.link_type_name.isidentifier():
        raise ConfigError(f"{source_label}: 'link-type-name' must be a valid identifier")
    if config.type_suffix and not f"_{config.type_suffix}".isidentifier():
        raise ConfigError(f"{source_label}: 'type-suffix' may only contain identifier characters")
    if not config.output:
        raise ConfigError(f"{source_label}: 'output' must not be empty")
