# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for rest2ts."""

from rest2ts.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT,
    ConfigError,
    GeneratorConfig,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_OUTPUT",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
    "parse_config",
]
