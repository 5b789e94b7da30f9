# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the rest2ts command-line interface."""

import argparse
import sys
from pathlib import Path

from rest2ts.discovery.scanner import DiscoveryError
from rest2ts.generator.build import OutputWriteError, run
from rest2ts.utils.logging import setup_logging
from rest2ts.workspace.config import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the rest2ts CLI."""
    parser = argparse.ArgumentParser(
        prog="rest2ts",
        description="rest2ts - TypeScript interfaces for REST resources from annotated Python classes",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a default configuration file",
        description=f"Write a {CONFIG_FILE_NAME} file with the default settings.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate TypeScript interfaces",
        description=(
            "Scan the project for entity and projection classes and write one "
            "TypeScript interface per class to the output file."
        ),
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    generate_parser.add_argument(
        "--config",
        help=f"Configuration file (default: DIRECTORY/{CONFIG_FILE_NAME} if present)",
    )
    generate_parser.add_argument(
        "--output",
        help="Output file, overrides the configured path",
    )
    generate_parser.add_argument(
        "--base-package",
        help="Package to scan, overrides the configured base package",
    )
    generate_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: REST2TS_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_CONFIG_TEMPLATE = """\
# rest2ts configuration
# All keys are optional; the values below are the defaults.

# Package to scan for entity and projection classes (null scans every module).
base-package: null
# Directories put on the import path while scanning.
source-roots:
  - .
output: output.ts
link-type-name: LinkType
type-suffix: Type
entity-marker: rest2ts.discovery.markers.Entity
projection-marker: rest2ts.discovery.markers.Projection
# Deepest nesting level rendered for embedded objects (top-level properties
# are level 1). Deeper objects are left out; raise this to render longer
# chains of plain objects such as customer.address.geo.
max-depth: 2
"""


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "generate":
        return _cmd_generate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(_CONFIG_TEMPLATE, encoding="utf-8")
    print(f"Initialized rest2ts configuration at '{config_file}'.")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    setup_logging(args.log_level)
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = Path(args.config) if args.config else directory / CONFIG_FILE_NAME
    if args.config or config_file.exists():
        try:
            config = load_config(config_file)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        config = GeneratorConfig()

    if args.output:
        config.output = args.output
    if args.base_package:
        config.base_package = args.base_package

    try:
        output = run(config, directory)
    except (DiscoveryError, OutputWriteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote TypeScript interfaces to '{output}'.")
    return 0
