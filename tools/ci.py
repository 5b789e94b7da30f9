#!/usr/bin/env python3
# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the rest2ts CI checks locally: format, lint, tests with coverage, and build."""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=rest2ts", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run rest2ts CI checks")
    parser.add_argument("--skip-build", action="store_true", help="Do not build the distribution")
    args = parser.parse_args()

    steps = [step for step in STEPS if not (args.skip_build and step[0] == "Build")]
    results = [_run_step(name, cmd) for name, cmd in steps]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_SEPARATOR = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue(name))
    print(chalk.blue(_SEPARATOR))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).parent.parent)
    return name, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_SEPARATOR))
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main())
