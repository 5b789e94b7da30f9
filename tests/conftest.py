# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the rest2ts test suite."""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# ###############
# Fixtures
# ###############


@pytest.fixture(autouse=True)
def _reset_rest2ts_logger() -> Iterator[None]:
    """Undo setup_logging() so records keep propagating to caplog."""
    yield
    logger = logging.getLogger("rest2ts")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_package(tmp_path: Path) -> Iterator[Callable[[dict[str, str]], tuple[Path, str]]]:
    """Write a uniquely named package below ``tmp_path/src`` and return (source root, package name).

    File contents may use ``{pkg}`` as a placeholder for the package name.
    Imported modules are removed from ``sys.modules`` after the test.
    """
    created: list[str] = []
    root = tmp_path / "src"

    def _make(files: dict[str, str]) -> tuple[Path, str]:
        name = f"pkg_{uuid.uuid4().hex[:10]}"
        created.append(name)
        for rel, content in files.items():
            path = root / name / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content.replace("{pkg}", name), encoding="utf-8")
        return root, name

    yield _make

    for module in list(sys.modules):
        if any(module == name or module.startswith(f"{name}.") for name in created):
            del sys.modules[module]
