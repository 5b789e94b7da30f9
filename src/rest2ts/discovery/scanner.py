# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery of candidate classes below a base package.

Source roots are placed on ``sys.path`` for the duration of the scan, every
module below the base package is imported, and the classes defined in those
modules that carry the entity or projection marker become candidates. Broken
source roots and modules that fail to import are reported and skipped so one
bad location does not abort the run.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Any

from rest2ts.discovery.markers import has_marker, load_marker
from rest2ts.model.descriptors import CandidateSet, ClassDescriptor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DiscoveryError(Exception):
    """Raised when the configured base package cannot be imported."""


def resolve_source_roots(roots: Sequence[str | Path], base_dir: Path) -> list[Path]:
    """Resolve *roots* against *base_dir*, dropping entries that are not directories."""
    resolved: list[Path] = []
    for root in roots:
        try:
            path = (base_dir / root).resolve()
        except (OSError, RuntimeError, ValueError) as exc:
            logger.warning("Ignoring source root '%s': %s", root, exc)
            continue
        if not path.is_dir():
            logger.warning("Ignoring source root '%s': not a directory", path)
            continue
        if path not in resolved:
            resolved.append(path)
            logger.debug("Added to search path: %s", path)
    return resolved


def discover_candidates(
    source_roots: Sequence[Path],
    *,
    base_package: str | None = None,
    entity_marker: str | None = None,
    projection_marker: str | None = None,
) -> CandidateSet:
    """Find all entity and projection classes reachable from *source_roots*.

    Args:
        source_roots: Directories placed on ``sys.path`` while scanning.
        base_package: Dotted name of the package to scan. When None, every
            top-level module and package found in *source_roots* is scanned.
        entity_marker: Dotted name of the entity marker, or None to disable.
        projection_marker: Dotted name of the projection marker, or None to disable.

    Returns:
        The candidate classes ordered by simple name. When two candidates share
        a simple name, the first one found is kept.

    Raises:
        DiscoveryError: If *base_package* cannot be imported.
    """
    entity_cls = load_marker(entity_marker) if entity_marker else None
    projection_cls = load_marker(projection_marker) if projection_marker else None

    by_name: dict[str, ClassDescriptor] = {}
    with _search_path(source_roots):
        for module in _iter_modules(source_roots, base_package):
            for cls in _defined_classes(module):
                is_entity = entity_cls is not None and has_marker(cls, entity_cls)
                is_projection = projection_cls is not None and has_marker(cls, projection_cls)
                if not (is_entity or is_projection):
                    continue
                descriptor = ClassDescriptor.of(cls, is_entity=is_entity, is_projection=is_projection)
                existing = by_name.get(descriptor.name)
                if existing is not None:
                    if existing.source is not cls:
                        logger.warning(
                            "Ignoring %s: simple name already used by %s",
                            descriptor.qualified_name,
                            existing.qualified_name,
                        )
                    continue
                by_name[descriptor.name] = descriptor
    return CandidateSet.of(by_name.values())


# ################
# Implementation
# ################


@contextmanager
def _search_path(source_roots: Sequence[Path]) -> Iterator[None]:
    """Temporarily prepend *source_roots* to ``sys.path``."""
    added = [str(root) for root in source_roots if str(root) not in sys.path]
    sys.path[:0] = added
    importlib.invalidate_caches()
    try:
        yield
    finally:
        for entry in added:
            if entry in sys.path:
                sys.path.remove(entry)


# Project scripts that act on import instead of defining models.
_SKIPPED_TOP_LEVEL = frozenset({"setup", "conftest", "noxfile"})


def _iter_modules(source_roots: Sequence[Path], base_package: str | None) -> Iterator[ModuleType]:
    if base_package is not None:
        try:
            package = importlib.import_module(base_package)
        except (Exception, SystemExit) as exc:
            raise DiscoveryError(f"Cannot import base package '{base_package}': {exc!r}") from exc
        yield from _walk(package)
        return

    for info in pkgutil.iter_modules([str(root) for root in source_roots]):
        if info.name in _SKIPPED_TOP_LEVEL:
            logger.debug("Skipping project script: %s", info.name)
            continue
        module = _import(info.name)
        if module is not None:
            yield from _walk(module)


def _walk(package: ModuleType) -> Iterator[ModuleType]:
    """Yield *package* and, if it is a package, all of its submodules depth first."""
    yield package
    if not hasattr(package, "__path__"):
        return
    for info in pkgutil.iter_modules(package.__path__, prefix=f"{package.__name__}."):
        module = _import(info.name)
        if module is not None:
            yield from _walk(module)


def _import(name: str) -> ModuleType | None:
    """Import *name*, or log and return None if executing the module fails or exits."""
    try:
        module = importlib.import_module(name)
    except (Exception, SystemExit) as exc:
        logger.warning("Skipping module '%s': %r", name, exc)
        return None
    logger.debug("Scanned module: %s", name)
    return module


def _defined_classes(module: ModuleType) -> list[type[Any]]:
    """Classes whose definition lives in *module* (re-exports are ignored)."""
    return [
        member
        for _, member in inspect.getmembers(module, inspect.isclass)
        if member.__module__ == module.__name__
    ]
