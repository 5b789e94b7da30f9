# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entity and projection markers, and resolution of configured marker names.

A class carries a marker when it was decorated with the marker's decorator, or
when the marker is a class and the candidate is a concrete strict subclass of
it. The second form lets an existing base class (``pydantic.BaseModel``, an ORM
declarative base) serve as the entity marker.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

MARKERS_ATTRIBUTE = "__rest2ts_markers__"

DEFAULT_ENTITY_MARKER = "rest2ts.discovery.markers.Entity"
DEFAULT_PROJECTION_MARKER = "rest2ts.discovery.markers.Projection"

_T = TypeVar("_T", bound=type)


class Entity:
    """Marker for persistent resources exposed with ``_links``."""


class Projection:
    """Marker for read-only views of an entity; relations are inlined."""


def entity(cls: _T) -> _T:
    """Class decorator marking *cls* as an entity."""
    return _tag(cls, Entity)


def projection(cls: _T) -> _T:
    """Class decorator marking *cls* as a projection."""
    return _tag(cls, Projection)


def has_marker(cls: type, marker: Any) -> bool:
    """Return True if *cls* itself carries *marker*.

    Decorator tags are not inherited: a subclass of a decorated class is only a
    candidate when decorated on its own.
    """
    if marker in cls.__dict__.get(MARKERS_ATTRIBUTE, ()):
        return True
    if not isinstance(marker, type) or cls is marker:
        return False
    return issubclass(cls, marker) and not cls.__dict__.get("__abstract__", False)


def load_marker(dotted_name: str) -> Any | None:
    """Resolve a marker from its dotted name, e.g. ``"pydantic.BaseModel"``.

    Returns:
        The marker object, or None if the module or attribute cannot be
        imported. A missing marker is not an error: no class will match it.
    """
    module_name, _, attribute = dotted_name.rpartition(".")
    if module_name and attribute:
        try:
            return getattr(importlib.import_module(module_name), attribute)
        except (ImportError, AttributeError) as exc:
            logger.debug("Cannot import marker '%s': %s", dotted_name, exc)
    logger.warning(
        "Missing marker '%s'. Classes with this marker will not be found during lookup.",
        dotted_name,
    )
    return None


# ################
# Implementation
# ################


def _tag(cls: _T, marker: type) -> _T:
    own = cls.__dict__.get(MARKERS_ATTRIBUTE, ())
    if marker not in own:
        setattr(cls, MARKERS_ATTRIBUTE, (*own, marker))
    return cls
