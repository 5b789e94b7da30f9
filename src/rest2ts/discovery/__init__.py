# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery of candidate classes and their typed properties."""

from rest2ts.discovery.introspect import (
    IntrospectionError,
    describe_properties,
    is_generic_base,
    normalize_annotation,
)
from rest2ts.discovery.markers import (
    DEFAULT_ENTITY_MARKER,
    DEFAULT_PROJECTION_MARKER,
    Entity,
    Projection,
    entity,
    has_marker,
    load_marker,
    projection,
)
from rest2ts.discovery.scanner import DiscoveryError, discover_candidates, resolve_source_roots

__all__ = [
    "DEFAULT_ENTITY_MARKER",
    "DEFAULT_PROJECTION_MARKER",
    "DiscoveryError",
    "Entity",
    "IntrospectionError",
    "Projection",
    "describe_properties",
    "discover_candidates",
    "entity",
    "has_marker",
    "is_generic_base",
    "load_marker",
    "normalize_annotation",
    "projection",
    "resolve_source_roots",
]
