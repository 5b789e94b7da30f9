# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generate TypeScript interfaces for HAL-style REST resources from annotated Python classes."""

from rest2ts.discovery.markers import Entity, Projection, entity, projection

__all__ = [
    "Entity",
    "Projection",
    "entity",
    "projection",
]
