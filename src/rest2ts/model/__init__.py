# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor model shared by discovery and interface generation."""

from rest2ts.model.descriptors import CandidateSet, ClassDescriptor, PropertyDescriptor
from rest2ts.model.types import (
    GENERIC_BASE_MODULES,
    STANDARD_TYPES,
    TS_BOOLEAN,
    TS_NUMBER,
    TS_STRING,
    TypeCategory,
    TypeMapping,
)

__all__ = [
    # Type mapping
    "TypeCategory",
    "TypeMapping",
    "STANDARD_TYPES",
    "GENERIC_BASE_MODULES",
    "TS_BOOLEAN",
    "TS_NUMBER",
    "TS_STRING",
    # Descriptors
    "PropertyDescriptor",
    "ClassDescriptor",
    "CandidateSet",
]
