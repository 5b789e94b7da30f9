# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of property types into scalar, enum, link, or embedded object.

The checks run in a fixed order and stop at the first match:

1. **Scalar** if the type is, or subclasses, an entry of the scalar table.
2. **Enum** if the type is an ``enum.Enum``.
3. **Link** if the type is a candidate class or a collection.
4. **Embedded** otherwise; the type is rendered as an inline object.

The order matters for types matching more than one rule: a ``StrEnum`` is a
``str`` and is rendered as ``string``, never as a union of its members.
"""

from __future__ import annotations

import collections.abc
import enum
from collections.abc import Sequence
from dataclasses import dataclass

from rest2ts.model.descriptors import CandidateSet
from rest2ts.model.types import STANDARD_TYPES, TypeCategory, TypeMapping

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Classification:
    """Result of classifying one property type.

    Attributes:
        category: Which rendering rule applies.
        value: The TypeScript type text for scalars and enums, None otherwise.
    """

    category: TypeCategory
    value: str | None = None


class TypeClassifier:
    """Maps property types to a :class:`Classification` using a scalar table."""

    def __init__(self, type_table: Sequence[TypeMapping] = STANDARD_TYPES) -> None:
        self._type_table = tuple(type_table)

    def classify(self, property_type: type, candidates: CandidateSet) -> Classification:
        """Classify *property_type* against the scalar table and *candidates*."""
        scalar = self.scalar_name(property_type)
        if scalar is not None:
            return Classification(TypeCategory.SCALAR, scalar)
        if _is_enum(property_type):
            return Classification(TypeCategory.ENUM, enum_literal(property_type))
        if candidates.contains_type(property_type) or is_collection(property_type):
            return Classification(TypeCategory.LINK)
        return Classification(TypeCategory.EMBEDDED)

    def scalar_name(self, property_type: type) -> str | None:
        """Return the TypeScript keyword of the first table entry *property_type* subclasses."""
        for source_type, ts_name in self._type_table:
            if issubclass(property_type, source_type):
                return ts_name
        return None


def enum_literal(enum_type: type[enum.Enum]) -> str:
    """Render the member names of *enum_type* as a union of string literals.

    Members are quoted individually and kept in declaration order, e.g.
    ``'RED' | 'GREEN'``. Aliases are not repeated. An enum without members
    renders as ``never``.
    """
    members = [f"'{member.name}'" for member in enum_type]
    return " | ".join(members) if members else "never"


def is_collection(property_type: type) -> bool:
    """Return True for multi-valued containers, mappings included."""
    return issubclass(property_type, collections.abc.Collection)


# ################
# Implementation
# ################


def _is_enum(property_type: type) -> bool:
    return issubclass(property_type, enum.Enum)
