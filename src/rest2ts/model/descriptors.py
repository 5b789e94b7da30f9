# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptors for candidate classes and their properties.

Descriptors are built once per generation run from reflective metadata and are
immutable afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class PropertyDescriptor(BaseModel):
    """One typed, readable attribute of a class.

    Attributes:
        name: Attribute name as it appears in the serialized resource.
        type: Normalized runtime class of the attribute (``list`` for ``list[Item]``).
        declaring_class: The class in the MRO that declares the attribute.
        element_type: Element class of a collection attribute, when known.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type: type[Any]
    declaring_class: type[Any]
    element_type: type[Any] | None = None


class ClassDescriptor(BaseModel):
    """A candidate class selected for interface generation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    qualified_name: str
    source: type[Any]
    is_entity: bool = False
    is_projection: bool = False

    @classmethod
    def of(cls, source: type[Any], *, is_entity: bool = False, is_projection: bool = False) -> ClassDescriptor:
        """Build a descriptor for *source* using its simple and qualified names."""
        return cls(
            name=source.__name__,
            qualified_name=f"{source.__module__}.{source.__qualname__}",
            source=source,
            is_entity=is_entity,
            is_projection=is_projection,
        )


@dataclass(frozen=True)
class CandidateSet:
    """All candidate classes of one run, ordered by simple name.

    Iteration yields the classes to emit; :meth:`contains_type` answers whether
    a referenced type must be rendered as a link.
    """

    classes: tuple[ClassDescriptor, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", tuple(sorted(self.classes, key=lambda c: c.name)))

    @classmethod
    def of(cls, descriptors: Iterable[ClassDescriptor]) -> CandidateSet:
        return cls(classes=tuple(descriptors))

    def __iter__(self) -> Iterator[ClassDescriptor]:
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self.classes)

    def contains_type(self, candidate: type[Any]) -> bool:
        """Return True if *candidate* is the source class of one of the descriptors."""
        return any(c.source is candidate for c in self.classes)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.classes]
