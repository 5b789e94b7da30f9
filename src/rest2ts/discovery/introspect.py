# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read the ordered, typed properties of a class from its annotations.

Properties come from two sources on every class in the MRO, base classes
first: annotated attributes (plain class annotations, dataclass and pydantic
fields) and ``property`` objects with a return annotation. Classes from
generic modules (``builtins``, ``typing``, ``pydantic`` ...) are skipped
entirely so their machinery never shows up as resource data.
"""

from __future__ import annotations

import collections.abc
import inspect
import logging
import types
import typing
from typing import Any

from rest2ts.model.descriptors import PropertyDescriptor
from rest2ts.model.types import GENERIC_BASE_MODULES

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class IntrospectionError(Exception):
    """Raised when the annotations of a class cannot be resolved."""


def describe_properties(cls: type) -> list[PropertyDescriptor]:
    """Return the public properties of *cls* in declaration order.

    A property redeclared by a subclass keeps the position of its first
    declaration and takes the most derived type.

    Raises:
        IntrospectionError: If an annotation refers to a name that cannot be
            resolved in the declaring module.
    """
    found: dict[str, PropertyDescriptor] = {}
    for owner in reversed(cls.__mro__):
        if is_generic_base(owner):
            continue
        for name, annotation in _own_annotations(owner):
            if name.startswith("_") or typing.get_origin(annotation) is typing.ClassVar:
                continue
            prop_type, element_type = normalize_annotation(annotation)
            found[name] = PropertyDescriptor(
                name=name,
                type=prop_type,
                declaring_class=owner,
                element_type=element_type,
            )
    return list(found.values())


def is_generic_base(owner: type) -> bool:
    """Return True if *owner* is part of the generic object machinery."""
    return owner.__module__.partition(".")[0] in GENERIC_BASE_MODULES


def normalize_annotation(annotation: Any) -> tuple[type, type | None]:
    """Reduce a type annotation to a runtime class and an optional element class.

    ``Annotated``, ``Optional`` and ``NewType`` wrappers are removed,
    parametrized generics reduce to their origin (``list[Item]`` gives
    ``(list, Item)``, mappings record their value type). Any annotation that
    does not name a single class becomes ``object``.
    """
    annotation = _unwrap(annotation)
    origin = typing.get_origin(annotation)
    if origin is not None and isinstance(origin, type):
        args = typing.get_args(annotation)
        if issubclass(origin, collections.abc.Mapping):
            element = args[1] if len(args) == 2 else None
        elif issubclass(origin, collections.abc.Collection):
            element = args[0] if args and args[0] is not Ellipsis else None
        else:
            element = None
        return origin, _element_class(element)
    # typing.Any is a class since Python 3.11.
    if isinstance(annotation, type) and annotation is not Any:
        return annotation, None
    return object, None


# ################
# Implementation
# ################


def _own_annotations(owner: type) -> list[tuple[str, Any]]:
    """Annotated attributes first, then annotated properties, both in definition order."""
    try:
        annotations = list(inspect.get_annotations(owner, eval_str=True).items())
        for name, member in owner.__dict__.items():
            if not isinstance(member, property) or member.fget is None:
                continue
            returns = inspect.get_annotations(member.fget, eval_str=True).get("return")
            if returns is None:
                logger.debug("Skipping property '%s.%s' without a return annotation", owner.__qualname__, name)
                continue
            annotations.append((name, returns))
    except (NameError, AttributeError, SyntaxError, TypeError) as exc:
        raise IntrospectionError(f"Cannot resolve annotations of '{owner.__qualname__}': {exc}") from exc
    return annotations


def _unwrap(annotation: Any) -> Any:
    while True:
        origin = typing.get_origin(annotation)
        if origin is typing.Annotated:
            annotation = typing.get_args(annotation)[0]
        elif origin is typing.Union or origin is types.UnionType:
            members = [a for a in typing.get_args(annotation) if a is not type(None)]
            if len(members) != 1:
                return object
            annotation = members[0]
        elif hasattr(annotation, "__supertype__"):
            annotation = annotation.__supertype__
        else:
            return annotation


def _element_class(element: Any) -> type | None:
    if element is None:
        return None
    element_type, _ = normalize_annotation(element)
    return element_type
