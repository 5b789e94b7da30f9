# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of TypeScript interfaces for candidate classes.

Each candidate becomes one interface named ``<SimpleName><TypeSuffix>``.
Properties referring to other candidates or holding collections are links:
entities list them under ``_links`` (together with ``self``) and omit them from
the body, while projections inline them as nested data and have no ``_links``
block at all. In a projection, mappings become string-keyed index signatures
and other collections become arrays.

Embedded objects are expanded inline. Inside an expansion, candidate and
collection properties are dropped, and expansion stops at ``max_depth``
property levels. An object left without any property by that cut is omitted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from rest2ts.discovery.introspect import describe_properties
from rest2ts.generator.classifier import Classification, TypeClassifier, is_collection
from rest2ts.model.descriptors import CandidateSet, ClassDescriptor, PropertyDescriptor
from rest2ts.model.types import TS_STRING, TypeCategory

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

INDENT = 2
SELF_LINK = "self"
DEFAULT_LINK_TYPE_NAME = "LinkType"
DEFAULT_TYPE_SUFFIX = "Type"
DEFAULT_MAX_DEPTH = 2

PropertiesOf = Callable[[type], list[PropertyDescriptor]]


class InterfaceEmitter:
    """Renders the link interface and one interface per candidate class.

    Args:
        candidates: All candidates of the run; references to these become links.
        classifier: Classifier used for every property type.
        link_type_name: Name of the shared interface holding an ``href``.
        type_suffix: Appended to each class's simple name.
        max_depth: Deepest property level rendered; top-level properties are
            level 1. Embedded objects that would need a deeper level are omitted.
        properties_of: Metadata provider returning the properties of a class.
    """

    def __init__(
        self,
        candidates: CandidateSet,
        *,
        classifier: TypeClassifier | None = None,
        link_type_name: str = DEFAULT_LINK_TYPE_NAME,
        type_suffix: str = DEFAULT_TYPE_SUFFIX,
        max_depth: int = DEFAULT_MAX_DEPTH,
        properties_of: PropertiesOf = describe_properties,
    ) -> None:
        self._candidates = candidates
        self._classifier = classifier or TypeClassifier()
        self._link_type_name = link_type_name
        self._type_suffix = type_suffix
        self._max_depth = max_depth
        self._properties_of = properties_of

    def interface_name(self, descriptor: ClassDescriptor) -> str:
        return f"{descriptor.name}{self._type_suffix}"

    def emit_link_interface(self) -> str:
        """Render the shared link interface followed by a blank line."""
        return f"interface {self._link_type_name} {{\n{_indent(1)}href: {TS_STRING};\n}}\n\n"

    def emit_interface(self, descriptor: ClassDescriptor) -> str:
        """Render the interface of one candidate class followed by a blank line."""
        lines = [f"interface {self.interface_name(descriptor)} {{"]
        links = {SELF_LINK}

        for prop in self._properties_of(descriptor.source):
            classification = self._classifier.classify(prop.type, self._candidates)
            if classification.category is TypeCategory.LINK:
                links.add(prop.name)
                if not descriptor.is_projection:
                    continue
            self._emit_property(lines, prop, classification, depth=1)

        if not descriptor.is_projection:
            lines.append(f"{_indent(1)}_links: {{")
            lines.extend(f"{_indent(2)}{link}: {self._link_type_name};" for link in sorted(links))
            lines.append(f"{_indent(1)}}};")

        lines.append("}")
        return "\n".join(lines) + "\n\n"

    # ################
    # Implementation
    # ################

    def _emit_property(
        self,
        lines: list[str],
        prop: PropertyDescriptor,
        classification: Classification,
        depth: int,
    ) -> bool:
        """Append *prop* to *lines*; return False if it was pruned."""
        prefix = f"{_indent(depth)}{prop.name}: "

        if classification.value is not None:
            lines.append(f"{prefix}{classification.value};")
            return True
        if is_collection(prop.type):
            return self._emit_collection(lines, prefix, prop, depth)
        if self._can_expand(prop, depth):
            return self._emit_object(lines, prefix, prop, prop.type, depth, terminator=";")
        return False

    def _emit_collection(self, lines: list[str], prefix: str, prop: PropertyDescriptor, depth: int) -> bool:
        """Inline a collection property of a projection.

        Mappings become index signatures keyed by string, all other
        collections become arrays of their elements.
        """
        is_mapping = issubclass(prop.type, Mapping)
        head, tail = ("{ [key: string]: ", " }") if is_mapping else ("", "[]")
        element_type = prop.element_type
        if element_type is None or is_collection(element_type):
            lines.append(f"{prefix}{head}unknown{tail};")
            return True

        element = self._classifier.classify(element_type, self._candidates)
        if element.category is TypeCategory.SCALAR:
            lines.append(f"{prefix}{head}{element.value}{tail};")
            return True
        if element.category is TypeCategory.ENUM:
            value = element.value if is_mapping else f"({element.value})"
            lines.append(f"{prefix}{head}{value}{tail};")
            return True
        if self._can_expand(prop, depth):
            return self._emit_object(lines, f"{prefix}{head}", prop, element_type, depth, terminator=f"{tail};")
        return False

    def _emit_object(
        self,
        lines: list[str],
        prefix: str,
        prop: PropertyDescriptor,
        object_type: type,
        depth: int,
        terminator: str,
    ) -> bool:
        body: list[str] = []
        pruned = False
        for child in self._properties_of(object_type):
            classification = self._classifier.classify(child.type, self._candidates)
            if classification.category is TypeCategory.LINK:
                continue
            if not self._emit_property(body, child, classification, depth + 1):
                pruned = True

        if pruned and not body:
            logger.debug("Omitting '%s' declared by %s: all of its properties were pruned", prop.name, _owner(prop))
            return False
        lines.append(f"{prefix}{{")
        lines.extend(body)
        lines.append(f"{_indent(depth)}}}{terminator}")
        return True

    def _can_expand(self, prop: PropertyDescriptor, depth: int) -> bool:
        if depth < self._max_depth:
            return True
        logger.debug(
            "Pruning '%s' declared by %s: nesting deeper than %d levels",
            prop.name,
            _owner(prop),
            self._max_depth,
        )
        return False


def _indent(level: int) -> str:
    return " " * (INDENT * level)


def _owner(prop: PropertyDescriptor) -> str:
    return prop.declaring_class.__qualname__
