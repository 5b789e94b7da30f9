# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for TypeScript interface rendering."""

import pytest

from rest2ts.generator.emitter import InterfaceEmitter
from rest2ts.model import CandidateSet, ClassDescriptor
from sample_domain import Color, Customer, CustomerSummary, Geo, Graph, Hybrid, Order, OrderView, Tagged

# ###############
# Helpers
# ###############

ENTITIES = (Customer, Order, Tagged, Graph)
PROJECTIONS = (OrderView, CustomerSummary)


def _candidates() -> CandidateSet:
    descriptors = [ClassDescriptor.of(cls, is_entity=True) for cls in ENTITIES]
    descriptors += [ClassDescriptor.of(cls, is_projection=True) for cls in PROJECTIONS]
    descriptors.append(ClassDescriptor.of(Hybrid, is_entity=True, is_projection=True))
    return CandidateSet.of(descriptors)


def _descriptor(candidates: CandidateSet, name: str) -> ClassDescriptor:
    return next(c for c in candidates if c.name == name)


@pytest.fixture
def candidates() -> CandidateSet:
    return _candidates()


@pytest.fixture
def emitter(candidates: CandidateSet) -> InterfaceEmitter:
    return InterfaceEmitter(candidates)


# ###############
# Link interface
# ###############


def test_link_interface() -> None:
    emitter = InterfaceEmitter(CandidateSet())
    assert emitter.emit_link_interface() == "interface LinkType {\n  href: string;\n}\n\n"


def test_custom_link_type_name_is_used_everywhere(candidates: CandidateSet) -> None:
    emitter = InterfaceEmitter(candidates, link_type_name="HalLink")
    assert emitter.emit_link_interface().startswith("interface HalLink {")
    text = emitter.emit_interface(_descriptor(candidates, "Order"))
    assert "    self: HalLink;" in text
    assert "LinkType" not in text


# ###############
# Entities
# ###############


def test_entity_references_become_links(emitter: InterfaceEmitter, candidates: CandidateSet) -> None:
    """Scalars and enums are inlined, the candidate reference only appears under _links."""
    assert emitter.emit_interface(_descriptor(candidates, "Order")) == (
        "interface OrderType {\n"
        "  id: string;\n"
        "  status: 'RED' | 'GREEN';\n"
        "  _links: {\n"
        "    customer: LinkType;\n"
        "    self: LinkType;\n"
        "  };\n"
        "}\n"
        "\n"
    )


def test_entity_embedded_object_is_expanded_one_level(emitter: InterfaceEmitter, candidates: CandidateSet) -> None:
    """Nested candidates and collections are dropped, deeper objects are pruned."""
    assert emitter.emit_interface(_descriptor(candidates, "Customer")) == (
        "interface CustomerType {\n"
        "  id: string;\n"
        "  name: string;\n"
        "  address: {\n"
        "    street: string;\n"
        "    city: string;\n"
        "  };\n"
        "  _links: {\n"
        "    orders: LinkType;\n"
        "    self: LinkType;\n"
        "  };\n"
        "}\n"
        "\n"
    )


def test_links_are_sorted_and_always_include_self(emitter: InterfaceEmitter, candidates: CandidateSet) -> None:
    assert emitter.emit_interface(_descriptor(candidates, "Tagged")) == (
        "interface TaggedType {\n"
        "  name: string;\n"
        "  _links: {\n"
        "    alpha: LinkType;\n"
        "    self: LinkType;\n"
        "    zebra: LinkType;\n"
        "  };\n"
        "}\n"
        "\n"
    )


def test_entity_without_references_has_self_link_only() -> None:
    class Plain:
        code: str

    candidates = CandidateSet.of([ClassDescriptor.of(Plain, is_entity=True)])
    text = InterfaceEmitter(candidates).emit_interface(_descriptor(candidates, "Plain"))
    assert text == "interface PlainType {\n  code: string;\n  _links: {\n    self: LinkType;\n  };\n}\n\n"


def test_type_suffix_only_changes_interface_name(candidates: CandidateSet) -> None:
    default = InterfaceEmitter(candidates).emit_interface(_descriptor(candidates, "Customer"))
    custom = InterfaceEmitter(candidates, type_suffix="Resource").emit_interface(_descriptor(candidates, "Customer"))
    assert custom.startswith("interface CustomerResource {\n")
    assert custom.replace("CustomerResource", "CustomerType") == default


def test_empty_type_suffix(candidates: CandidateSet) -> None:
    emitter = InterfaceEmitter(candidates, type_suffix="")
    assert emitter.interface_name(_descriptor(candidates, "Order")) == "Order"


# ###############
# Projections
# ###############


def test_projection_inlines_references_and_has_no_links(emitter: InterfaceEmitter, candidates: CandidateSet) -> None:
    assert emitter.emit_interface(_descriptor(candidates, "OrderView")) == (
        "interface OrderViewType {\n"
        "  id: string;\n"
        "  status: 'RED' | 'GREEN';\n"
        "  customer: {\n"
        "    id: string;\n"
        "    name: string;\n"
        "  };\n"
        "}\n"
        "\n"
    )


def test_projection_inlines_collections_as_arrays(emitter: InterfaceEmitter, candidates: CandidateSet) -> None:
    assert emitter.emit_interface(_descriptor(candidates, "CustomerSummary")) == (
        "interface CustomerSummaryType {\n"
        "  name: string;\n"
        "  orders: {\n"
        "    id: string;\n"
        "    status: 'RED' | 'GREEN';\n"
        "  }[];\n"
        "  tags: string[];\n"
        "  colors: ('RED' | 'GREEN' | 'BLUE')[];\n"
        "  anything: unknown[];\n"
        "  total: number;\n"
        "}\n"
        "\n"
    )


def test_projection_inlines_mappings_as_index_signatures() -> None:
    class Stats:
        counts: dict[str, int]
        palette: dict[str, Color]
        places: dict[str, Geo]
        raw: dict

    candidates = CandidateSet.of([ClassDescriptor.of(Stats, is_projection=True)])
    assert InterfaceEmitter(candidates).emit_interface(_descriptor(candidates, "Stats")) == (
        "interface StatsType {\n"
        "  counts: { [key: string]: string };\n"
        "  palette: { [key: string]: 'RED' | 'GREEN' | 'BLUE' };\n"
        "  places: { [key: string]: {\n"
        "    lat: string;\n"
        "    lng: string;\n"
        "  } };\n"
        "  raw: { [key: string]: unknown };\n"
        "}\n"
        "\n"
    )


def test_class_marked_as_entity_and_projection_renders_as_projection(
    emitter: InterfaceEmitter, candidates: CandidateSet
) -> None:
    text = emitter.emit_interface(_descriptor(candidates, "Hybrid"))
    assert "_links" not in text
    assert "  customer: {\n    id: string;\n    name: string;\n  };\n" in text


# ###############
# Depth limit
# ###############


def test_object_with_every_property_pruned_is_omitted(emitter: InterfaceEmitter, candidates: CandidateSet) -> None:
    """The cyclic NodeA -> NodeB chain is cut below the cap, leaving nothing to render for 'a'."""
    assert emitter.emit_interface(_descriptor(candidates, "Graph")) == (
        "interface GraphType {\n  _links: {\n    self: LinkType;\n  };\n}\n\n"
    )


def test_object_without_properties_is_still_rendered() -> None:
    class Envelope:
        payload: object

    candidates = CandidateSet.of([ClassDescriptor.of(Envelope, is_projection=True)])
    text = InterfaceEmitter(candidates).emit_interface(_descriptor(candidates, "Envelope"))
    assert text == "interface EnvelopeType {\n  payload: {\n  };\n}\n\n"


def test_deeper_max_depth_expands_further(candidates: CandidateSet) -> None:
    emitter = InterfaceEmitter(candidates, max_depth=3)
    text = emitter.emit_interface(_descriptor(candidates, "Graph"))
    assert text.startswith("interface GraphType {\n  a: {\n    b: {\n      x: string;\n    };\n  };\n")

    customer = emitter.emit_interface(_descriptor(candidates, "Customer"))
    assert "    geo: {\n      lat: string;\n      lng: string;\n    };\n" in customer


def test_max_depth_one_omits_all_objects(candidates: CandidateSet) -> None:
    emitter = InterfaceEmitter(candidates, max_depth=1)
    assert emitter.emit_interface(_descriptor(candidates, "OrderView")) == (
        "interface OrderViewType {\n  id: string;\n  status: 'RED' | 'GREEN';\n}\n\n"
    )


def test_custom_metadata_provider(candidates: CandidateSet) -> None:
    """The emitter reads properties only through the supplied provider."""
    seen: list[type] = []

    def provider(cls: type) -> list:
        seen.append(cls)
        return []

    emitter = InterfaceEmitter(candidates, properties_of=provider)
    text = emitter.emit_interface(_descriptor(candidates, "Order"))
    assert seen == [Order]
    assert text == "interface OrderType {\n  _links: {\n    self: LinkType;\n  };\n}\n\n"
