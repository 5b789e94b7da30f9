# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end generation: discovery, rendering, and writing the output file.

Every run regenerates the whole file. Classes are rendered one at a time and a
class that fails is logged and left out, so the rest of the output is still
produced. The text is assembled in memory and written once at the end; only a
failure of that write fails the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rest2ts.discovery.scanner import discover_candidates, resolve_source_roots
from rest2ts.generator.classifier import TypeClassifier
from rest2ts.generator.emitter import InterfaceEmitter
from rest2ts.model.descriptors import CandidateSet

if TYPE_CHECKING:
    from rest2ts.workspace.config import GeneratorConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class OutputWriteError(Exception):
    """Raised when the generated text cannot be written to the output file."""


def generate(candidates: CandidateSet, emitter: InterfaceEmitter) -> str:
    """Render the link interface and the interface of every candidate.

    Candidates are rendered in the order of *candidates* (by simple name).
    """
    parts = [emitter.emit_link_interface()]
    for descriptor in candidates:
        logger.debug("Checking class: %s", descriptor.qualified_name)
        try:
            parts.append(emitter.emit_interface(descriptor))
        except Exception as exc:
            logger.error(
                "Unable to generate info for class %s: %s",
                descriptor.qualified_name,
                exc,
                exc_info=True,
            )
    return "".join(parts)


def write_output(text: str, path: Path) -> int:
    """Write *text* as UTF-8 to *path*, replacing any previous content.

    Returns:
        The number of bytes written.

    Raises:
        OutputWriteError: If the directory cannot be created or the file
            cannot be written.
    """
    data = text.encode("utf-8")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write output file '{path}': {exc}") from exc
    return len(data)


def run(config: GeneratorConfig, project_dir: Path) -> Path:
    """Generate the interfaces described by *config* for the project in *project_dir*.

    Args:
        config: Parsed generator configuration.
        project_dir: Directory that relative source roots and the output path
            are resolved against.

    Returns:
        The path of the written output file.

    Raises:
        DiscoveryError: If the configured base package cannot be imported.
        OutputWriteError: If the output file cannot be written.
    """
    source_roots = resolve_source_roots(config.source_roots, project_dir)
    candidates = discover_candidates(
        source_roots,
        base_package=config.base_package,
        entity_marker=config.entity_marker,
        projection_marker=config.projection_marker,
    )
    logger.debug("Found %d candidate class(es): %s", len(candidates), ", ".join(candidates.names))

    emitter = InterfaceEmitter(
        candidates,
        classifier=TypeClassifier(),
        link_type_name=config.link_type_name,
        type_suffix=config.type_suffix,
        max_depth=config.max_depth,
    )
    text = generate(candidates, emitter)

    output = project_dir / config.output
    size = write_output(text, output)
    logger.info("Result (%d bytes) is written into %s", size, output)
    return output
