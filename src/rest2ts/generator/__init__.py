# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Interface generation: type classification, rendering, and the build pipeline."""

from rest2ts.generator.build import OutputWriteError, generate, run, write_output
from rest2ts.generator.classifier import Classification, TypeClassifier, enum_literal, is_collection
from rest2ts.generator.emitter import (
    DEFAULT_LINK_TYPE_NAME,
    DEFAULT_MAX_DEPTH,
    DEFAULT_TYPE_SUFFIX,
    InterfaceEmitter,
)

__all__ = [
    "Classification",
    "TypeClassifier",
    "enum_literal",
    "is_collection",
    "InterfaceEmitter",
    "DEFAULT_LINK_TYPE_NAME",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_TYPE_SUFFIX",
    "generate",
    "run",
    "write_output",
    "OutputWriteError",
]
