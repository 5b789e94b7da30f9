# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type categories and the standard Python-to-TypeScript scalar mapping."""

from __future__ import annotations

import datetime
import numbers
import uuid
from enum import Enum
from pathlib import PurePath

from pydantic import AnyUrl

# ###############
# Public Interface
# ###############

TS_BOOLEAN = "boolean"
TS_NUMBER = "number"
TS_STRING = "string"


class TypeCategory(Enum):
    """The four ways a property type can be rendered, in classification order."""

    SCALAR = "scalar"
    ENUM = "enum"
    LINK = "link"
    EMBEDDED = "embedded"


# One entry of the scalar table: a source type and the TypeScript keyword used
# for it and all of its subclasses.
TypeMapping = tuple[type, str]

# Evaluated in order, first match wins. ``bool`` must precede ``int``, its base
# class. Concrete numeric types render as ``string``; only the abstract
# ``numbers.Number`` (``Decimal``, ``Fraction``) maps to ``number``.
STANDARD_TYPES: tuple[TypeMapping, ...] = (
    (bool, TS_BOOLEAN),
    (int, TS_STRING),
    (float, TS_STRING),
    (complex, TS_STRING),
    (numbers.Number, TS_NUMBER),
    (str, TS_STRING),
    (bytes, TS_STRING),
    (bytearray, TS_STRING),
    (datetime.date, TS_STRING),
    (datetime.time, TS_STRING),
    (datetime.timedelta, TS_STRING),
    (uuid.UUID, TS_STRING),
    (AnyUrl, TS_STRING),
    (PurePath, TS_STRING),
)

# Attributes declared by classes from these modules belong to the generic
# object machinery rather than to the domain model and are never rendered.
GENERIC_BASE_MODULES: frozenset[str] = frozenset({"builtins", "typing", "abc", "enum", "pydantic"})
