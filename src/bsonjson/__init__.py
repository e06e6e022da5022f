# src/bsonjson/__init__.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""BSON <-> JSON conversion.

Public surface:
    bson_to_simple_json   BSON value → canonical compact JSON text.
    json_into_bson        JSON value → BSON document bytes.
"""

from __future__ import annotations

from bsonjson.adapters.mappers.bson_to_json import bson_to_json_value, bson_to_simple_json
from bsonjson.adapters.mappers.json_to_bson import json_into_bson
from bsonjson.domain.exceptions.conversion import (
    ConversionError,
    UnsupportedBinaryType,
    UnsupportedJsonType,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "UnsupportedBinaryType",
    "UnsupportedJsonType",
    "bson_to_json_value",
    "bson_to_simple_json",
    "json_into_bson",
]
