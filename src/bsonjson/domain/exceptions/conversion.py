# src/bsonjson/domain/exceptions/conversion.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Conversion exceptions.

Purpose:
    The closed error taxonomy of the two converters. Both kinds are terminal:
    the converters never retry and never emit partial output.

Layer:
    domain
"""

from __future__ import annotations

from bsonjson.domain.exceptions.base import BsonJsonError


class ConversionError(BsonJsonError):
    """Base class for BSON <-> JSON conversion failures."""

    code = "CONVERSION_ERROR"


class UnsupportedBinaryType(ConversionError):
    """Raised when a BSON value (at any depth) has no JSON counterpart.

    ``details`` carries ``kind`` (the BSON kind alias, or ``"unknown"``) and
    ``path`` (location of the offending value, e.g. ``"$.a[2].b"``).
    """

    code = "UNSUPPORTED_BINARY_TYPE"


class UnsupportedJsonType(ConversionError):
    """Raised when a JSON value cannot be built into, or serialized as, a BSON document."""

    code = "UNSUPPORTED_JSON_TYPE"
