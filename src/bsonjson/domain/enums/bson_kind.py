# src/bsonjson/domain/enums/bson_kind.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""BSON value kinds.

Purpose:
    Closed set of BSON element kinds the converters dispatch on. Values are the
    MongoDB ``$type`` string aliases, which makes them stable identifiers for
    logs and error details.

Layer:
    domain

Notes:
    - Conversion sites match exhaustively over this enum; adding a member
      forces every site to handle it.
    - Deprecated kinds (undefined, dbPointer, symbol) are never produced by
      the BSON codec, which decodes them as null, dbRef and string. They are
      detected on the raw element bytes instead.
"""

from __future__ import annotations

from enum import Enum


class BsonKind(str, Enum):
    """BSON element kinds."""

    # ------------------------------------------------------------------ #
    # Kinds with a JSON counterpart                                      #
    # ------------------------------------------------------------------ #
    DOUBLE = "double"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    BOOLEAN = "bool"
    NULL = "null"
    INT32 = "int"
    INT64 = "long"

    # ------------------------------------------------------------------ #
    # Stored as an object, with members of any kind                      #
    # ------------------------------------------------------------------ #
    DB_REF = "dbRef"

    # ------------------------------------------------------------------ #
    # BSON-only kinds                                                    #
    # ------------------------------------------------------------------ #
    BINARY = "binData"
    OBJECT_ID = "objectId"
    DATE = "date"
    REGEX = "regex"
    CODE = "javascript"
    TIMESTAMP = "timestamp"
    DECIMAL128 = "decimal"
    MIN_KEY = "minKey"
    MAX_KEY = "maxKey"

    # ------------------------------------------------------------------ #
    # Deprecated BSON-only kinds                                         #
    # ------------------------------------------------------------------ #
    UNDEFINED = "undefined"
    DB_POINTER = "dbPointer"
    SYMBOL = "symbol"
