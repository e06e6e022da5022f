# src/bsonjson/adapters/mappers/bson_to_json.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""BSON → JSON mapping adapter.

Purpose:
    Map a decoded BSON value (as produced by PyMongo's ``bson`` codec) onto a
    freshly built JSON tree, and serialize that tree in canonical compact form.

Layer:
    adapters/mappers

Notes:
    - Every value is first classified into a :class:`BsonKind` by exact type,
      then dispatched with an exhaustive ``match``.
    - Non-finite doubles degrade to strings: ``"NaN"``/``"-NaN"`` (by the sign
      bit, not the mathematical sign), ``"Infinity"``, ``"-Infinity"``.
    - BSON-only kinds are rejected at any depth. The first failure wins and no
      partial result is produced.
    - DBRefs are stored as ordinary subdocuments on the wire and are mapped as
      the object they are stored as.
"""

from __future__ import annotations

import datetime
import math
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, assert_never

from bson.binary import Binary
from bson.code import Code
from bson.datetime_ms import DatetimeMS
from bson.dbref import DBRef
from bson.decimal128 import Decimal128
from bson.int64 import Int64
from bson.max_key import MaxKey
from bson.min_key import MinKey
from bson.objectid import ObjectId
from bson.regex import Regex
from bson.son import SON
from bson.timestamp import Timestamp

from bsonjson.domain.enums.bson_kind import BsonKind
from bsonjson.domain.exceptions.conversion import UnsupportedBinaryType
from bsonjson.infrastructure.codecs.json_codec import dump_compact
from bsonjson.types import JsonObject, JsonValue

__all__ = ["bson_to_json_value", "bson_to_simple_json", "classify_bson_value"]

ROOT_PATH: Final[str] = "$"

# Exact Python type → BSON kind. Lookups use ``type(value)`` so subclasses
# (bool of int, Int64 of int, Code of str, Binary of bytes) never alias.
_KIND_BY_TYPE: Final[Mapping[type, BsonKind]] = {
    float: BsonKind.DOUBLE,
    str: BsonKind.STRING,
    dict: BsonKind.OBJECT,
    SON: BsonKind.OBJECT,
    list: BsonKind.ARRAY,
    bool: BsonKind.BOOLEAN,
    type(None): BsonKind.NULL,
    int: BsonKind.INT32,
    Int64: BsonKind.INT64,
    DBRef: BsonKind.DB_REF,
    bytes: BsonKind.BINARY,
    Binary: BsonKind.BINARY,
    ObjectId: BsonKind.OBJECT_ID,
    datetime.datetime: BsonKind.DATE,
    DatetimeMS: BsonKind.DATE,
    Regex: BsonKind.REGEX,
    Code: BsonKind.CODE,
    Timestamp: BsonKind.TIMESTAMP,
    Decimal128: BsonKind.DECIMAL128,
    MinKey: BsonKind.MIN_KEY,
    MaxKey: BsonKind.MAX_KEY,
}


def classify_bson_value(value: Any, *, path: str = ROOT_PATH) -> BsonKind:
    """Return the BSON kind of a decoded value.

    Args:
        value: Object produced by the BSON codec.
        path: Location of ``value``, used in the error details.

    Returns:
        The value's :class:`BsonKind`.

    Raises:
        UnsupportedBinaryType: If the object's type is not a known BSON kind.
    """
    kind = _KIND_BY_TYPE.get(type(value))
    if kind is None:
        raise UnsupportedBinaryType(
            f"unsupported BSON type {type(value).__name__!r} at {path}",
            details={"kind": "unknown", "path": path},
        )
    return kind


def _double_to_json(value: float) -> JsonValue:
    if math.isnan(value):
        return "-NaN" if math.copysign(1.0, value) < 0 else "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    return value


@dataclass(slots=True)
class _Frame:
    """A container whose children are still being converted."""

    children: Iterator[tuple[str | int, Any]]
    target: list[JsonValue] | JsonObject
    path: str
    is_array: bool


def _open_array(values: Sequence[Any], path: str) -> tuple[JsonValue, _Frame]:
    target: list[JsonValue] = []
    return target, _Frame(iter(enumerate(values)), target, path, is_array=True)


def _open_object(document: Mapping[str, Any], path: str) -> tuple[JsonValue, _Frame]:
    target: JsonObject = {}
    return target, _Frame(iter(document.items()), target, path, is_array=False)


def _convert_one(value: Any, path: str) -> tuple[JsonValue, _Frame | None]:
    """Convert a scalar, or open an empty container plus the frame that fills it."""
    kind = classify_bson_value(value, path=path)
    match kind:
        case BsonKind.DOUBLE:
            return _double_to_json(value), None
        case BsonKind.STRING:
            return value, None
        case BsonKind.OBJECT:
            return _open_object(value, path)
        case BsonKind.ARRAY:
            return _open_array(value, path)
        case BsonKind.BOOLEAN:
            return value, None
        case BsonKind.NULL:
            return None, None
        case BsonKind.INT32 | BsonKind.INT64:
            return int(value), None
        case BsonKind.DB_REF:
            return _open_object(value.as_doc(), path)
        case (
            BsonKind.BINARY
            | BsonKind.OBJECT_ID
            | BsonKind.DATE
            | BsonKind.REGEX
            | BsonKind.CODE
            | BsonKind.TIMESTAMP
            | BsonKind.DECIMAL128
            | BsonKind.MIN_KEY
            | BsonKind.MAX_KEY
            | BsonKind.UNDEFINED
            | BsonKind.DB_POINTER
            | BsonKind.SYMBOL
        ):
            raise UnsupportedBinaryType(
                f"unsupported BSON type {kind.value!r} at {path}",
                details={"kind": kind.value, "path": path},
            )
        case _:
            assert_never(kind)


def bson_to_json_value(value: Any) -> JsonValue:
    """Map a BSON value onto a new JSON tree.

    Traversal is depth-first and pre-order over an explicit stack, so nesting
    depth is bounded by memory rather than by the interpreter's recursion
    limit. Each container is attached to its parent before its children are
    converted, which keeps key and element order.

    Args:
        value: Decoded BSON value, typically a whole document.

    Returns:
        Equivalent JSON tree. Integers are plain ``int`` at full precision;
        objects are ``dict`` in the original key order.

    Raises:
        UnsupportedBinaryType: If the value, or anything nested in it, is of a
            kind without a JSON counterpart.
    """
    result, frame = _convert_one(value, ROOT_PATH)
    stack: list[_Frame] = [frame] if frame is not None else []
    while stack:
        top = stack[-1]
        child = next(top.children, None)
        if child is None:
            stack.pop()
            continue
        key, item = child
        child_path = f"{top.path}[{key}]" if top.is_array else f"{top.path}.{key}"
        converted, frame = _convert_one(item, child_path)
        if top.is_array:
            top.target.append(converted)  # type: ignore[union-attr]
        else:
            top.target[key] = converted  # type: ignore[index]
        if frame is not None:
            stack.append(frame)
    return result


def bson_to_simple_json(value: Any) -> str:
    """Convert a BSON value to canonical compact JSON text.

    Args:
        value: Decoded BSON value, typically a whole document.

    Returns:
        JSON text without insignificant whitespace, e.g. ``{"a":2,"b":3}``.

    Raises:
        UnsupportedBinaryType: See :func:`bson_to_json_value`.
    """
    return dump_compact(bson_to_json_value(value))
