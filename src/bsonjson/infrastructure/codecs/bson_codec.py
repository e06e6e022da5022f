# src/bsonjson/infrastructure/codecs/bson_codec.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""BSON codec wrapper.

Purpose:
    Parse raw bytes into a BSON document object graph and serialize mappings
    back to BSON bytes, using PyMongo's ``bson`` package as the wire codec.

Layer:
    infrastructure/codecs

Notes:
    - Documents decode into ``dict`` (insertion ordered), 64-bit integers into
      :class:`bson.int64.Int64`, so 32/64-bit integers stay distinguishable.
    - Dates outside the ``datetime`` range decode to ``DatetimeMS`` rather than
      failing the parse; the converter rejects dates either way.
    - The codec silently maps the deprecated undefined, dbPointer and symbol
      elements onto null, DBRef and ``str``. Those element types are only
      visible in the raw bytes, so they are rejected by a scan of the element
      type bytes after the codec has validated the document.
    - Only the first document is read; trailing bytes are ignored.
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import Any, Final

import bson
from bson.codec_options import CodecOptions, DatetimeConversion
from bson.errors import BSONError

from bsonjson.domain.enums.bson_kind import BsonKind
from bsonjson.domain.exceptions.codec import MalformedBsonInput
from bsonjson.domain.exceptions.conversion import UnsupportedBinaryType

__all__ = ["CODEC_OPTIONS", "read_document", "write_document"]

CODEC_OPTIONS: Final[CodecOptions[dict[str, Any]]] = CodecOptions(
    document_class=dict,
    tz_aware=False,
    datetime_conversion=DatetimeConversion.DATETIME_AUTO,
)

_ROOT_PATH: Final[str] = "$"

# Element type byte → kind, for element types the codec decodes lossily.
_DEPRECATED_KINDS: Final[Mapping[int, BsonKind]] = {
    0x06: BsonKind.UNDEFINED,
    0x0C: BsonKind.DB_POINTER,
    0x0E: BsonKind.SYMBOL,
}

# Element type byte → value width in bytes.
_FIXED_WIDTH: Final[Mapping[int, int]] = {
    0x01: 8,  # double
    0x07: 12,  # objectId
    0x08: 1,  # bool
    0x09: 8,  # date
    0x0A: 0,  # null
    0x10: 4,  # int
    0x11: 8,  # timestamp
    0x12: 8,  # long
    0x13: 16,  # decimal
    0x7F: 0,  # maxKey
    0xFF: 0,  # minKey
}

_EMBEDDED_DOCUMENT = 0x03
_EMBEDDED_ARRAY = 0x04


def _int32(data: bytes, pos: int) -> int:
    return int.from_bytes(data[pos : pos + 4], "little", signed=True)


def _value_width(element_type: int, data: bytes, pos: int) -> int:
    """Return the byte width of the value starting at ``pos``."""
    width = _FIXED_WIDTH.get(element_type)
    if width is not None:
        return width
    if element_type in (0x02, 0x0D):  # string, javascript
        return 4 + _int32(data, pos)
    if element_type == 0x05:  # binData: length, subtype, payload
        return 5 + _int32(data, pos)
    if element_type == 0x0B:  # regex: pattern and options cstrings
        options_at = data.index(b"\x00", pos) + 1
        return data.index(b"\x00", options_at) + 1 - pos
    if element_type == 0x0F:  # javascript with scope: total length
        return _int32(data, pos)
    raise MalformedBsonInput(
        f"unknown BSON element type 0x{element_type:02x}", details={"offset": pos - 1}
    )


def _find_deprecated_element(data: bytes) -> tuple[BsonKind, str] | None:
    """Walk the element type bytes of a validated document.

    Embedded documents and arrays are laid out inline, so one linear pass
    visits every element in pre-order; a ``0x00`` type byte closes the
    innermost open document.

    Args:
        data: Bytes of exactly one well-formed BSON document.

    Returns:
        Kind and path of the first deprecated element, or ``None``.
    """
    end = _int32(data, 0)
    pos = 4
    parents: list[tuple[str, bool]] = [(_ROOT_PATH, False)]
    while pos < end:
        element_type = data[pos]
        pos += 1
        if element_type == 0x00:
            parents.pop()
            continue

        name_end = data.index(b"\x00", pos)
        name = data[pos:name_end].decode("utf-8")
        pos = name_end + 1
        parent_path, parent_is_array = parents[-1]
        path = f"{parent_path}[{name}]" if parent_is_array else f"{parent_path}.{name}"

        kind = _DEPRECATED_KINDS.get(element_type)
        if kind is not None:
            return kind, path
        if element_type in (_EMBEDDED_DOCUMENT, _EMBEDDED_ARRAY):
            parents.append((path, element_type == _EMBEDDED_ARRAY))
            pos += 4
            continue
        pos += _value_width(element_type, data, pos)
    return None


def read_document(data: bytes) -> dict[str, Any]:
    """Decode the first BSON document contained in ``data``.

    Args:
        data: Raw BSON bytes (little-endian length-prefixed document).

    Returns:
        The decoded top-level document.

    Raises:
        MalformedBsonInput: If ``data`` is empty, truncated or corrupt.
        UnsupportedBinaryType: If the document holds an undefined, dbPointer
            or symbol element at any depth.
    """
    try:
        document = next(bson.decode_file_iter(io.BytesIO(data), codec_options=CODEC_OPTIONS), None)
    except (BSONError, ValueError, RecursionError) as exc:
        raise MalformedBsonInput(
            f"invalid BSON document: {exc}", details={"size": len(data)}
        ) from exc
    if document is None:
        raise MalformedBsonInput("no BSON document in input", details={"size": 0})

    found = _find_deprecated_element(data[: _int32(data, 0)])
    if found is not None:
        kind, path = found
        raise UnsupportedBinaryType(
            f"unsupported BSON type {kind.value!r} at {path}",
            details={"kind": kind.value, "path": path},
        )
    return document


def write_document(document: Mapping[str, Any]) -> bytes:
    """Serialize a mapping as BSON bytes.

    Numeric type inference is the codec's: ``int`` within 32 bits becomes
    ``int``, wider integers become ``long``, ``float`` becomes ``double``.

    Args:
        document: Mapping to encode.

    Returns:
        BSON bytes.

    Raises:
        bson.errors.InvalidDocument, TypeError, OverflowError: Propagated from
            the codec when the mapping cannot be encoded.
    """
    return bson.encode(document, codec_options=CODEC_OPTIONS)
