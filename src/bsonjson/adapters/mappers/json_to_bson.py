# src/bsonjson/adapters/mappers/json_to_bson.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""JSON → BSON mapping adapter.

Every JSON shape has a direct BSON counterpart, so building the document and
serializing it is left entirely to the BSON codec. Whatever the codec rejects
is reported uniformly as :class:`UnsupportedJsonType`.
"""

from __future__ import annotations

from collections.abc import Mapping

from bson.errors import InvalidDocument

from bsonjson.domain.exceptions.conversion import UnsupportedJsonType
from bsonjson.infrastructure.codecs.bson_codec import write_document
from bsonjson.types import JsonValue

__all__ = ["json_into_bson"]


def json_into_bson(value: JsonValue) -> bytes:
    """Encode a JSON tree as BSON document bytes.

    Args:
        value: Parsed JSON tree. The top level must be an object, since a BSON
            stream is a sequence of documents.

    Returns:
        BSON bytes of one document.

    Raises:
        UnsupportedJsonType: If the tree cannot be represented as, or
            serialized to, a BSON document (non-object top level, integers
            outside the signed 64-bit range, keys containing NUL, nesting
            deeper than the codec can recurse).
    """
    if not isinstance(value, Mapping):
        raise UnsupportedJsonType(
            f"top-level JSON value must be an object, got {type(value).__name__}",
            details={"json_type": type(value).__name__},
        )
    try:
        return write_document(value)
    except (InvalidDocument, TypeError, OverflowError, ValueError, RecursionError) as exc:
        raise UnsupportedJsonType(
            f"cannot encode JSON as BSON: {exc}",
            details={"cause": type(exc).__name__},
        ) from exc
