# src/bsonjson/infrastructure/codecs/json_codec.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""JSON codec wrapper.

Strict parsing of raw input into a JSON tree, and the canonical compact
serialization used for decode output.
"""

from __future__ import annotations

import json
import math
from typing import NoReturn

from bsonjson.domain.exceptions.codec import MalformedJsonInput
from bsonjson.types import JsonValue

__all__ = ["dump_compact", "load_json"]

_COMPACT_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {name!r}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def load_json(data: bytes) -> JsonValue:
    """Parse strict JSON from raw bytes.

    The encoding (UTF-8, UTF-16 or UTF-32) is detected from the bytes. The
    ``NaN``/``Infinity`` literals and numbers overflowing a double are rejected.

    Args:
        data: Raw JSON text bytes.

    Returns:
        Parsed JSON tree.

    Raises:
        MalformedJsonInput: If the input is not valid JSON.
    """
    try:
        return json.loads(
            data,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (ValueError, RecursionError) as exc:
        raise MalformedJsonInput(
            f"invalid JSON: {exc}", details={"size": len(data)}
        ) from exc


def dump_compact(value: JsonValue) -> str:
    """Serialize a JSON tree in canonical compact form.

    No whitespace is inserted, keys and elements keep construction order and
    non-ASCII text is emitted as-is.

    Raises:
        ValueError: If ``value`` contains a non-finite float.
    """
    return json.dumps(
        value,
        separators=_COMPACT_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )
