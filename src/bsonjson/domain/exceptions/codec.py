# src/bsonjson/domain/exceptions/codec.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Input parsing exceptions.

Raised by the codec wrappers when raw input bytes cannot be parsed into an
object graph. These are not conversion errors: they happen before either
converter runs.
"""

from __future__ import annotations

from bsonjson.domain.exceptions.base import BsonJsonError


class MalformedInputError(BsonJsonError):
    """Base class for input that the external codecs could not parse."""

    code = "MALFORMED_INPUT"


class MalformedBsonInput(MalformedInputError):
    """Raised when input bytes are not a valid BSON document."""

    code = "MALFORMED_BSON"


class MalformedJsonInput(MalformedInputError):
    """Raised when input bytes are not valid, strict JSON."""

    code = "MALFORMED_JSON"
