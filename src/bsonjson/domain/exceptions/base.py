# src/bsonjson/domain/exceptions/base.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for every error raised by the converters and codecs,
    so the CLI boundary can report failures deterministically.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any


class BsonJsonError(Exception):
    """Base class for all bsonjson exceptions.

    Attributes:
        code:
            Stable error code suitable for logs and exit reporting.
        message:
            Human-readable error message.
        details:
            Optional machine-readable diagnostic payload used by logging code.
    """

    code: str = "BSONJSON_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        """Initialize a BsonJsonError instance.

        Args:
            message:
                Human-readable error message, safe to print to the operator.
            details:
                Optional structured diagnostic payload for logs.

        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        """Return the human-readable message for this error."""
        return self.message
