"""Project-wide JSON typing helpers.

These aliases model the JSON tree produced and consumed by the converters.
``dict`` preserves insertion order, so object key order survives construction,
traversal and serialization.
"""

from __future__ import annotations

type JsonPrimitive = None | bool | int | float | str
type JsonValue = JsonPrimitive | list[JsonValue] | dict[str, JsonValue]
type JsonObject = dict[str, JsonValue]

__all__ = ["JsonObject", "JsonPrimitive", "JsonValue"]
