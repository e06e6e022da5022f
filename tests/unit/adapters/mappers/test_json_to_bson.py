from __future__ import annotations

from typing import Any

import bson
import pytest
from bson.errors import InvalidDocument
from bson.int64 import Int64

from bsonjson.adapters.mappers.bson_to_json import bson_to_simple_json
from bsonjson.adapters.mappers.json_to_bson import json_into_bson
from bsonjson.domain.exceptions.conversion import UnsupportedJsonType
from bsonjson.infrastructure.codecs.bson_codec import read_document
from bsonjson.infrastructure.codecs.json_codec import load_json


def test_encode_then_decode_yields_compact_json() -> None:
    payload = json_into_bson(load_json(b'{"x": 1}'))
    assert bson_to_simple_json(read_document(payload)) == '{"x":1}'


def test_encoded_bytes_are_a_single_document() -> None:
    payload = json_into_bson({"x": 1})
    assert payload == bson.encode({"x": 1})
    assert int.from_bytes(payload[:4], "little") == len(payload)


def test_numeric_inference_is_the_codecs() -> None:
    decoded = bson.decode(json_into_bson({"a": 1, "b": 2**40, "c": 1.5, "d": -(2**31)}))
    assert type(decoded["a"]) is int
    assert type(decoded["b"]) is Int64
    assert type(decoded["c"]) is float
    assert type(decoded["d"]) is int


def test_nested_tree_round_trips_in_order() -> None:
    text = '{"s":"é","n":null,"t":true,"arr":[1,2.5,"bar",[]],"obj":{"z":{},"a":-1}}'
    payload = json_into_bson(load_json(text.encode()))
    assert bson_to_simple_json(read_document(payload)) == text


@pytest.mark.parametrize("value", [[1, 2], "x", 1, 1.5, True, None])
def test_non_object_top_level_is_rejected(value: Any) -> None:
    with pytest.raises(UnsupportedJsonType, match="must be an object"):
        json_into_bson(value)


@pytest.mark.parametrize("number", [2**63, -(2**63) - 1, 2**64])
def test_integer_outside_int64_is_rejected(number: int) -> None:
    with pytest.raises(UnsupportedJsonType) as excinfo:
        json_into_bson({"a": number})
    assert isinstance(excinfo.value.__cause__, OverflowError)


def test_int64_bounds_are_accepted() -> None:
    decoded = bson.decode(json_into_bson({"max": 2**63 - 1, "min": -(2**63)}))
    assert decoded == {"max": 2**63 - 1, "min": -(2**63)}


def test_key_with_nul_is_rejected() -> None:
    with pytest.raises(UnsupportedJsonType) as excinfo:
        json_into_bson({"a\x00b": 1})
    assert isinstance(excinfo.value.__cause__, InvalidDocument)
    assert excinfo.value.code == "UNSUPPORTED_JSON_TYPE"


def test_nested_nul_key_is_rejected() -> None:
    with pytest.raises(UnsupportedJsonType):
        json_into_bson({"outer": [{"in\x00ner": 1}]})


def test_nesting_beyond_codec_recursion_is_rejected() -> None:
    value: dict[str, Any] = {}
    for _ in range(50_000):
        value = {"a": value}
    with pytest.raises(UnsupportedJsonType) as excinfo:
        json_into_bson(value)
    assert isinstance(excinfo.value.__cause__, RecursionError)
