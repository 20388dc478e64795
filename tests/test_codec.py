import base64
import json
import zlib

import pytest

from factorio_printer.codec import (
    EXCHANGE_STRING_VERSION,
    build_document,
    encode_exchange_string,
    serialize_blueprints,
    to_json,
)
from factorio_printer.schema import Blueprint


def _decode(text: str) -> dict:
    assert text[0] == "0"
    return json.loads(zlib.decompress(base64.b64decode(text[1:])).decode("utf-8"))


def test_exchange_string_is_version_prefixed_base64_zlib() -> None:
    document = {"blueprint": {"item": "blueprint", "label": "x"}}

    text = encode_exchange_string(document)

    assert text.startswith(EXCHANGE_STRING_VERSION)
    assert _decode(text) == document


def test_json_is_compact() -> None:
    assert to_json({"a": [1, 2], "b": {"c": "d"}}) == '{"a":[1,2],"b":{"c":"d"}}'


def test_single_blueprint_is_not_wrapped_in_a_book() -> None:
    bp = Blueprint(label="only")
    bp.add_entity("stone-wall", 0, 0)

    data = _decode(serialize_blueprints([bp], "book label"))

    assert list(data) == ["blueprint"]
    assert data["blueprint"]["label"] == "only"


def test_several_blueprints_become_a_book() -> None:
    blueprints = [Blueprint(label=f"cell {i}") for i in range(4)]

    data = _decode(serialize_blueprints(blueprints, "my book"))

    assert list(data) == ["blueprint_book"]
    book = data["blueprint_book"]
    assert book["label"] == "my book"
    assert [entry["index"] for entry in book["blueprints"]] == [0, 1, 2, 3]
    assert book["active_index"] == 0
    assert book["version"] == 0


def test_build_document_requires_blueprints() -> None:
    with pytest.raises(ValueError):
        build_document([], "empty")
