"""Exchange string encoding: JSON, zlib DEFLATE, base64, version prefix."""

from __future__ import annotations

import base64
import json
import zlib
from typing import Any, Dict, Sequence

from .schema import Blueprint, BlueprintBook

EXCHANGE_STRING_VERSION = "0"


def build_document(blueprints: Sequence[Blueprint], label: str) -> Dict[str, Any]:
    """Return the JSON document for ``blueprints``.

    A single blueprint is exported on its own. Several are wrapped in a
    blueprint book labelled ``label``, each tagged with its position.
    """

    if not blueprints:
        raise ValueError("At least one blueprint is required")
    if len(blueprints) == 1:
        return blueprints[0].to_dict()
    book = BlueprintBook(label=label)
    for blueprint in blueprints:
        book.add_blueprint(blueprint)
    return book.to_dict()


def to_json(document: Dict[str, Any]) -> str:
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def encode_exchange_string(document: Dict[str, Any]) -> str:
    compressed = zlib.compress(to_json(document).encode("utf-8"), zlib.Z_DEFAULT_COMPRESSION)
    return EXCHANGE_STRING_VERSION + base64.b64encode(compressed).decode("ascii")


def serialize_blueprints(blueprints: Sequence[Blueprint], label: str) -> str:
    return encode_exchange_string(build_document(blueprints, label))
