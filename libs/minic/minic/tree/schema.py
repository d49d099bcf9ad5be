"""JSON schema for serialized ASTs."""

from __future__ import annotations

import json
from typing import Any

import jsonschema

AST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$ref": "#/$defs/node",
    "$defs": {
        "node": {
            "type": "object",
            "required": ["type", "value", "children"],
            "additionalProperties": False,
            "properties": {
                "type": {"type": "string", "minLength": 1},
                "value": {"type": "string"},
                "children": {"type": "array", "items": {"$ref": "#/$defs/node"}},
            },
        }
    },
}


def validate_document(text: str) -> dict[str, Any]:
    """Parse serialized AST text and check it against :data:`AST_SCHEMA`.

    Returns the decoded document.

    Raises:
        ValueError: *text* is not valid JSON.
        jsonschema.ValidationError: the document does not have the AST shape.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Serialized AST is not valid JSON: {e}") from e
    jsonschema.validate(instance=document, schema=AST_SCHEMA)
    return document
