"""Render minic ASTs as nested ``{ "type", "value", "children" }`` text.

Example::

    { "type": "Program", "value": "", "children": [{ "type": "Statement", "value": "x", "children": [] }] }

By default labels and texts are inserted verbatim.  That is only valid JSON
when they contain no quote, backslash or control characters, which holds for
everything the lexer produces.  Pass ``escape=True`` for arbitrary trees.
"""

from __future__ import annotations

import json
from typing import Any

from minic.parser.ast_nodes import AstNode


class AstSerializer:
    """Serialize a tree to its structured text form."""

    def __init__(self, escape: bool = False) -> None:
        self._escape = escape

    def _quote(self, value: str) -> str:
        if self._escape:
            return json.dumps(value)
        return f'"{value}"'

    def serialize(self, node: AstNode) -> str:
        parts: list[str] = []
        self._serialize_node(node, parts)
        return "".join(parts)

    def _serialize_node(self, node: AstNode, parts: list[str]) -> None:
        parts.append(
            f'{{ "type": {self._quote(node.label)}, "value": {self._quote(node.text)}, "children": ['
        )
        for i, child in enumerate(node.children):
            if i:
                parts.append(", ")
            self._serialize_node(child, parts)
        parts.append("] }")


def serialize(node: AstNode, *, escape: bool = False) -> str:
    """Serialize *node* with a one-off :class:`AstSerializer`."""
    return AstSerializer(escape=escape).serialize(node)


def to_dict(node: AstNode) -> dict[str, Any]:
    """Return the serialized structure as plain Python data."""
    return {
        "type": node.label,
        "value": node.text,
        "children": [to_dict(child) for child in node.children],
    }
