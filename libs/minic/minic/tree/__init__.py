"""minic tree subpackage (Layer 2 -- traversal and serialization of parsed ASTs)."""

from minic.tree.schema import AST_SCHEMA, validate_document
from minic.tree.serializer import AstSerializer, serialize, to_dict
from minic.tree.visitor import AstVisitor, format_trace, print_trace, trace_lines, walk

__all__ = [
    "AstVisitor",
    "walk",
    "format_trace",
    "print_trace",
    "trace_lines",
    "AstSerializer",
    "serialize",
    "to_dict",
    "AST_SCHEMA",
    "validate_document",
]
