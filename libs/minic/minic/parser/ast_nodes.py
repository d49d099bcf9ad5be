"""AST node type for the minic parser.

The tree is a single generic node type: a label, the source text it carries,
and an ordered list of children.  The parser only produces two labels, the
``Program`` root and its ``Statement`` children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from minic.diagnostics.location import SourceLocation

__all__ = [
    "PROGRAM",
    "STATEMENT",
    "AstNode",
    "program_node",
    "statement_node",
]

PROGRAM = "Program"
STATEMENT = "Statement"


@dataclass(eq=False)
class AstNode:
    """A labeled tree node.

    Each node has at most one parent.  :meth:`add_child` refuses to attach a
    node that is already owned elsewhere, so subtrees are never shared and
    the tree stays acyclic.  Children and parent are not constructor
    arguments; every child goes through :meth:`add_child`.
    """

    label: str
    text: str = ""
    children: list[AstNode] = field(default_factory=list, init=False)
    location: SourceLocation | None = None
    parent: AstNode | None = field(default=None, init=False, repr=False)

    def add_child(self, child: AstNode) -> AstNode:
        """Append *child* and take ownership of it. Returns *child*."""
        if child.parent is not None:
            raise ValueError(f"{child.label} node already belongs to a {child.parent.label} node")
        if any(node is child for node in self.ancestors(include_self=True)):
            raise ValueError(f"cannot attach {child.label} node to itself or a descendant")
        child.parent = self
        self.children.append(child)
        return child

    def ancestors(self, include_self: bool = False) -> Iterator[AstNode]:
        node = self if include_self else self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_leaf(self) -> bool:
        return not self.children


def program_node(location: SourceLocation | None = None) -> AstNode:
    """Create an empty ``Program`` root."""
    return AstNode(PROGRAM, "", location=location)


def statement_node(text: str, location: SourceLocation | None = None) -> AstNode:
    """Create a ``Statement`` node for the identifier *text*."""
    return AstNode(STATEMENT, text, location=location)
