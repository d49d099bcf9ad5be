"""Pre-order traversal of minic ASTs."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, TextIO

from minic.parser.ast_nodes import AstNode

VisitAction = Callable[[AstNode], None]


def walk(node: AstNode) -> Iterator[AstNode]:
    """Yield *node* and its descendants in pre-order, left to right."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def format_trace(node: AstNode) -> str:
    return f"Visited node of type {node.label} with value {node.text}"


def trace_lines(node: AstNode) -> list[str]:
    """Return the trace line of every node, in visiting order."""
    return [format_trace(n) for n in walk(node)]


def print_trace(node: AstNode, stream: TextIO | None = None) -> None:
    """Write the trace line for a single node (stdout by default)."""
    print(format_trace(node), file=stream or sys.stdout)


class AstVisitor:
    """Apply an action to every node of a tree in pre-order.

    The action is any callable taking a node; it defaults to
    :func:`print_trace`.
    """

    def __init__(self, action: VisitAction | None = None) -> None:
        self._action = action or print_trace

    def visit(self, node: AstNode) -> None:
        for current in walk(node):
            self._action(current)
