"""Tests for the AST node model, visitor and serializer."""

from __future__ import annotations

import io
import json

import jsonschema
import pytest

from minic.parser.ast_nodes import AstNode, program_node, statement_node
from minic.parser.parser import parse
from minic.tree.schema import validate_document
from minic.tree.serializer import AstSerializer, serialize, to_dict
from minic.tree.visitor import AstVisitor, print_trace, trace_lines, walk

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def tree(*names: str) -> AstNode:
    root = program_node()
    for name in names:
        root.add_child(statement_node(name))
    return root


def nested() -> AstNode:
    """Program -> (A -> (A1, A2), B)."""
    root = program_node()
    a = root.add_child(AstNode("A", "a"))
    a.add_child(AstNode("A1", "a1"))
    a.add_child(AstNode("A2", "a2"))
    root.add_child(AstNode("B", "b"))
    return root


# ---------------------------------------------------------------------------
# AstNode
# ---------------------------------------------------------------------------


class TestAstNode:
    def test_defaults(self) -> None:
        node = AstNode("Program")
        assert node.text == ""
        assert node.children == []
        assert node.parent is None
        assert node.is_leaf()

    def test_add_child_sets_parent(self) -> None:
        root = program_node()
        child = root.add_child(statement_node("x"))
        assert child.parent is root
        assert root.children == [child]
        assert not root.is_leaf()

    def test_child_cannot_be_shared(self) -> None:
        first, second = program_node(), program_node()
        child = first.add_child(statement_node("x"))
        with pytest.raises(ValueError, match="already belongs"):
            second.add_child(child)

    def test_cannot_attach_to_self(self) -> None:
        root = program_node()
        with pytest.raises(ValueError, match="itself or a descendant"):
            root.add_child(root)

    def test_cannot_attach_ancestor(self) -> None:
        outer = AstNode("Outer")
        inner = outer.add_child(AstNode("Inner"))
        with pytest.raises(ValueError):
            inner.add_child(outer)

    def test_children_not_accepted_by_constructor(self) -> None:
        with pytest.raises(TypeError):
            AstNode("Program", "", children=[statement_node("x")])  # type: ignore[call-arg]

    def test_parent_not_accepted_by_constructor(self) -> None:
        with pytest.raises(TypeError):
            AstNode("Statement", "x", parent=program_node())  # type: ignore[call-arg]

    def test_node_has_single_owner(self) -> None:
        leaf = statement_node("x")
        first = program_node()
        first.add_child(leaf)
        second = program_node()
        with pytest.raises(ValueError):
            second.add_child(leaf)
        assert leaf.parent is first
        assert second.children == []

    def test_ancestors(self) -> None:
        root = nested()
        leaf = root.children[0].children[1]
        assert [n.label for n in leaf.ancestors()] == ["A", "Program"]
        assert [n.label for n in leaf.ancestors(include_self=True)] == ["A2", "A", "Program"]


# ---------------------------------------------------------------------------
# Visitor
# ---------------------------------------------------------------------------


class TestVisitor:
    def test_walk_is_preorder(self) -> None:
        assert [n.label for n in walk(nested())] == ["Program", "A", "A1", "A2", "B"]

    def test_trace_lines(self) -> None:
        assert trace_lines(tree("x", "y")) == [
            "Visited node of type Program with value ",
            "Visited node of type Statement with value x",
            "Visited node of type Statement with value y",
        ]

    def test_default_action_prints(self, capsys) -> None:
        AstVisitor().visit(tree("x"))
        out = capsys.readouterr().out
        assert out == (
            "Visited node of type Program with value \n"
            "Visited node of type Statement with value x\n"
        )

    def test_one_line_per_node(self, capsys) -> None:
        root = nested()
        AstVisitor().visit(root)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == sum(1 for _ in walk(root)) == 5

    def test_custom_action(self) -> None:
        seen: list[str] = []
        AstVisitor(lambda node: seen.append(node.text)).visit(nested())
        assert seen == ["", "a", "a1", "a2", "b"]

    def test_print_trace_to_stream(self) -> None:
        buf = io.StringIO()
        print_trace(statement_node("z"), buf)
        assert buf.getvalue() == "Visited node of type Statement with value z\n"


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class TestSerializer:
    def test_leaf_program(self) -> None:
        assert serialize(program_node()) == '{ "type": "Program", "value": "", "children": [] }'

    def test_program_with_statements(self) -> None:
        assert serialize(tree("x", "y")) == (
            '{ "type": "Program", "value": "", "children": ['
            '{ "type": "Statement", "value": "x", "children": [] }, '
            '{ "type": "Statement", "value": "y", "children": [] }'
            "] }"
        )

    def test_deterministic(self) -> None:
        root = nested()
        serializer = AstSerializer()
        assert serializer.serialize(root) == serializer.serialize(root)

    def test_top_level_children_match_root(self) -> None:
        ast, _ = parse("a; b; c; d;")
        document = json.loads(serialize(ast))
        assert len(document["children"]) == len(ast.children) == 4

    def test_matches_to_dict(self) -> None:
        root = nested()
        assert json.loads(serialize(root)) == to_dict(root)

    def test_values_inserted_verbatim(self) -> None:
        root = program_node()
        root.add_child(AstNode("Statement", 'say "hi"'))
        assert '"value": "say "hi""' in serialize(root)

    def test_escape(self) -> None:
        root = program_node()
        root.add_child(AstNode("Statement", 'say "hi"\n'))
        text = serialize(root, escape=True)
        assert json.loads(text)["children"][0]["value"] == 'say "hi"\n'


class TestSchema:
    def test_parsed_program_validates(self) -> None:
        ast, _ = parse("a; b;")
        document = validate_document(serialize(ast))
        assert [c["value"] for c in document["children"]] == ["a", "b"]

    def test_nested_tree_validates(self) -> None:
        validate_document(serialize(nested()))

    def test_unescaped_quote_is_not_json(self) -> None:
        root = program_node()
        root.add_child(AstNode("Statement", '"'))
        with pytest.raises(ValueError, match="not valid JSON"):
            validate_document(serialize(root))

    def test_wrong_shape(self) -> None:
        with pytest.raises(jsonschema.ValidationError):
            validate_document('{"type": "Program", "value": ""}')
