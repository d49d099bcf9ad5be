"""
Conformance: Serialization and trace output shapes
"""
import json

import pytest


EMPTY_PROGRAM = '{ "type": "Program", "value": "", "children": [] }'

CASES = [
    ("empty", "", EMPTY_PROGRAM),
    ("all_errors", "x y", EMPTY_PROGRAM),
    (
        "one_statement",
        "x;",
        '{ "type": "Program", "value": "", "children": ['
        '{ "type": "Statement", "value": "x", "children": [] }] }',
    ),
    (
        "two_statements",
        "a; b;",
        '{ "type": "Program", "value": "", "children": ['
        '{ "type": "Statement", "value": "a", "children": [] }, '
        '{ "type": "Statement", "value": "b", "children": [] }] }',
    ),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_serialized_shape(runner, description, source, expected):
    """The serialized AST has the exact documented layout."""
    result = runner.validate(source)
    assert result.serialized == expected


@pytest.mark.parametrize("source", ["", "a;", "a; b; c;", "a b; c"])
def test_trace_matches_tree(runner, source):
    """One trace line per node; the root's children match the serialized array."""
    result = runner.validate(source)
    document = json.loads(result.serialized)
    assert len(result.trace) == 1 + len(result.statements)
    assert result.trace[0] == "Visited node of type Program with value "
    assert len(document["children"]) == len(result.statements)
