"""Schema resolution entity tests."""

from __future__ import annotations

import pytest
from schema_docgen.schema_resolution.schema_models import (
    SchemaKind,
    TypeEntry,
    TypeGraph,
    classify_fragment,
)


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ({"type": "string", "enum": ["a", "b"]}, SchemaKind.ENUM),
        ({"anyOf": [{"type": "integer"}, {"const": 1}]}, SchemaKind.ANY_OF_ENUM),
        ({"anyOf": [{"enum": ["x"]}, {"type": "string"}]}, SchemaKind.ANY_OF_ENUM),
        ({"anyOf": [{"type": "integer"}, {"type": "string"}]}, SchemaKind.PRIMITIVE),
        ({"type": "array", "items": {"type": "number"}}, SchemaKind.ARRAY),
        ({"type": "object"}, SchemaKind.OBJECT),
        ({"properties": {"a": {"type": "string"}}}, SchemaKind.OBJECT),
        ({"type": "number"}, SchemaKind.PRIMITIVE),
        ({}, SchemaKind.PRIMITIVE),
    ],
)
def test_classify_fragment(fragment: dict, expected: SchemaKind) -> None:
    assert classify_fragment(fragment) is expected


def test_type_graph_preserves_insertion_order() -> None:
    graph = TypeGraph(
        [
            ("b", TypeEntry(schema={}, file_name="b.json")),
            ("a", TypeEntry(schema={}, file_name="a.json")),
        ]
    )

    assert list(graph) == ["b", "a"]
    assert len(graph) == 2
    assert graph["a"].file_name == "a.json"
    assert graph.get("missing") is None


def test_type_graph_rejects_duplicate_titles() -> None:
    entry = TypeEntry(schema={}, file_name="a.json")

    with pytest.raises(ValueError, match="Duplicate type title"):
        TypeGraph([("a", entry), ("a", entry)])
