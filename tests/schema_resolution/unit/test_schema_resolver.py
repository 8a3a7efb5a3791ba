"""Schema resolution service tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_docgen.schema_resolution.schema_models import SchemaDialect
from schema_docgen.schema_resolution.schema_resolver import (
    SchemaError,
    detect_dialect,
    load_schema_file,
    resolve_schema,
)


def _root_with_child() -> dict:
    return {
        "$schema": "http://json-schema.org/draft-04/schema",
        "title": "Root",
        "type": "object",
        "required": ["child"],
        "properties": {
            "child": {"$ref": "#/definitions/child"},
            "count": {"type": "integer"},
        },
        "definitions": {
            "child": {
                "title": "Root Child",
                "type": "object",
                "properties": {"name": {"type": "string"}},
            }
        },
    }


@pytest.mark.parametrize(
    ("schema_ref", "expected"),
    [
        ("http://json-schema.org/draft-03/schema", SchemaDialect.DRAFT_03),
        ("http://json-schema.org/draft-04/schema#", SchemaDialect.DRAFT_04),
        ("http://json-schema.org/draft-07/schema", SchemaDialect.DRAFT_07),
        ("https://json-schema.org/draft/2020-12/schema", SchemaDialect.DRAFT_2020_12),
        ("http://example.com/custom-dialect", SchemaDialect.UNRECOGNIZED),
    ],
)
def test_detect_dialect(schema_ref: str, expected: SchemaDialect) -> None:
    assert detect_dialect({"$schema": schema_ref}) is expected


def test_missing_dialect_is_treated_as_draft_04() -> None:
    assert detect_dialect({"title": "Root"}) is SchemaDialect.DRAFT_04


def test_local_reference_is_inlined_and_registered(tmp_path: Path) -> None:
    schema = _root_with_child()

    resolved = resolve_schema(schema, "root.schema.json", base_dir=tmp_path)

    graph = resolved.referenced_schemas
    assert graph is not None
    assert set(graph) == {"Root", "Root Child"}
    assert graph["Root"].children == ("Root Child",)
    assert graph["Root Child"].parents == ("Root",)
    assert graph["Root Child"].file_name == "root.schema.json"
    assert "typeName" not in graph["Root Child"].schema

    child = resolved.schema["properties"]["child"]
    assert child["typeName"] == "Root Child"
    assert child["properties"] == {"name": {"type": "string"}}
    assert "$ref" not in child


def test_required_array_becomes_property_flags(tmp_path: Path) -> None:
    resolved = resolve_schema(_root_with_child(), "root.schema.json", base_dir=tmp_path)

    properties = resolved.schema["properties"]
    assert properties["child"]["required"] is True
    assert "required" not in properties["count"]


def test_input_schema_is_not_mutated(tmp_path: Path) -> None:
    schema = _root_with_child()
    snapshot = json.loads(json.dumps(schema))

    resolve_schema(schema, "root.schema.json", base_dir=tmp_path)

    assert schema == snapshot


def test_draft_03_keeps_per_property_required_flags(tmp_path: Path) -> None:
    schema = {
        "$schema": "http://json-schema.org/draft-03/schema",
        "title": "Legacy",
        "type": "object",
        "properties": {
            "id": {"type": "integer", "required": True},
            "name": {"type": "string"},
        },
    }

    resolved = resolve_schema(schema, "legacy.schema.json", base_dir=tmp_path)

    assert resolved.dialect is SchemaDialect.DRAFT_03
    assert resolved.schema["properties"]["id"]["required"] is True
    assert "required" not in resolved.schema["properties"]["name"]


def test_external_reference_is_found_through_search_path(tmp_path: Path) -> None:
    schema_dir = tmp_path / "schemas"
    schema_dir.mkdir()
    (schema_dir / "item.schema.json").write_text(
        json.dumps(
            {"title": "Item", "type": "object", "properties": {"id": {"type": "string"}}}
        ),
        encoding="utf-8",
    )
    schema = {
        "title": "Catalog",
        "type": "object",
        "properties": {
            "items": {"type": "array", "items": {"$ref": "item.schema.json"}},
        },
    }

    resolved = resolve_schema(
        schema, "catalog.schema.json", search_path=["", "schemas"], base_dir=tmp_path
    )

    graph = resolved.referenced_schemas
    assert graph is not None
    assert graph["Item"].file_name == "item.schema.json"
    assert graph["Item"].parents == ("Catalog",)
    assert resolved.schema["properties"]["items"]["items"]["typeName"] == "Item"


def test_unresolvable_reference_raises(tmp_path: Path) -> None:
    schema = {"title": "Root", "properties": {"gone": {"$ref": "#/definitions/gone"}}}

    with pytest.raises(SchemaError, match="Unresolvable reference"):
        resolve_schema(schema, "root.schema.json", base_dir=tmp_path)


def test_missing_external_file_raises(tmp_path: Path) -> None:
    schema = {"title": "Root", "properties": {"gone": {"$ref": "gone.schema.json"}}}

    with pytest.raises(SchemaError, match="not found in search path"):
        resolve_schema(schema, "root.schema.json", base_dir=tmp_path)


def test_recursive_reference_is_expanded_once(tmp_path: Path) -> None:
    schema = {
        "title": "Node",
        "type": "object",
        "properties": {"next": {"$ref": "#"}},
    }

    resolved = resolve_schema(schema, "node.schema.json", base_dir=tmp_path)

    inner = resolved.schema["properties"]["next"]
    assert inner["typeName"] == "Node"
    assert inner["properties"]["next"] == {"title": "Node", "type": "object", "typeName": "Node"}
    graph = resolved.referenced_schemas
    assert graph is not None
    assert list(graph) == ["Node"]
    assert graph["Node"].parents == ()


def test_ignorable_types_are_not_registered(tmp_path: Path) -> None:
    resolved = resolve_schema(
        _root_with_child(),
        "root.schema.json",
        ignorable_types=["Root Child"],
        base_dir=tmp_path,
    )

    graph = resolved.referenced_schemas
    assert graph is not None
    assert list(graph) == ["Root"]
    assert graph["Root"].children == ()
    assert "typeName" not in resolved.schema["properties"]["child"]


def test_all_of_bases_are_merged_into_the_type(tmp_path: Path) -> None:
    schema = {
        "title": "Derived",
        "type": "object",
        "allOf": [{"$ref": "#/definitions/base"}],
        "properties": {"own": {"type": "string"}},
        "definitions": {
            "base": {
                "title": "Base",
                "type": "object",
                "required": ["id"],
                "properties": {"id": {"type": "integer"}},
            }
        },
    }

    resolved = resolve_schema(schema, "derived.schema.json", base_dir=tmp_path)

    assert list(resolved.schema["properties"]) == ["id", "own"]
    assert resolved.schema["properties"]["id"]["required"] is True
    assert "allOf" not in resolved.schema
    graph = resolved.referenced_schemas
    assert graph is not None
    assert list(graph) == ["Derived"]


def test_external_all_of_base_resolves_against_its_own_document(tmp_path: Path) -> None:
    common = tmp_path / "common"
    common.mkdir()
    (common / "base.schema.json").write_text(
        json.dumps(
            {
                "title": "Base",
                "type": "object",
                "properties": {
                    "id": {"$ref": "#/definitions/id"},
                    "tag": {"$ref": "tag.schema.json"},
                },
                "definitions": {"id": {"type": "integer", "minimum": 0}},
            }
        ),
        encoding="utf-8",
    )
    (common / "tag.schema.json").write_text(
        json.dumps({"title": "Tag", "type": "object"}), encoding="utf-8"
    )
    schema = {
        "title": "Root",
        "type": "object",
        "allOf": [{"$ref": "common/base.schema.json"}],
        "properties": {"name": {"type": "string"}},
    }

    resolved = resolve_schema(schema, "root.schema.json", base_dir=tmp_path)

    properties = resolved.schema["properties"]
    assert list(properties) == ["id", "tag", "name"]
    assert properties["id"] == {"type": "integer", "minimum": 0}
    assert properties["tag"]["typeName"] == "Tag"
    graph = resolved.referenced_schemas
    assert graph is not None
    assert graph["Tag"].file_name == "tag.schema.json"
    assert graph["Tag"].parents == ("Root",)


def test_load_schema_file_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SchemaError, match="Invalid JSON schema"):
        load_schema_file(path)


def test_load_schema_file_rejects_non_object_root(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(SchemaError, match="root must be an object"):
        load_schema_file(path)
