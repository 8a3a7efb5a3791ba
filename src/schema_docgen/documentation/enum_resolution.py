"""Enumeration extraction from `enum` arrays and `anyOf` branches."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_docgen.rendering.document_style import DocumentStyle
from schema_docgen.schema_resolution.schema_models import SchemaKind, classify_fragment

from .documentation_models import EnumEntry

ENUM_NAMES_KEY = "gltf_enumNames"


def resolve_enum_entries(schema: Mapping[str, Any]) -> list[EnumEntry] | None:
    """Return the allowed values of ``schema``, or None when it is not an enumeration."""
    kind = classify_fragment(schema)
    if kind is SchemaKind.ENUM:
        return _direct_entries(schema)
    if kind is SchemaKind.ANY_OF_ENUM:
        return _any_of_entries(schema["anyOf"])
    return None


def render_enum_bullets(
    schema: Mapping[str, Any], type_name: str, depth: int, style: DocumentStyle
) -> str | None:
    """Render one bullet per allowed value at the given depth."""
    entries = resolve_enum_entries(schema)
    if entries is None:
        return None

    md = ""
    for entry in entries:
        text = style.literal(entry.value, type_name)
        if entry.display_name is not None:
            text += f" {entry.display_name}"
        if entry.description is not None:
            text += f" {entry.description}"
        md += style.bullet(text, depth)
    return md


def _direct_entries(schema: Mapping[str, Any]) -> list[EnumEntry]:
    names = schema.get(ENUM_NAMES_KEY)
    if not isinstance(names, list):
        names = []
    # Names pair with values by position; a missing name leaves the value unnamed.
    return [
        EnumEntry(value=value, display_name=str(names[index]) if index < len(names) else None)
        for index, value in enumerate(schema["enum"])
    ]


def _any_of_entries(branches: list[Any]) -> list[EnumEntry]:
    entries = []
    for branch in branches:
        if not isinstance(branch, Mapping):
            continue
        if "const" in branch:
            value = branch["const"]
        else:
            values = branch.get("enum")
            # Typically the branch that only carries the value `type`.
            if not isinstance(values, list) or not values:
                continue
            value = values[0]
        description = branch.get("description")
        if not isinstance(description, str):
            description = None
        entries.append(EnumEntry(value=value, description=description))
    return entries
