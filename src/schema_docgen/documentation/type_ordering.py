"""Type graph ordering and table of contents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from schema_docgen.rendering.document_style import DocumentStyle
from schema_docgen.schema_resolution.schema_models import ResolvedSchema, TypeGraph

from .documentation_models import DocumentationError, OrderedTypes


def order_type_graph(resolved: ResolvedSchema) -> OrderedTypes:
    """Sort types by title and every children list, ascending and descending."""
    graph = resolved.referenced_schemas
    if graph is None:
        raise DocumentationError("Resolver output is missing referenced schemas.")

    titles = sorted(graph)
    ascending = TypeGraph(
        (title, replace(graph[title], children=tuple(sorted(graph[title].children))))
        for title in titles
    )
    # Reverse title order puts "Foo Bar" ahead of "Foo", so auto-linking matches the longest name.
    descending = TypeGraph((title, ascending[title]) for title in reversed(titles))
    return OrderedTypes(ascending=ascending, descending=descending)


def document_identifier(title: str, schema: Mapping[str, Any]) -> str:
    type_name = schema.get("typeName")
    if isinstance(type_name, str) and type_name:
        return type_name
    return title.lower().replace(" ", ".")


def output_stem(title: str, schema: Mapping[str, Any]) -> str:
    type_name = schema.get("typeName")
    if isinstance(type_name, str) and type_name:
        return type_name
    return title.lower()


def build_table_of_contents(
    root_schema: Mapping[str, Any],
    ordered_types: TypeGraph,
    style: DocumentStyle,
    header_level: int,
) -> str:
    """Render a nested outline of every documented type.

    The root, types with several parents and direct children of the root are reachable
    from the top level. Children are nested under a listed type only when that type is
    their single parent; children of the root are nested under the root entry.
    """
    root_title = root_schema.get("title")
    md = f"{style.header(header_level)} Objects\n"
    for title, entry in ordered_types.items():
        is_root = title == root_title
        nested_under_root = len(entry.parents) == 1 and entry.parents[0] == root_title
        if not (is_root or len(entry.parents) > 1 or root_title in entry.parents):
            continue
        if nested_under_root and root_title in ordered_types:
            continue
        item = style.toc_link(title, document_identifier(title, entry.schema))
        if is_root:
            item += " (root object)"
        md += style.bullet(item)
        md += _nested_entries(ordered_types, title, 1, style, visited={title})
    return md


def _nested_entries(
    ordered_types: TypeGraph,
    parent_title: str,
    depth: int,
    style: DocumentStyle,
    *,
    visited: set[str],
) -> str:
    md = ""
    for child_title in ordered_types[parent_title].children:
        child = ordered_types.get(child_title)
        if child is None or len(child.parents) != 1 or child_title in visited:
            continue
        label = child_title.removeprefix(f"{parent_title} ")
        md += style.bullet(
            style.toc_link(label, document_identifier(child_title, child.schema)), depth
        )
        md += _nested_entries(
            ordered_types, child_title, depth + 1, style, visited=visited | {child_title}
        )
    return md
