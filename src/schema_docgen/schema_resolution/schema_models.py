"""Schema resolution entities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class SchemaDialect(str, Enum):
    """JSON Schema dialect detected from the root `$schema` keyword."""

    DRAFT_03 = "draft-03"
    DRAFT_04 = "draft-04"
    DRAFT_07 = "draft-07"
    DRAFT_2020_12 = "2020-12"
    UNRECOGNIZED = "unrecognized"


class SchemaKind(str, Enum):
    """Shape of a schema fragment as seen by the documentation renderers."""

    PRIMITIVE = "primitive"
    OBJECT = "object"
    ARRAY = "array"
    ENUM = "enum"
    ANY_OF_ENUM = "anyOfEnum"


@dataclass(frozen=True)
class TypeEntry:
    """One documented type of the resolved type graph."""

    schema: Mapping[str, Any]
    file_name: str
    parents: tuple[str, ...] = ()
    children: tuple[str, ...] = ()


class TypeGraph(Mapping[str, TypeEntry]):
    """Read-only, title-keyed map of type entries.

    Iteration follows the order in which entries were supplied; titles are unique.
    """

    def __init__(self, entries: Iterable[tuple[str, TypeEntry]] = ()) -> None:
        self._entries: dict[str, TypeEntry] = {}
        for title, entry in entries:
            if title in self._entries:
                raise ValueError(f"Duplicate type title: {title}")
            self._entries[title] = entry

    def __getitem__(self, title: str) -> TypeEntry:
        return self._entries[title]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TypeGraph({list(self._entries)!r})"


@dataclass(frozen=True)
class ResolvedSchema:
    """Resolver output consumed by the documentation pipeline."""

    schema: Mapping[str, Any]
    referenced_schemas: TypeGraph | None
    dialect: SchemaDialect = SchemaDialect.DRAFT_04


def classify_fragment(node: Mapping[str, Any]) -> SchemaKind:
    """Resolve the shape of a schema fragment once, from its keywords."""
    if isinstance(node.get("enum"), list):
        return SchemaKind.ENUM
    any_of = node.get("anyOf")
    if isinstance(any_of, list) and any(_is_enum_branch(branch) for branch in any_of):
        return SchemaKind.ANY_OF_ENUM
    if node.get("type") == "array":
        return SchemaKind.ARRAY
    if node.get("type") == "object" or isinstance(node.get("properties"), Mapping):
        return SchemaKind.OBJECT
    return SchemaKind.PRIMITIVE


def _is_enum_branch(branch: Any) -> bool:
    if not isinstance(branch, Mapping):
        return False
    if "const" in branch:
        return True
    values = branch.get("enum")
    return isinstance(values, list) and len(values) > 0
