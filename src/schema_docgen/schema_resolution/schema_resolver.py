"""Schema loading and reference resolution service."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .schema_models import ResolvedSchema, SchemaDialect, TypeEntry, TypeGraph

logger = logging.getLogger(__name__)

_KNOWN_DIALECTS = {
    "http://json-schema.org/draft-03/schema": SchemaDialect.DRAFT_03,
    "http://json-schema.org/draft-04/schema": SchemaDialect.DRAFT_04,
    "http://json-schema.org/draft-07/schema": SchemaDialect.DRAFT_07,
    "https://json-schema.org/draft/2020-12/schema": SchemaDialect.DRAFT_2020_12,
}

_NESTED_SCHEMA_LISTS = ("anyOf", "oneOf")

# Position of a merged fragment: a keyword, or ("properties", name).
_Slot = tuple[str, ...]


class SchemaError(Exception):
    """Raised for schema loading or reference resolution failures."""


def load_schema_file(path: Path | str) -> dict[str, Any]:
    """Read a JSON schema document from disk."""
    schema_path = Path(path)
    try:
        text = schema_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Cannot read schema file {schema_path}: {exc}") from exc
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema {schema_path}: {exc}") from exc
    if not isinstance(root, dict):
        raise SchemaError(f"JSON schema root must be an object: {schema_path}")
    return root


def detect_dialect(schema: Mapping[str, Any]) -> SchemaDialect:
    """Map the `$schema` keyword onto a supported dialect."""
    schema_ref = schema.get("$schema")
    if not isinstance(schema_ref, str):
        return SchemaDialect.DRAFT_04
    return _KNOWN_DIALECTS.get(schema_ref.rstrip("#"), SchemaDialect.UNRECOGNIZED)


# pylint: disable=too-many-arguments
def resolve_schema(
    schema: Mapping[str, Any],
    file_name: str,
    search_path: Sequence[str] = ("",),
    ignorable_types: Sequence[str] = (),
    debug: bool = False,
    *,
    base_dir: Path | None = None,
) -> ResolvedSchema:
    """Inline `$ref`s and collect every titled type into a type graph.

    Args:
      schema: Root schema document; never mutated.
      file_name: File name of the root schema, relative to ``base_dir``.
      search_path: Directories searched in order for external references.
      ignorable_types: Titles that are never registered as documented types.
      debug: Log every dereferenced pointer.
      base_dir: Directory holding the root schema; defaults to the working directory.

    Returns:
      The resolved root schema together with its type graph.

    Raises:
      SchemaError: If a reference cannot be resolved.
    """
    dialect = detect_dialect(schema)
    root_dir = base_dir if base_dir is not None else Path.cwd()
    resolver = _ReferenceResolver(
        root_dir=root_dir,
        search_path=tuple(search_path) or ("",),
        ignorable_types=frozenset(ignorable_types),
        dialect=dialect,
        debug=debug,
    )
    document = _Document(path=(root_dir / file_name).resolve(), file_name=file_name, root=schema)
    resolved = resolver.resolve(schema, document)
    return ResolvedSchema(
        schema=resolved,
        referenced_schemas=resolver.build_type_graph(),
        dialect=dialect,
    )


# pylint: enable=too-many-arguments


@dataclass(frozen=True)
class _Document:
    path: Path
    file_name: str
    root: Mapping[str, Any]


@dataclass
class _TypeRecord:
    schema: dict[str, Any]
    file_name: str
    parents: list[str] = field(default_factory=list)


class _ReferenceResolver:
    # pylint: disable=too-many-arguments
    def __init__(
        self,
        *,
        root_dir: Path,
        search_path: tuple[str, ...],
        ignorable_types: frozenset[str],
        dialect: SchemaDialect,
        debug: bool,
    ) -> None:
        self._root_dir = root_dir
        self._search_path = search_path
        self._ignorable_types = ignorable_types
        self._dialect = dialect
        self._debug = debug
        self._documents: dict[Path, _Document] = {}
        self._types: dict[str, _TypeRecord] = {}

    def resolve(self, schema: Mapping[str, Any], document: _Document) -> dict[str, Any]:
        self._documents[document.path] = document
        return self._resolve_node(schema, document, owner=None, stack=(), is_root=True)

    def build_type_graph(self) -> TypeGraph:
        children: dict[str, list[str]] = {title: [] for title in self._types}
        for title, record in self._types.items():
            for parent in record.parents:
                if parent in children and title not in children[parent]:
                    children[parent].append(title)
        return TypeGraph(
            (
                title,
                TypeEntry(
                    schema=record.schema,
                    file_name=record.file_name,
                    parents=tuple(parent for parent in record.parents if parent in self._types),
                    children=tuple(children[title]),
                ),
            )
            for title, record in self._types.items()
        )

    def _resolve_node(
        self,
        node: Mapping[str, Any],
        document: _Document,
        *,
        owner: str | None,
        stack: tuple[str, ...],
        via_reference: bool = False,
        is_root: bool = False,
    ) -> dict[str, Any]:
        reference = node.get("$ref")
        if isinstance(reference, str):
            return self._resolve_reference(node, reference, document, owner=owner, stack=stack)

        resolved = dict(node)
        origins = self._merge_all_of(resolved, document, stack)

        title = resolved.get("title")
        registers = (
            isinstance(title, str)
            and title not in self._ignorable_types
            and (via_reference or is_root or _is_object_like(resolved))
        )
        nested_owner = title if registers else owner

        properties = resolved.get("properties")
        if isinstance(properties, Mapping):
            resolved["properties"] = {
                name: self._resolve_child(
                    child, origins.get(("properties", name), document), nested_owner, stack
                )
                for name, child in properties.items()
            }
            self._normalize_required(resolved)
        for key in ("items", "additionalProperties"):
            value = resolved.get(key)
            if isinstance(value, (Mapping, list)):
                resolved[key] = self._resolve_child(
                    value, origins.get((key,), document), nested_owner, stack
                )
        for key in _NESTED_SCHEMA_LISTS:
            value = resolved.get(key)
            if isinstance(value, list):
                resolved[key] = self._resolve_child(
                    value, origins.get((key,), document), nested_owner, stack
                )

        if registers:
            self._register(str(title), resolved, document.file_name, owner)
        return resolved

    def _resolve_child(
        self, value: Any, document: _Document, owner: str | None, stack: tuple[str, ...]
    ) -> Any:
        if isinstance(value, list):
            return [self._resolve_child(item, document, owner, stack) for item in value]
        if isinstance(value, Mapping):
            return self._resolve_node(value, document, owner=owner, stack=stack)
        return value

    def _resolve_reference(
        self,
        node: Mapping[str, Any],
        reference: str,
        document: _Document,
        *,
        owner: str | None,
        stack: tuple[str, ...],
    ) -> dict[str, Any]:
        target, target_document = self._dereference(reference, document)
        key = f"{target_document.path}#{reference.partition('#')[2]}"
        if self._debug:
            logger.debug("Resolving %s from %s", reference, document.file_name)

        if key in stack:
            placeholder = {
                name: target[name]
                for name in ("title", "typeName", "type", "description")
                if name in target
            }
            if "title" in placeholder:
                placeholder.setdefault("typeName", placeholder["title"])
            return placeholder

        resolved = self._resolve_node(
            target, target_document, owner=owner, stack=stack + (key,), via_reference=True
        )
        siblings = {name: value for name, value in node.items() if name != "$ref"}
        merged = copy.deepcopy(resolved)
        merged.update(self._resolve_node(siblings, document, owner=owner, stack=stack))
        title = resolved.get("title")
        if isinstance(title, str) and title not in self._ignorable_types:
            merged.setdefault("typeName", title)
        return merged

    def _dereference(
        self, reference: str, document: _Document
    ) -> tuple[Mapping[str, Any], _Document]:
        file_part, _, pointer = reference.partition("#")
        target_document = self._load_document(file_part, document) if file_part else document
        target: Any = target_document.root
        for token in (part for part in pointer.split("/") if part):
            token = token.replace("~1", "/").replace("~0", "~")
            if not isinstance(target, Mapping) or token not in target:
                raise SchemaError(
                    f"Unresolvable reference '{reference}' in {document.file_name}"
                )
            target = target[token]
        if not isinstance(target, Mapping):
            raise SchemaError(f"Reference '{reference}' does not point at a schema object.")
        return target, target_document

    def _load_document(self, file_part: str, referrer: _Document) -> _Document:
        candidates = [(self._root_dir / entry / file_part) for entry in self._search_path]
        candidates.append(referrer.path.parent / file_part)
        for candidate in candidates:
            resolved_path = candidate.resolve()
            if resolved_path in self._documents:
                return self._documents[resolved_path]
            if resolved_path.is_file():
                document = _Document(
                    path=resolved_path,
                    file_name=file_part,
                    root=load_schema_file(resolved_path),
                )
                self._documents[resolved_path] = document
                return document
        raise SchemaError(f"Referenced schema '{file_part}' not found in search path.")

    def _merge_all_of(
        self, resolved: dict[str, Any], document: _Document, stack: tuple[str, ...]
    ) -> dict[_Slot, _Document]:
        """Merge bases into ``resolved`` and return the document each merged fragment came from."""
        origins: dict[_Slot, _Document] = {}
        parts = resolved.pop("allOf", None)
        if self._dialect is SchemaDialect.DRAFT_03 and "extends" in resolved:
            extends = resolved.pop("extends")
            parts = extends if isinstance(extends, list) else [extends]
        if not isinstance(parts, list):
            return origins
        for part in parts:
            if not isinstance(part, Mapping):
                continue
            base, base_origins = self._flatten_base(part, document, stack)
            base_properties = base.get("properties")
            if isinstance(base_properties, Mapping):
                own_properties = resolved.get("properties")
                own_names = set(own_properties) if isinstance(own_properties, Mapping) else set()
                combined = dict(base_properties)
                if isinstance(own_properties, Mapping):
                    combined.update(own_properties)
                resolved["properties"] = combined
                for name in base_properties:
                    if name not in own_names:
                        slot = ("properties", name)
                        origins[slot] = base_origins.get(slot, document)
            base_required = base.get("required")
            own_required = resolved.get("required")
            if isinstance(base_required, list) and isinstance(own_required, list):
                resolved["required"] = own_required + [
                    name for name in base_required if name not in own_required
                ]
            for name, value in base.items():
                if name in ("properties", "title", "typeName") or name in resolved:
                    continue
                resolved[name] = value
                origins[(name,)] = base_origins.get((name,), document)
        return origins

    def _flatten_base(
        self, part: Mapping[str, Any], document: _Document, stack: tuple[str, ...]
    ) -> tuple[dict[str, Any], dict[_Slot, _Document]]:
        # Bases stay unresolved; their fragments are resolved under the merging type,
        # against the document that holds them.
        reference = part.get("$ref")
        if not isinstance(reference, str):
            base = dict(part)
            nested = self._merge_all_of(base, document, stack)
            return base, _slot_origins(base, nested, document)
        target, target_document = self._dereference(reference, document)
        key = f"{target_document.path}#{reference.partition('#')[2]}"
        if key in stack:
            return {}, {}
        base = dict(target)
        nested = self._merge_all_of(base, target_document, stack + (key,))
        origins = _slot_origins(base, nested, target_document)
        siblings = {name: value for name, value in part.items() if name != "$ref"}
        base.update(siblings)
        origins.update(_slot_origins(siblings, {}, document))
        return base, origins

    def _normalize_required(self, resolved: dict[str, Any]) -> None:
        required = resolved.get("required")
        if self._dialect is SchemaDialect.DRAFT_03 or not isinstance(required, list):
            return
        properties = dict(resolved["properties"])
        for name in required:
            if isinstance(name, str) and isinstance(properties.get(name), Mapping):
                properties[name] = {**properties[name], "required": True}
        resolved["properties"] = properties

    def _register(
        self, title: str, schema: dict[str, Any], file_name: str, parent: str | None
    ) -> None:
        record = self._types.get(title)
        if record is None:
            record = _TypeRecord(schema=schema, file_name=file_name)
            self._types[title] = record
        if parent is not None and parent != title and parent not in record.parents:
            record.parents.append(parent)


def _is_object_like(schema: Mapping[str, Any]) -> bool:
    return schema.get("type") == "object" or isinstance(schema.get("properties"), Mapping)


def _slot_origins(
    schema: Mapping[str, Any], merged: Mapping[_Slot, _Document], default: _Document
) -> dict[_Slot, _Document]:
    origins = {(name,): merged.get((name,), default) for name in schema}
    properties = schema.get("properties")
    if isinstance(properties, Mapping):
        for name in properties:
            slot = ("properties", name)
            origins[slot] = merged.get(slot, default)
    return origins
