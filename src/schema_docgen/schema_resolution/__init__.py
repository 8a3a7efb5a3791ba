"""Schema resolution exports."""

from .schema_models import (
    ResolvedSchema,
    SchemaDialect,
    SchemaKind,
    TypeEntry,
    TypeGraph,
    classify_fragment,
)
from .schema_resolver import SchemaError, detect_dialect, load_schema_file, resolve_schema

__all__ = [
    "ResolvedSchema",
    "SchemaDialect",
    "SchemaKind",
    "TypeEntry",
    "TypeGraph",
    "classify_fragment",
    "SchemaError",
    "detect_dialect",
    "load_schema_file",
    "resolve_schema",
]
