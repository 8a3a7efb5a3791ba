"""Rendering style exports."""

from .document_style import DocumentStyle, join_schema_path, literal_text

__all__ = [
    "DocumentStyle",
    "join_schema_path",
    "literal_text",
]
