"""Documentation rendering entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from schema_docgen.configuration.runtime_settings import AutoLinkMode, EmbedMode
from schema_docgen.rendering.document_style import DocumentStyle
from schema_docgen.schema_resolution.schema_models import TypeGraph

UNRECOGNIZED_SCHEMA_WARNING = "> WETZEL_WARNING: Unrecognized JSON Schema.\n\n"
TITLE_NOT_DEFINED_WARNING = "WETZEL_WARNING: title not defined"


class DocumentationError(Exception):
    """Raised when resolver output cannot be documented."""


@dataclass(frozen=True)
class OrderedTypes:
    """Two orderings of the same type graph."""

    ascending: TypeGraph
    descending: TypeGraph


@dataclass(frozen=True)
class PropertyDescriptor:
    """Uniform summary of one property, recomputed on every render."""

    type: str
    formatted_type: str
    description: str | None
    required: str
    formatted_required: str


@dataclass(frozen=True)
class EnumEntry:
    """One allowed value of an enumeration, in declaration order."""

    value: Any
    display_name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class RenderContext:
    """Everything a renderer needs besides the fragment being rendered."""

    style: DocumentStyle
    known_types: TypeGraph
    auto_link: AutoLinkMode = AutoLinkMode.AGGRESSIVE
    suppress_warnings: bool = False
    schema_relative_base_path: str | None = None
    embed_mode: EmbedMode = EmbedMode.NONE


@dataclass(frozen=True)
class RenderedDocument:
    """One output document ready to be written."""

    stem: str
    extension: str
    body: str

    @property
    def file_name(self) -> str:
        return f"{self.stem}{self.extension}"
