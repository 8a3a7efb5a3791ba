"""Documentation rendering exports."""

from .auto_linking import auto_link_description, link_to_type, link_type
from .constraint_rendering import normalize_exclusivity, render_property_details
from .document_assembly import assemble_documents, render_type_document
from .documentation_models import (
    TITLE_NOT_DEFINED_WARNING,
    UNRECOGNIZED_SCHEMA_WARNING,
    DocumentationError,
    EnumEntry,
    OrderedTypes,
    PropertyDescriptor,
    RenderContext,
    RenderedDocument,
)
from .enum_resolution import render_enum_bullets, resolve_enum_entries
from .property_descriptors import array_cardinality, describe_property, get_property_type
from .type_ordering import (
    build_table_of_contents,
    document_identifier,
    order_type_graph,
    output_stem,
)

__all__ = [
    "TITLE_NOT_DEFINED_WARNING",
    "UNRECOGNIZED_SCHEMA_WARNING",
    "DocumentationError",
    "EnumEntry",
    "OrderedTypes",
    "PropertyDescriptor",
    "RenderContext",
    "RenderedDocument",
    "array_cardinality",
    "assemble_documents",
    "auto_link_description",
    "build_table_of_contents",
    "describe_property",
    "document_identifier",
    "get_property_type",
    "link_to_type",
    "link_type",
    "normalize_exclusivity",
    "order_type_graph",
    "output_stem",
    "render_enum_bullets",
    "render_property_details",
    "render_type_document",
    "resolve_enum_entries",
]
