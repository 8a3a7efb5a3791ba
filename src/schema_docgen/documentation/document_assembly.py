"""Per-type document assembly."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_docgen.configuration.runtime_settings import EmbedMode, GenerationSettings
from schema_docgen.rendering.document_style import DocumentStyle, join_schema_path
from schema_docgen.schema_resolution.schema_models import ResolvedSchema, SchemaDialect

from .auto_linking import auto_link_description
from .constraint_rendering import WEBGL_KEY, render_property_details
from .documentation_models import (
    TITLE_NOT_DEFINED_WARNING,
    UNRECOGNIZED_SCHEMA_WARNING,
    RenderContext,
    RenderedDocument,
)
from .property_descriptors import describe_property
from .type_ordering import (
    build_table_of_contents,
    document_identifier,
    order_type_graph,
    output_stem,
)

logger = logging.getLogger(__name__)

SECTION_DESCRIPTION_KEY = "gltf_sectionDescription"
TOC_DOCUMENT_STEM = "toc"
_SUMMARY_COLUMNS = ("Property", "Type", "Description", "Required")


def assemble_documents(
    resolved: ResolvedSchema, settings: GenerationSettings
) -> list[RenderedDocument]:
    """Render one document per referenced type, plus the table of contents when requested."""
    ordered = order_type_graph(resolved)
    style = DocumentStyle(settings.style)
    context = RenderContext(
        style=style,
        known_types=ordered.descending,
        auto_link=settings.auto_link,
        suppress_warnings=settings.suppress_warnings,
        schema_relative_base_path=settings.schema_relative_base_path,
        embed_mode=settings.embed_mode,
    )

    prefix = ""
    if resolved.dialect is SchemaDialect.UNRECOGNIZED and not settings.suppress_warnings:
        prefix = UNRECOGNIZED_SCHEMA_WARNING

    documents: list[RenderedDocument] = []
    if settings.write_toc:
        toc = build_table_of_contents(
            resolved.schema, ordered.ascending, style, settings.header_level
        )
        documents.append(RenderedDocument(TOC_DOCUMENT_STEM, style.file_extension, prefix + toc))

    for title, entry in ordered.ascending.items():
        body = render_type_document(
            entry.schema, entry.file_name, settings.header_level + 1, context
        )
        if not body:
            logger.debug("Skipping empty document for %s", title)
            continue
        documents.append(
            RenderedDocument(output_stem(title, entry.schema), style.file_extension, prefix + body)
        )
    return documents


def render_type_document(
    schema: Mapping[str, Any] | None, file_name: str, level: int, context: RenderContext
) -> str:
    """Render the full body of one type's document."""
    if schema is None:
        return ""

    style = context.style
    title = _display_title(schema, context)
    identifier = document_identifier(title, schema)
    md = style.section(title, identifier, level)

    if context.embed_mode is EmbedMode.WRITE_INCLUDE_STATEMENTS:
        return md + style.embed_include(file_name, context.schema_relative_base_path)

    description = auto_link_description(schema.get("description"), context)
    if description is not None:
        md += f"{description}\n\n"
    extended = auto_link_description(schema.get(SECTION_DESCRIPTION_KEY), context)
    if extended is not None:
        md += f"{extended}\n\n"
    webgl = schema.get(WEBGL_KEY)
    if webgl is not None:
        md += f"{style.detail_label('Related WebGL functions')}: {webgl}\n\n"

    if schema.get("type") == "object":
        properties = schema.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}
        md += _properties_summary(properties, context)
        if schema.get("additionalProperties") is False:
            md += "Additional properties are not allowed.\n\n"
        else:
            md += "Additional properties are allowed.\n\n"
        md += _schema_reference(file_name, identifier, context)
        md += _properties_details(properties, level + 1, context)

    md += _examples(schema, level + 1, context)
    return md


def _display_title(schema: Mapping[str, Any], context: RenderContext) -> str:
    title = schema.get("title")
    if isinstance(title, str):
        return title
    logger.warning("Schema without title: %s", schema.get("description", "<no description>"))
    return "" if context.suppress_warnings else TITLE_NOT_DEFINED_WARNING


def _properties_summary(properties: Mapping[str, Any], context: RenderContext) -> str:
    if not properties:
        return ""

    style = context.style
    md = style.begin_table(_SUMMARY_COLUMNS)
    for name, value in properties.items():
        property_schema = _property_fragment(value)
        if property_schema is None:
            continue
        descriptor = describe_property(property_schema, context)
        md += style.table_row(
            [
                style.property_name(name),
                descriptor.formatted_type,
                descriptor.description or "",
                descriptor.formatted_required,
            ]
        )
    md += style.end_table()
    return md


def _schema_reference(file_name: str, identifier: str, context: RenderContext) -> str:
    style = context.style
    label = style.bold("JSON schema")
    if context.embed_mode is EmbedMode.REFERENCE_INCLUDE_DOCUMENT:
        return style.bullet(f"{label}: {style.schema_embed_link(file_name, identifier)}") + "\n"
    if context.schema_relative_base_path is not None:
        target = join_schema_path(context.schema_relative_base_path, file_name)
        return style.bullet(f"{label}: {style.link(file_name, target)}") + "\n"
    return ""


def _properties_details(
    properties: Mapping[str, Any], level: int, context: RenderContext
) -> str:
    if not properties:
        return ""

    md = f"{context.style.header(level)} Properties\n\n"
    for name, value in properties.items():
        property_schema = _property_fragment(value)
        if property_schema is None:
            continue
        descriptor = describe_property(property_schema, context)
        md += render_property_details(name, property_schema, descriptor, level + 1, context)
    return md


def _examples(schema: Mapping[str, Any], level: int, context: RenderContext) -> str:
    examples = schema.get("examples")
    if not isinstance(examples, list):
        return ""

    style = context.style
    md = f"{style.header(level)} Examples\n\n"
    for example in examples:
        md += style.bullet(style.literal(example, schema.get("type")))
    return md + "\n"


def _property_fragment(value: Any) -> Mapping[str, Any] | None:
    # Boolean schemas carry no keywords and document as `any`.
    if isinstance(value, bool):
        return {}
    if isinstance(value, Mapping):
        return value
    return None
