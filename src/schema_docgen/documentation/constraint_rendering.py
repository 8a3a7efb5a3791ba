"""Property detail sections: ranges, lengths, patterns, enumerations and examples."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .auto_linking import auto_link_description, link_to_type
from .documentation_models import PropertyDescriptor, RenderContext
from .enum_resolution import render_enum_bullets
from .property_descriptors import get_property_type

DETAILED_DESCRIPTION_KEY = "gltf_detailedDescription"
WEBGL_KEY = "gltf_webgl"


def normalize_exclusivity(schema: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite numeric ``exclusiveMinimum``/``exclusiveMaximum`` into the boolean form.

    Newer dialects store the boundary in the exclusive keyword itself; older ones pair a
    boolean flag with ``minimum``/``maximum``. The returned copy always uses the latter.
    """
    normalized = dict(schema)
    for exclusive_key, bound_key in (
        ("exclusiveMinimum", "minimum"),
        ("exclusiveMaximum", "maximum"),
    ):
        value = normalized.get(exclusive_key)
        if _is_number(value):
            normalized[bound_key] = value
            normalized[exclusive_key] = True
    return normalized


def render_property_details(
    name: str,
    schema: Mapping[str, Any],
    descriptor: PropertyDescriptor,
    level: int,
    context: RenderContext,
) -> str:
    """Render the header, description and constraint bullets of one property."""
    style = context.style
    md = f"{style.header(level)} {name}\n\n"

    detailed = auto_link_description(schema.get(DETAILED_DESCRIPTION_KEY), context)
    if detailed is not None:
        md += f"{detailed}\n\n"
    elif descriptor.description is not None:
        md += f"{descriptor.description}\n\n"

    md += style.bullet(f"{style.detail_label('Type')}: {descriptor.formatted_type}")
    items = schema.get("items")
    if isinstance(items, Mapping):
        md += render_item_constraints(schema, items, descriptor.type, context)
    md += style.bullet(f"{style.detail_label('Required')}: {descriptor.formatted_required}")
    md += render_value_constraints(schema, descriptor.type, context)
    md += "\n"
    return md


def render_item_constraints(
    schema: Mapping[str, Any],
    items: Mapping[str, Any],
    type_name: str,
    context: RenderContext,
) -> str:
    style = context.style
    element_must = f"Each element in the array {style.must}"
    md = ""

    if schema.get("uniqueItems") is True:
        md += style.bullet(f"{element_must} be unique.", 1)

    normalized = normalize_exclusivity(items)
    minimum = normalized.get("minimum")
    maximum = normalized.get("maximum")
    min_phrase = "greater than"
    if normalized.get("exclusiveMinimum") is not True:
        min_phrase += " or equal to"
    max_phrase = "less than"
    if normalized.get("exclusiveMaximum") is not True:
        max_phrase += " or equal to"
    if minimum is not None and maximum is not None:
        md += style.bullet(
            f"{element_must} be {min_phrase} {style.min_max(minimum)}"
            f" and {max_phrase} {style.min_max(maximum)}.",
            1,
        )
    elif minimum is not None:
        md += style.bullet(f"{element_must} be {min_phrase} {style.min_max(minimum)}.", 1)
    elif maximum is not None:
        md += style.bullet(f"{element_must} be {max_phrase} {style.min_max(maximum)}.", 1)

    min_length = items.get("minLength")
    max_length = items.get("maxLength")
    if min_length is not None and max_length is not None:
        md += style.bullet(
            f"{element_must} have length between {style.min_max(min_length)}"
            f" and {style.min_max(max_length)}.",
            1,
        )
    elif min_length is not None:
        md += style.bullet(
            f"{element_must} have length greater than or equal to {style.min_max(min_length)}.",
            1,
        )
    elif max_length is not None:
        md += style.bullet(
            f"{element_must} have length less than or equal to {style.min_max(max_length)}.", 1
        )

    values = render_enum_bullets(items, type_name, 2, style)
    if values is not None:
        md += style.bullet(f"{element_must} be one of the following values:", 1) + values
    return md


def render_value_constraints(
    schema: Mapping[str, Any], type_name: str, context: RenderContext
) -> str:
    style = context.style
    label = style.detail_label
    normalized = normalize_exclusivity(schema)
    md = ""

    minimum = normalized.get("minimum")
    if minimum is not None:
        operator = ">" if normalized.get("exclusiveMinimum") is True else ">="
        md += style.bullet(f"{label('Minimum')}: {style.min_max(f'{operator} {minimum}')}")
    maximum = normalized.get("maximum")
    if maximum is not None:
        operator = "<" if normalized.get("exclusiveMaximum") is True else "<="
        md += style.bullet(f"{label('Maximum')}: {style.min_max(f'{operator} {maximum}')}")

    if schema.get("format") is not None:
        md += style.bullet(f"{label('Format')}: {schema['format']}")
    if schema.get("pattern") is not None:
        md += style.bullet(f"{label('Pattern')}: {style.min_max(schema['pattern'])}")
    min_length = schema.get("minLength")
    if min_length is not None:
        md += style.bullet(f"{label('Minimum Length')}: {style.min_max(f'>= {min_length}')}")
    max_length = schema.get("maxLength")
    if max_length is not None:
        md += style.bullet(f"{label('Maximum Length')}: {style.min_max(f'<= {max_length}')}")

    values = render_enum_bullets(schema, type_name, 1, style)
    if values is not None:
        md += style.bullet(f"{label('Allowed values')}:") + values

    additional = schema.get("additionalProperties")
    if isinstance(additional, Mapping):
        md += _render_additional_properties(schema, additional, context)

    examples = schema.get("examples")
    if isinstance(examples, list):
        md += style.bullet(f"{label('Examples')}:")
        for example in examples:
            md += style.bullet(style.literal(example, type_name), 1)

    webgl = schema.get(WEBGL_KEY)
    if webgl is not None:
        md += style.bullet(f"{label('Related WebGL functions')}: {webgl}")
    return md


def _render_additional_properties(
    schema: Mapping[str, Any], additional: Mapping[str, Any], context: RenderContext
) -> str:
    style = context.style
    any_of = additional.get("anyOf")
    if isinstance(any_of, list):
        md = style.bullet(f"{style.detail_label('Property types allowed')}:")
        for branch in any_of:
            if not isinstance(branch, Mapping):
                continue
            branch_type = get_property_type(branch)
            if branch_type is not None:
                linked = link_to_type(style.type_value(branch_type), branch_type, context)
                md += style.bullet(linked, 1)
        return md

    value_type = get_property_type(additional)
    if value_type is None:
        return ""
    formatted = style.type_value(value_type)
    title = additional.get("title", schema.get("title"))
    if additional.get("type") == "object" and isinstance(title, str):
        formatted = link_to_type(style.type_value(title), title, context)
    return style.bullet(f"{style.detail_label('Type of each property')}: {formatted}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
