"""Per-property type, requiredness and default extraction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_docgen.rendering.document_style import literal_text

from .auto_linking import auto_link_description, link_to_type, link_type
from .documentation_models import PropertyDescriptor, RenderContext

ANY_TYPE = "any"


def get_property_type(schema: Mapping[str, Any]) -> str | None:
    """Resolve the type name of a fragment.

    An explicit ``typeName`` wins over ``type``; enumerations written as ``anyOf`` carry
    their type on the first branch that declares one.
    """
    type_name = schema.get("typeName")
    if isinstance(type_name, str):
        return type_name

    declared = schema.get("type")
    if declared is not None:
        return _type_text(declared)

    any_of = schema.get("anyOf")
    if not isinstance(any_of, list):
        return None
    for branch in any_of:
        if isinstance(branch, Mapping) and branch.get("type") is not None:
            return _type_text(branch["type"])
    return None


def array_cardinality(schema: Mapping[str, Any]) -> str:
    """Bracket notation for ``minItems``/``maxItems``, e.g. ``[3]``, ``[1-4]``, ``[2-*]``."""
    min_items = schema.get("minItems")
    max_items = schema.get("maxItems")
    if min_items is not None and min_items == max_items:
        inside = f"{min_items}"
    elif min_items is not None and max_items is not None:
        inside = f"{min_items}-{max_items}"
    elif min_items is not None:
        inside = f"{min_items}-*"
    elif max_items is not None:
        inside = f"*-{max_items}"
    else:
        inside = ""
    return f"[{inside}]"


def describe_property(schema: Mapping[str, Any], context: RenderContext) -> PropertyDescriptor:
    style = context.style
    type_name = get_property_type(schema) or ANY_TYPE
    formatted_type = link_type(style.type_value(type_name), type_name, context)

    if type_name == "array":
        suffix = array_cardinality(schema)
        items = schema.get("items")
        if isinstance(items, Mapping) and items.get("type") is not None:
            if items.get("type") == "object":
                item_type = get_property_type(items) or ANY_TYPE
            else:
                item_type = _type_text(items["type"])
            type_name = item_type + suffix
            formatted_type = link_to_type(style.type_value(type_name), item_type, context)
        else:
            type_name += suffix
            formatted_type = style.type_value(type_name)

    required, formatted_required = _required_text(schema, type_name, context)
    return PropertyDescriptor(
        type=type_name,
        formatted_type=formatted_type,
        description=auto_link_description(schema.get("description"), context),
        required=required,
        formatted_required=formatted_required,
    )


def _required_text(
    schema: Mapping[str, Any], type_name: str, context: RenderContext
) -> tuple[str, str]:
    style = context.style
    if schema.get("required") is True:
        return "Yes", f"{style.required_marker}Yes"
    if "default" not in schema:
        return "No", "No"

    default = _default_text(schema["default"])
    return (
        f"No, default: {literal_text(default)}",
        f"No, default: {style.literal(default, type_name)}",
    )


def _default_text(value: Any) -> Any:
    if isinstance(value, list):
        return "[" + ",".join(literal_text(item) for item in value) + "]"
    if isinstance(value, dict):
        return literal_text(value)
    return value


def _type_text(declared: Any) -> str:
    if isinstance(declared, list):
        return " | ".join(str(item) for item in declared)
    return str(declared)
