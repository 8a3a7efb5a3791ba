"""Linking of known type names inside free text."""

from __future__ import annotations

import re

from schema_docgen.configuration.runtime_settings import AutoLinkMode

from .documentation_models import RenderContext
from .type_ordering import document_identifier


def auto_link_description(description: str | None, context: RenderContext) -> str | None:
    """Insert links to every known type mentioned in ``description``.

    ``context.known_types`` must iterate longest-name-first (descending title order).
    Matching is plain substring matching; text produced for one type is still visible
    to the types that follow it.
    """
    if description is None:
        return None
    for title in context.known_types:
        description = link_type(description, title, context)
    return description


def link_type(text: str, type_title: str, context: RenderContext) -> str:
    """Replace occurrences of ``type_title`` in ``text`` with links to its document."""
    entry = context.known_types.get(type_title)
    if context.auto_link is AutoLinkMode.OFF or entry is None or not type_title:
        return text

    style = context.style
    code_name = style.code(type_title)
    link = style.type_link(code_name, document_identifier(type_title, entry.schema))
    if context.auto_link is AutoLinkMode.AGGRESSIVE:
        pattern = re.compile(f"{re.escape(code_name)}|{re.escape(type_title)}")
        return pattern.sub(lambda _match: link, text)
    return text.replace(code_name, link)


def link_to_type(text: str, type_title: str, context: RenderContext) -> str:
    """Wrap all of ``text`` in a link to the document of ``type_title`` when it is known."""
    entry = context.known_types.get(type_title)
    if context.auto_link is AutoLinkMode.OFF or entry is None:
        return text
    return context.style.type_link(text, document_identifier(type_title, entry.schema))
