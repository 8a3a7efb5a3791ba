"""Markdown and AsciiDoctor markup primitives."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from schema_docgen.configuration.runtime_settings import StyleMode, StyleSettings

_DEFAULT_CHECKMARKS = {
    StyleMode.MARKDOWN: "&#10003; ",
    StyleMode.ASCIIDOCTOR: "icon:check[] ",
}
_DEFAULT_MUST_KEYWORD = "MUST"


def literal_text(value: Any) -> str:
    """Render a JSON value the way it is written in a schema."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


class DocumentStyle:
    """Markup builder for one output dialect.

    All choices come from the ``StyleSettings`` passed in; instances hold no other state,
    so one run's style never leaks into another.
    """

    def __init__(self, settings: StyleSettings | None = None) -> None:
        self._settings = settings or StyleSettings()

    @property
    def mode(self) -> StyleMode:
        return self._settings.mode

    @property
    def is_asciidoctor(self) -> bool:
        return self._settings.mode is StyleMode.ASCIIDOCTOR

    @property
    def file_extension(self) -> str:
        return ".adoc" if self.is_asciidoctor else ".md"

    @property
    def required_marker(self) -> str:
        if self._settings.checkmark is not None:
            return self._settings.checkmark
        return _DEFAULT_CHECKMARKS[self._settings.mode]

    @property
    def must(self) -> str:
        return self.bold(self._settings.must_keyword or _DEFAULT_MUST_KEYWORD)

    def header(self, level: int) -> str:
        return ("=" if self.is_asciidoctor else "#") * max(level, 1)

    def anchor(self, identifier: str) -> str:
        if self.is_asciidoctor:
            return f"[#reference-{identifier}]\n"
        return f'<a name="reference-{identifier}"></a>\n'

    def section(self, title: str, identifier: str, level: int) -> str:
        return f"{self.anchor(identifier)}{self.header(level)} {title}\n\n"

    def bold(self, text: str) -> str:
        return f"*{text}*" if self.is_asciidoctor else f"**{text}**"

    def code(self, text: str) -> str:
        return f"`{text}`"

    def type_value(self, type_name: str) -> str:
        return self.code(type_name)

    def property_name(self, name: str) -> str:
        return self.bold(name)

    def detail_label(self, label: str) -> str:
        return self.bold(label)

    def min_max(self, text: Any) -> str:
        return self.code(str(text))

    def literal(self, value: Any, type_name: str | None = None) -> str:
        text = literal_text(value)
        if type_name == "string":
            text = f'"{text}"'
        return self.code(text)

    def bullet(self, text: str, depth: int = 0) -> str:
        if self.is_asciidoctor:
            return f"{'*' * (depth + 1)} {text}\n"
        return f"{'  ' * depth}* {text}\n"

    def begin_table(self, columns: Sequence[str]) -> str:
        if self.is_asciidoctor:
            return '[options="header"]\n|===\n' + "".join(f"|{column}" for column in columns) + "\n"
        header = "|" + "|".join(columns) + "|\n"
        separator = "|" + "|".join("---" for _ in columns) + "|\n"
        return header + separator

    def table_row(self, cells: Sequence[str]) -> str:
        escaped = [_escape_cell(cell) for cell in cells]
        if self.is_asciidoctor:
            return "\n" + "".join(f"|{cell}\n" for cell in escaped)
        return "|" + "|".join(escaped) + "|\n"

    def end_table(self) -> str:
        return "|===\n\n" if self.is_asciidoctor else "\n"

    def link(self, text: str, target: str) -> str:
        if self.is_asciidoctor:
            return f"link:{target}[{text}]"
        return f"[{text}]({target})"

    def type_link(self, text: str, identifier: str) -> str:
        if self.is_asciidoctor:
            return f"<<reference-{identifier},{text}>>"
        return f"[{text}](#reference-{identifier})"

    def toc_link(self, title: str, identifier: str) -> str:
        return self.type_link(title, identifier)

    def schema_embed_link(self, file_name: str, identifier: str) -> str:
        if self.is_asciidoctor:
            return f"<<schema-reference-{identifier},{file_name}>>"
        return f"[{file_name}](#schema-reference-{identifier})"

    def embed_include(self, file_name: str, base_path: str | None) -> str:
        path = join_schema_path(base_path, file_name)
        if self.is_asciidoctor:
            return f"[source,json]\n----\ninclude::{path}[]\n----\n\n"
        return self.bullet(f"{self.bold('JSON schema')}: {self.link(file_name, path)}") + "\n"


def join_schema_path(base_path: str | None, file_name: str) -> str:
    """Join the relative schema directory and a schema file name with forward slashes."""
    if not base_path:
        return file_name
    normalized = base_path.replace("\\", "/")
    if not normalized.endswith("/"):
        normalized += "/"
    return normalized + file_name


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")
