"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .runtime_settings import (
    AutoLinkMode,
    EmbedMode,
    GenerationSettings,
    StyleMode,
    StyleSettings,
)

DEFAULT_OUTPUT_DIRECTORY = "output"

_EnumT = TypeVar("_EnumT", bound=Enum)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return build_settings(parsed, base_path=path.resolve().parent)


def build_settings(section: Mapping[str, Any], *, base_path: Path) -> GenerationSettings:
    """Normalize a raw option mapping into generation settings."""
    schema_value = _require_non_empty_string(section.get("schema"), "schema")
    schema_path = _resolve_path(base_path, schema_value)
    if not schema_path.exists():
        raise ConfigurationError(f"Schema file not found: {schema_path}")

    output_value = _require_non_empty_string(
        section.get("outputDirectory", DEFAULT_OUTPUT_DIRECTORY), "outputDirectory"
    )
    style = StyleSettings(
        mode=_parse_choice(section.get("styleMode"), StyleMode, StyleMode.MARKDOWN, "styleMode"),
        checkmark=_optional_string(section.get("checkmark"), "checkmark", strip=False),
        must_keyword=_optional_string(section.get("mustKeyword"), "mustKeyword"),
    )
    search_path = _normalize_string_sequence(section.get("searchPath"), "searchPath")

    return GenerationSettings(
        schema_path=schema_path,
        output_dir=_resolve_path(base_path, output_value),
        style=style,
        search_path=search_path or ("",),
        write_toc=_require_bool(section.get("writeTOC", False), "writeTOC"),
        header_level=_require_positive_int(section.get("headerLevel", 1), "headerLevel"),
        suppress_warnings=_require_bool(
            section.get("suppressWarnings", False), "suppressWarnings"
        ),
        schema_relative_base_path=_optional_string(
            section.get("schemaRelativeBasePath"), "schemaRelativeBasePath"
        ),
        auto_link=_parse_choice(
            section.get("autoLink"), AutoLinkMode, AutoLinkMode.AGGRESSIVE, "autoLink"
        ),
        embed_mode=_parse_choice(section.get("embedMode"), EmbedMode, EmbedMode.NONE, "embedMode"),
        ignorable_types=_normalize_string_sequence(
            section.get("ignorableTypes"), "ignorableTypes"
        ),
        debug=_require_bool(section.get("debug", False), "debug"),
        write_parallelism=_require_positive_int(
            section.get("writeParallelism", 4), "writeParallelism"
        ),
    )


def _parse_choice(value: Any, choices: type[_EnumT], default: _EnumT, field_name: str) -> _EnumT:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    for choice in choices:
        if choice.value.lower() == value.strip().lower():
            return choice
    allowed = ", ".join(choice.value for choice in choices)
    raise ConfigurationError(f"{field_name} '{value}' is not one of: {allowed}.")


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value.strip(),)
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            normalized.append(item.strip())
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str, *, strip: bool = True) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    if not strip:
        return value or None
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
