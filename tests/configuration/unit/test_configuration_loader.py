"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_docgen.configuration.loader import ConfigurationError, load_configuration
from schema_docgen.configuration.runtime_settings import AutoLinkMode, EmbedMode, StyleMode


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def _write_schema(tmp_path: Path) -> Path:
    return _write_file(
        tmp_path / "root.schema.json",
        json.dumps({"title": "Root", "type": "object", "properties": {}}),
    )


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    _write_schema(tmp_path)
    config_path = _write_file(tmp_path / "config.yaml", 'schema: "root.schema.json"\n')

    settings = load_configuration(config_path)

    assert settings.schema_path == (tmp_path / "root.schema.json").resolve()
    assert settings.output_dir == (tmp_path / "output").resolve()
    assert settings.search_path == ("",)
    assert settings.style.mode is StyleMode.MARKDOWN
    assert settings.style.checkmark is None
    assert settings.style.must_keyword is None
    assert settings.write_toc is False
    assert settings.header_level == 1
    assert settings.auto_link is AutoLinkMode.AGGRESSIVE
    assert settings.embed_mode is EmbedMode.NONE
    assert settings.ignorable_types == ()
    assert settings.write_parallelism == 4


def test_loads_json_configuration_with_every_option(tmp_path: Path) -> None:
    _write_schema(tmp_path)
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "schema": "root.schema.json",
                "searchPath": ["", "schemas"],
                "styleMode": "AsciiDoctor",
                "checkmark": "✓ ",
                "mustKeyword": "shall",
                "writeTOC": True,
                "headerLevel": 2,
                "suppressWarnings": True,
                "schemaRelativeBasePath": "../schema",
                "autoLink": "basic",
                "embedMode": "writeIncludeStatements",
                "ignorableTypes": ["Extension"],
                "debug": True,
                "outputDirectory": "docs",
                "writeParallelism": 2,
            }
        ),
    )

    settings = load_configuration(config_path)

    assert settings.search_path == ("", "schemas")
    assert settings.style.mode is StyleMode.ASCIIDOCTOR
    assert settings.style.checkmark == "✓ "
    assert settings.style.must_keyword == "shall"
    assert settings.write_toc is True
    assert settings.header_level == 2
    assert settings.suppress_warnings is True
    assert settings.schema_relative_base_path == "../schema"
    assert settings.auto_link is AutoLinkMode.BASIC
    assert settings.embed_mode is EmbedMode.WRITE_INCLUDE_STATEMENTS
    assert settings.ignorable_types == ("Extension",)
    assert settings.debug is True
    assert settings.output_dir == (tmp_path / "docs").resolve()
    assert settings.write_parallelism == 2


def test_missing_configuration_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_missing_schema_file_is_reported(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "schema: absent.json\n")

    with pytest.raises(ConfigurationError, match="Schema file not found"):
        load_configuration(config_path)


def test_schema_key_is_required(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "writeTOC: true\n")

    with pytest.raises(ConfigurationError, match="schema must be a string"):
        load_configuration(config_path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- one\n- two\n")

    with pytest.raises(ConfigurationError, match="must be a mapping"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("option", "value", "message"),
    [
        ("styleMode", "Html", "styleMode 'Html' is not one of"),
        ("autoLink", "always", "autoLink 'always' is not one of"),
        ("embedMode", "inline", "embedMode 'inline' is not one of"),
        ("headerLevel", 0, "headerLevel must be greater than zero"),
        ("headerLevel", True, "headerLevel must be an integer"),
        ("writeTOC", "yes", "writeTOC must be a boolean"),
        ("ignorableTypes", [1], "ignorableTypes entries must be strings"),
    ],
)
def test_invalid_option_values_are_rejected(
    tmp_path: Path, option: str, value: object, message: str
) -> None:
    _write_schema(tmp_path)
    config_path = _write_file(
        tmp_path / "config.json", json.dumps({"schema": "root.schema.json", option: value})
    )

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_style_mode_matching_is_case_insensitive(tmp_path: Path) -> None:
    _write_schema(tmp_path)
    config_path = _write_file(
        tmp_path / "config.yaml", "schema: root.schema.json\nstyleMode: asciidoctor\n"
    )

    assert load_configuration(config_path).style.mode is StyleMode.ASCIIDOCTOR
