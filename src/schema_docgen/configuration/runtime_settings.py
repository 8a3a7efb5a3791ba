"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class StyleMode(str, Enum):
    """Output dialect of the generated documents."""

    MARKDOWN = "Markdown"
    ASCIIDOCTOR = "AsciiDoctor"


class AutoLinkMode(str, Enum):
    """How free-text descriptions are linked to known types."""

    OFF = "off"
    BASIC = "basic"
    AGGRESSIVE = "aggressive"


class EmbedMode(str, Enum):
    """Whether type documents are expanded or reference the raw schema file."""

    NONE = "none"
    WRITE_INCLUDE_STATEMENTS = "writeIncludeStatements"
    REFERENCE_INCLUDE_DOCUMENT = "referenceIncludeDocument"


@dataclass(frozen=True)
class StyleSettings:
    """Rendering style choices threaded through every rendering call."""

    mode: StyleMode = StyleMode.MARKDOWN
    checkmark: str | None = None
    must_keyword: str | None = None


@dataclass(frozen=True)
class GenerationSettings:  # pylint: disable=too-many-instance-attributes
    """Top-level configuration aggregate for one generation run."""

    schema_path: Path
    output_dir: Path
    style: StyleSettings = field(default_factory=StyleSettings)
    search_path: tuple[str, ...] = ("",)
    write_toc: bool = False
    header_level: int = 1
    suppress_warnings: bool = False
    schema_relative_base_path: str | None = None
    auto_link: AutoLinkMode = AutoLinkMode.AGGRESSIVE
    embed_mode: EmbedMode = EmbedMode.NONE
    ignorable_types: tuple[str, ...] = ()
    debug: bool = False
    write_parallelism: int = 4
