"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_docgen.schema_resolution.schema_models import SchemaDialect


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one documentation generation run."""

    config_path: str
    output_dir: str | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_dir: Path
    written_paths: tuple[Path, ...]
    dialect: SchemaDialect
