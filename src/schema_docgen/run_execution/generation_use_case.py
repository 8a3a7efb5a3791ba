"""Documentation generation use-case service."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from schema_docgen.configuration import ConfigurationError, GenerationSettings, load_configuration
from schema_docgen.document_writing import DocumentWriteError, ensure_all_written, write_documents
from schema_docgen.documentation import DocumentationError, assemble_documents
from schema_docgen.schema_resolution import (
    ResolvedSchema,
    SchemaDialect,
    SchemaError,
    load_schema_file,
    resolve_schema,
)

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(request: GenerationRequest) -> GenerationOutcome:
    """Load configuration, resolve the schema, render every type and write the documents."""
    try:
        settings = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc
    if request.output_dir:
        settings = replace(settings, output_dir=Path(request.output_dir).resolve())
    return generate_documentation(settings)


def generate_documentation(settings: GenerationSettings) -> GenerationOutcome:
    """Run the generation pipeline for already-validated settings."""
    package_logger = logging.getLogger("schema_docgen")
    previous_level = package_logger.level
    if settings.debug:
        package_logger.setLevel(logging.DEBUG)
    try:
        return _generate(settings)
    finally:
        package_logger.setLevel(previous_level)


def _generate(settings: GenerationSettings) -> GenerationOutcome:
    resolved = _resolve(settings)
    try:
        documents = assemble_documents(resolved, settings)
    except DocumentationError as exc:
        raise RunExecutionError(str(exc)) from exc

    results = write_documents(
        documents, settings.output_dir, parallelism=settings.write_parallelism
    )
    try:
        written = ensure_all_written(results)
    except DocumentWriteError as exc:
        raise RunExecutionError(str(exc)) from exc
    logger.info("Wrote %d document(s) to %s", len(written), settings.output_dir)
    return GenerationOutcome(
        output_dir=settings.output_dir,
        written_paths=tuple(written),
        dialect=resolved.dialect,
    )


def _resolve(settings: GenerationSettings) -> ResolvedSchema:
    try:
        schema = load_schema_file(settings.schema_path)
        resolved = resolve_schema(
            schema,
            settings.schema_path.name,
            settings.search_path,
            settings.ignorable_types,
            settings.debug,
            base_dir=settings.schema_path.parent,
        )
    except SchemaError as exc:
        raise RunExecutionError(str(exc)) from exc
    if resolved.dialect is SchemaDialect.UNRECOGNIZED:
        logger.warning("Unrecognized JSON Schema dialect: %s", schema.get("$schema"))
    return resolved
