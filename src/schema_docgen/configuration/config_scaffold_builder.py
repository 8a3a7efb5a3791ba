"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-docgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for schema-docgen.
# Replace every <REQUIRED> placeholder before running generate.
# Remove <OPTIONAL> entries you do not need; defaults apply when a key is absent.

# Root JSON schema, relative to this file.
schema: "<REQUIRED>"

# Directories searched, in order, for external $ref targets.
searchPath:
  - ""

# Markdown or AsciiDoctor.
styleMode: "Markdown"
# checkmark: "<OPTIONAL>"
# mustKeyword: "<OPTIONAL>"

writeTOC: false
headerLevel: 1
suppressWarnings: false
# schemaRelativeBasePath: "<OPTIONAL>"

# off, basic or aggressive.
autoLink: "aggressive"
# none, writeIncludeStatements or referenceIncludeDocument.
embedMode: "none"

ignorableTypes: []
debug: false

outputDirectory: "output"
writeParallelism: 4
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generation configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
