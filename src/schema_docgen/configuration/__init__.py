"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_settings, load_configuration
from .runtime_settings import (
    AutoLinkMode,
    EmbedMode,
    GenerationSettings,
    StyleMode,
    StyleSettings,
)

__all__ = [
    "AutoLinkMode",
    "EmbedMode",
    "GenerationSettings",
    "StyleMode",
    "StyleSettings",
    "ConfigurationError",
    "build_settings",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
