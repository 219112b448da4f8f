"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, load_validation_config
from .runtime_settings import Configuration, ValidationConfig

__all__ = [
    "Configuration",
    "ValidationConfig",
    "ConfigurationError",
    "load_configuration",
    "load_validation_config",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
