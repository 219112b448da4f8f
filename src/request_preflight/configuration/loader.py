"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, ValidationConfig


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    validation = _parse_validation_section(parsed.get("validation"))
    return Configuration(path=path, validation=validation)


def load_validation_config(config_path: Path | str) -> ValidationConfig:
    """Load only the validator settings from a configuration file."""
    return load_configuration(config_path).validation


def _parse_validation_section(value: Any) -> ValidationConfig:
    if value is None:
        return ValidationConfig.default()
    section = _require_mapping(value, "validation")
    unknown_keys = sorted(set(section) - {"auto_split_long_text"})
    if unknown_keys:
        raise ConfigurationError(f"Unknown validation settings: {', '.join(unknown_keys)}")
    auto_split = _optional_bool(
        section.get("auto_split_long_text"), "validation.auto_split_long_text"
    )
    if auto_split is None:
        return ValidationConfig.default()
    return ValidationConfig(auto_split_long_text=auto_split)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
