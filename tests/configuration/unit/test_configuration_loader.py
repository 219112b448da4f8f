"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from request_preflight.configuration import (
    ConfigurationError,
    ValidationConfig,
    load_configuration,
    load_validation_config,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_auto_split_setting(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
validation:
  auto_split_long_text: false
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.validation == ValidationConfig.without_auto_split()


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    assert load_validation_config(config_path) == ValidationConfig.default()


def test_missing_setting_uses_default(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "validation: {}\n")

    assert load_validation_config(config_path).auto_split_long_text is True


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "validation: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_configuration(config_path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- item\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_validation_section_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "validation: true\n")

    with pytest.raises(ConfigurationError, match="'validation' must be a mapping"):
        load_configuration(config_path)


def test_auto_split_must_be_boolean(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "validation:\n  auto_split_long_text: 'yes please'\n"
    )

    with pytest.raises(ConfigurationError, match="must be a boolean"):
        load_configuration(config_path)


def test_unknown_settings_are_rejected(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "validation:\n  auto_truncate_arrays: true\n"
    )

    with pytest.raises(ConfigurationError, match="auto_truncate_arrays"):
        load_configuration(config_path)


def test_validation_config_is_immutable() -> None:
    config = ValidationConfig.default()

    with pytest.raises(AttributeError):
        config.auto_split_long_text = False  # type: ignore[misc]
