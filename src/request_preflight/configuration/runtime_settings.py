"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ValidationConfig:
    """Validator behavior settings.

    ``auto_split_long_text`` controls whether rich text segments over the
    per-segment limit are split into several segments by ``validate_or_fix``
    instead of failing validation.
    """

    auto_split_long_text: bool = True

    @classmethod
    def default(cls) -> ValidationConfig:
        return cls()

    @classmethod
    def with_auto_split(cls) -> ValidationConfig:
        return cls(auto_split_long_text=True)

    @classmethod
    def without_auto_split(cls) -> ValidationConfig:
        return cls(auto_split_long_text=False)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate loaded from a file."""

    path: Path
    validation: ValidationConfig
