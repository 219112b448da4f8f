"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "request-preflight.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Validator configuration for request-preflight.

validation:
  # Split rich text segments longer than 2000 characters into several
  # segments with identical formatting instead of rejecting the request.
  # URL, email and phone number values that are too long, and lists with
  # more than 100 entries, are always rejected.
  auto_split_long_text: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

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
