"""Results writing constants."""

from __future__ import annotations

VIOLATIONS_SHEET_NAME = "Violations"
SUMMARY_SHEET_NAME = "Summary"

VIOLATION_COLUMNS: tuple[str, ...] = ("Field", "Kind", "Message", "Current", "Limit", "Auto-fix")
