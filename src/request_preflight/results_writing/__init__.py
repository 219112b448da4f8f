"""Results writing exports."""

from .report_models import SUMMARY_SHEET_NAME, VIOLATION_COLUMNS, VIOLATIONS_SHEET_NAME
from .violation_report_writer import write_violation_report

__all__ = [
    "SUMMARY_SHEET_NAME",
    "VIOLATIONS_SHEET_NAME",
    "VIOLATION_COLUMNS",
    "write_violation_report",
]
