"""Violation report workbook writer service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from request_preflight.violation_reporting import ValidationResult, Violation, ViolationKind

from .report_models import SUMMARY_SHEET_NAME, VIOLATION_COLUMNS, VIOLATIONS_SHEET_NAME


def write_violation_report(result: ValidationResult, output_path: Path | str) -> Path:
    """Write one row per violation plus a summary sheet and return the resolved path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = VIOLATIONS_SHEET_NAME

    _write_header(sheet)
    for row_index, violation in enumerate(result.violations, start=2):
        _write_violation_row(sheet, row_index, violation)
    _fit_column_widths(sheet, result)

    _write_summary_sheet(workbook, result)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header(sheet: Worksheet) -> None:
    for column_index, name in enumerate(VIOLATION_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 3"
    sheet.freeze_panes = "A2"


def _write_violation_row(sheet: Worksheet, row_index: int, violation: Violation) -> None:
    values = (
        violation.field,
        violation.kind.name,
        violation.message,
        violation.current_value,
        violation.limit,
        "yes" if violation.auto_fix_available else "no",
    )
    for column_index, value in enumerate(values, start=1):
        sheet.cell(row=row_index, column=column_index, value=value)


def _fit_column_widths(sheet: Worksheet, result: ValidationResult) -> None:
    longest_field = max((len(violation.field) for violation in result.violations), default=0)
    longest_message = max((len(violation.message) for violation in result.violations), default=0)
    widths = {1: longest_field, 3: longest_message}
    for column_index, name in enumerate(VIOLATION_COLUMNS, start=1):
        width = max(len(name), widths.get(column_index, 0)) + 4
        sheet.column_dimensions[get_column_letter(column_index)].width = max(12, min(width, 80))


def _write_summary_sheet(workbook: Workbook, result: ValidationResult) -> None:
    sheet = workbook.create_sheet(SUMMARY_SHEET_NAME)
    entries: list[tuple[str, object]] = [
        ("valid", "yes" if result.is_valid else "no"),
        ("violations", len(result.violations)),
    ]
    entries.extend((kind.name, len(result.violations_of(kind))) for kind in ViolationKind)
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
