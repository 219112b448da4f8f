"""Violation report workbook writer tests."""

from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook
from request_preflight.results_writing import (
    SUMMARY_SHEET_NAME,
    VIOLATION_COLUMNS,
    VIOLATIONS_SHEET_NAME,
    write_violation_report,
)
from request_preflight.violation_reporting import ValidationResult, Violation, ViolationKind


def _result() -> ValidationResult:
    return ValidationResult(
        violations=(
            Violation(
                field="title.title[0]",
                kind=ViolationKind.CONTENT_TOO_LONG,
                message="Rich text too long: 2100 chars (max: 2000)",
                auto_fix_available=True,
                current_value=2100,
                limit=2000,
            ),
            Violation(
                field="children",
                kind=ViolationKind.ARRAY_TOO_LARGE,
                message="Block array too large: 101 blocks (max: 100)",
                auto_fix_available=True,
                current_value=101,
                limit=100,
            ),
            Violation(
                field="Website.url",
                kind=ViolationKind.CONTENT_TOO_LONG,
                message="URL too long: 2001 chars (max: 2000)",
                auto_fix_available=False,
                current_value=2001,
                limit=2000,
            ),
        )
    )


def test_writes_one_row_per_violation(tmp_path: Path) -> None:
    output = write_violation_report(_result(), tmp_path / "reports" / "violations.xlsx")

    assert output == (tmp_path / "reports" / "violations.xlsx").resolve()
    workbook = load_workbook(output)
    sheet = workbook[VIOLATIONS_SHEET_NAME]
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0] == VIOLATION_COLUMNS
    assert rows[1] == (
        "title.title[0]",
        "CONTENT_TOO_LONG",
        "Rich text too long: 2100 chars (max: 2000)",
        2100,
        2000,
        "yes",
    )
    assert rows[2][0] == "children"
    assert rows[3][5] == "no"
    assert len(rows) == 4


def test_summary_sheet_counts_violations_by_kind(tmp_path: Path) -> None:
    output = write_violation_report(_result(), tmp_path / "violations.xlsx")

    sheet = load_workbook(output)[SUMMARY_SHEET_NAME]
    summary = {row[0]: row[1] for row in sheet.iter_rows(values_only=True)}
    assert summary == {
        "valid": "no",
        "violations": 3,
        "CONTENT_TOO_LONG": 2,
        "ARRAY_TOO_LARGE": 1,
    }


def test_valid_result_writes_header_only(tmp_path: Path) -> None:
    output = write_violation_report(ValidationResult(), tmp_path / "violations.xlsx")

    workbook = load_workbook(output)
    assert list(workbook[VIOLATIONS_SHEET_NAME].iter_rows(values_only=True)) == [VIOLATION_COLUMNS]
    summary = {row[0]: row[1] for row in workbook[SUMMARY_SHEET_NAME].iter_rows(values_only=True)}
    assert summary["valid"] == "yes"
    assert summary["violations"] == 0
