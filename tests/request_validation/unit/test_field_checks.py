"""Walked field limit check tests."""

from __future__ import annotations

import pytest
from request_preflight.field_walking import FieldKind, WalkedField
from request_preflight.limits_catalog import LimitCategory
from request_preflight.request_models import RichTextSegment
from request_preflight.request_validation import check_field, check_fields
from request_preflight.violation_reporting import ViolationKind


def _rich_text(path: str, *segments: RichTextSegment) -> WalkedField:
    return WalkedField(
        path=path,
        kind=FieldKind.RICH_TEXT,
        category=LimitCategory.RICH_TEXT_CONTENT,
        value=segments,
    )


def test_rich_text_at_limit_is_accepted() -> None:
    field = _rich_text("Notes.richText", RichTextSegment(content="x" * 2000, link="h" * 2000))

    assert check_field(field) == []


def test_rich_text_content_and_href_are_checked_per_segment() -> None:
    field = _rich_text(
        "Notes.richText",
        RichTextSegment(content="ok"),
        RichTextSegment(content="x" * 2001, link="h" * 2001),
    )

    violations = check_field(field)

    assert [violation.field for violation in violations] == [
        "Notes.richText[1]",
        "Notes.richText[1].href",
    ]
    content, href = violations
    assert content.kind == ViolationKind.CONTENT_TOO_LONG
    assert content.auto_fix_available is True
    assert content.message == "Rich text too long: 2001 chars (max: 2000)"
    assert href.kind == ViolationKind.CONTENT_TOO_LONG
    assert href.auto_fix_available is False
    assert href.message == "Rich text URL too long: 2001 chars (max: 2000)"


@pytest.mark.parametrize(
    ("category", "length", "message"),
    [
        (LimitCategory.URL, 2001, "URL too long: 2001 chars (max: 2000)"),
        (LimitCategory.EMAIL, 201, "Email too long: 201 chars (max: 200)"),
        (LimitCategory.PHONE_NUMBER, 250, "Phone number too long: 250 chars (max: 200)"),
    ],
)
def test_scalar_length_violations_are_never_auto_fixable(
    category: LimitCategory, length: int, message: str
) -> None:
    field = WalkedField(
        path="Field.value", kind=FieldKind.SCALAR, category=category, value="a" * length
    )

    (violation,) = check_field(field)

    assert violation.kind == ViolationKind.CONTENT_TOO_LONG
    assert violation.message == message
    assert violation.auto_fix_available is False
    assert violation.current_value == length


@pytest.mark.parametrize(
    ("kind", "category", "message"),
    [
        (
            FieldKind.BOUNDED_LIST,
            LimitCategory.MULTI_SELECT_OPTIONS,
            "Multi-select has too many options: 101 (max: 100)",
        ),
        (
            FieldKind.BOUNDED_LIST,
            LimitCategory.RELATION_PAGES,
            "Relation has too many pages: 101 (max: 100)",
        ),
        (
            FieldKind.BOUNDED_LIST,
            LimitCategory.PEOPLE_USERS,
            "People property has too many users: 101 (max: 100)",
        ),
        (
            FieldKind.BLOCK_LIST,
            LimitCategory.BLOCK_CHILDREN,
            "Block array too large: 101 blocks (max: 100)",
        ),
    ],
)
def test_cardinality_violations_are_flagged_auto_fixable(
    kind: FieldKind, category: LimitCategory, message: str
) -> None:
    field = WalkedField(path="list", kind=kind, category=category, value=tuple(range(101)))

    (violation,) = check_field(field)

    assert violation.kind == ViolationKind.ARRAY_TOO_LARGE
    assert violation.message == message
    assert violation.auto_fix_available is True
    assert violation.current_value == 101
    assert violation.limit == 100


def test_list_at_limit_is_accepted() -> None:
    field = WalkedField(
        path="children",
        kind=FieldKind.BLOCK_LIST,
        category=LimitCategory.BLOCK_CHILDREN,
        value=tuple(range(100)),
    )

    assert check_field(field) == []


def test_check_fields_keeps_walk_order() -> None:
    fields = [
        WalkedField(
            path="Tags.multiSelect",
            kind=FieldKind.BOUNDED_LIST,
            category=LimitCategory.MULTI_SELECT_OPTIONS,
            value=tuple(range(150)),
        ),
        _rich_text("Notes.richText", RichTextSegment(content="x" * 3000)),
    ]

    assert [violation.field for violation in check_fields(fields)] == [
        "Tags.multiSelect",
        "Notes.richText[0]",
    ]
