"""Document property value entities.

Each property slot of a document request holds exactly one of the value
variants below. Only some variants carry checkable fields; the rest pass
through validation untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

from .rich_text import RichTextList


@dataclass(frozen=True)
class SelectOption:
    """One option of a select or multi-select property."""

    name: str
    color: str = "default"
    id: str | None = None


@dataclass(frozen=True)
class PageReference:
    """Reference to another document by id."""

    id: str


@dataclass(frozen=True)
class UserReference:
    """Reference to a workspace user by id."""

    id: str


@dataclass(frozen=True)
class TitleValue:
    title: RichTextList


@dataclass(frozen=True)
class RichTextValue:
    rich_text: RichTextList


@dataclass(frozen=True)
class MultiSelectValue:
    multi_select: tuple[SelectOption, ...]


@dataclass(frozen=True)
class RelationValue:
    relation: tuple[PageReference, ...]


@dataclass(frozen=True)
class PeopleValue:
    people: tuple[UserReference, ...]


@dataclass(frozen=True)
class UrlValue:
    url: str | None


@dataclass(frozen=True)
class EmailValue:
    email: str | None


@dataclass(frozen=True)
class PhoneNumberValue:
    phone_number: str | None


@dataclass(frozen=True)
class SelectValue:
    select: SelectOption | None


@dataclass(frozen=True)
class NumberValue:
    number: float | None


@dataclass(frozen=True)
class CheckboxValue:
    checkbox: bool


@dataclass(frozen=True)
class DateValue:
    start: str
    end: str | None = None


PropertyValue = (
    TitleValue
    | RichTextValue
    | MultiSelectValue
    | RelationValue
    | PeopleValue
    | UrlValue
    | EmailValue
    | PhoneNumberValue
    | SelectValue
    | NumberValue
    | CheckboxValue
    | DateValue
)
