"""Request model exports."""

from .block_requests import BlockRequest, BlockType
from .property_values import (
    CheckboxValue,
    DateValue,
    EmailValue,
    MultiSelectValue,
    NumberValue,
    PageReference,
    PeopleValue,
    PhoneNumberValue,
    PropertyValue,
    RelationValue,
    RichTextValue,
    SelectOption,
    SelectValue,
    TitleValue,
    UrlValue,
    UserReference,
)
from .request_shapes import CreateDocumentRequest, CreateSchemaRequest, UpdateDocumentRequest
from .rich_text import RichTextAnnotations, RichTextList, RichTextSegment

__all__ = [
    "RichTextAnnotations",
    "RichTextSegment",
    "RichTextList",
    "SelectOption",
    "PageReference",
    "UserReference",
    "PropertyValue",
    "TitleValue",
    "RichTextValue",
    "MultiSelectValue",
    "RelationValue",
    "PeopleValue",
    "UrlValue",
    "EmailValue",
    "PhoneNumberValue",
    "SelectValue",
    "NumberValue",
    "CheckboxValue",
    "DateValue",
    "BlockType",
    "BlockRequest",
    "CreateDocumentRequest",
    "UpdateDocumentRequest",
    "CreateSchemaRequest",
]
