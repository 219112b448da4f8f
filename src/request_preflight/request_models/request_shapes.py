"""Write request entities accepted by the validator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .block_requests import BlockRequest
from .property_values import PropertyValue
from .rich_text import RichTextList


@dataclass(frozen=True)
class CreateDocumentRequest:
    """Request creating a document with property values and optional content."""

    parent_id: str
    properties: Mapping[str, PropertyValue]
    children: tuple[BlockRequest, ...] | None = None
    icon: str | None = None


@dataclass(frozen=True)
class UpdateDocumentRequest:
    """Request updating the property values of an existing document."""

    properties: Mapping[str, PropertyValue] | None = None
    archived: bool | None = None


@dataclass(frozen=True)
class CreateSchemaRequest:
    """Request creating a container with a property schema.

    Property definitions are passed through opaquely; only the title and the
    description carry checkable text.
    """

    parent_id: str
    title: RichTextList
    properties: Mapping[str, Mapping[str, object]]
    description: RichTextList | None = None
