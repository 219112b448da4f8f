"""Formatted text entities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RichTextAnnotations:
    """Formatting attributes carried by one rich text segment."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


@dataclass(frozen=True)
class RichTextSegment:
    """Atomic span of formatted text with an optional link target."""

    content: str
    annotations: RichTextAnnotations = field(default_factory=RichTextAnnotations)
    link: str | None = None


RichTextList = tuple[RichTextSegment, ...]
