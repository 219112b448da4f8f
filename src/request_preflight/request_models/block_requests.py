"""Content block request entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .rich_text import RichTextList


@dataclass(frozen=True)
class _BlockTraits:
    """Slots a block kind carries and its name inside field paths."""

    path_name: str
    has_rich_text: bool
    has_caption: bool
    has_children: bool


class BlockType(str, Enum):
    """Supported content block kinds, valued by their wire names."""

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    TOGGLE = "toggle"
    QUOTE = "quote"
    CALLOUT = "callout"
    CODE = "code"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    PDF = "pdf"
    DIVIDER = "divider"

    @property
    def path_name(self) -> str:
        return _BLOCK_TRAITS[self].path_name

    @property
    def has_rich_text(self) -> bool:
        return _BLOCK_TRAITS[self].has_rich_text

    @property
    def has_caption(self) -> bool:
        return _BLOCK_TRAITS[self].has_caption

    @property
    def has_children(self) -> bool:
        return _BLOCK_TRAITS[self].has_children


def _text_block(path_name: str) -> _BlockTraits:
    return _BlockTraits(path_name, has_rich_text=True, has_caption=False, has_children=True)


def _media_block(path_name: str) -> _BlockTraits:
    return _BlockTraits(path_name, has_rich_text=False, has_caption=True, has_children=False)


_BLOCK_TRAITS: dict[BlockType, _BlockTraits] = {
    BlockType.PARAGRAPH: _text_block("paragraph"),
    BlockType.HEADING_1: _text_block("heading1"),
    BlockType.HEADING_2: _text_block("heading2"),
    BlockType.HEADING_3: _text_block("heading3"),
    BlockType.BULLETED_LIST_ITEM: _text_block("bulletedListItem"),
    BlockType.NUMBERED_LIST_ITEM: _text_block("numberedListItem"),
    BlockType.TO_DO: _text_block("toDo"),
    BlockType.TOGGLE: _text_block("toggle"),
    BlockType.QUOTE: _text_block("quote"),
    BlockType.CALLOUT: _text_block("callout"),
    BlockType.CODE: _BlockTraits("code", has_rich_text=True, has_caption=True, has_children=False),
    BlockType.IMAGE: _media_block("image"),
    BlockType.VIDEO: _media_block("video"),
    BlockType.AUDIO: _media_block("audio"),
    BlockType.FILE: _media_block("file"),
    BlockType.PDF: _media_block("pdf"),
    BlockType.DIVIDER: _BlockTraits(
        "divider", has_rich_text=False, has_caption=False, has_children=False
    ),
}


@dataclass(frozen=True)
class BlockRequest:  # pylint: disable=too-many-instance-attributes
    """One content block to be written, optionally holding nested children.

    Slots a block kind does not carry (for example ``caption`` on a paragraph)
    are ignored during validation.
    """

    block_type: BlockType
    rich_text: RichTextList = ()
    caption: RichTextList = ()
    children: tuple[BlockRequest, ...] | None = None
    color: str = "default"
    checked: bool = False
    language: str = "plain text"
