"""Field walking exports."""

from .field_walker import (
    DEFAULT_BLOCK_FIELD,
    RichTextRewrite,
    rewrite_rich_text,
    walk_block_array,
    walk_request,
)
from .walked_fields import FieldKind, WalkedField, index_path, member_path

__all__ = [
    "DEFAULT_BLOCK_FIELD",
    "FieldKind",
    "WalkedField",
    "RichTextRewrite",
    "index_path",
    "member_path",
    "rewrite_rich_text",
    "walk_block_array",
    "walk_request",
]
