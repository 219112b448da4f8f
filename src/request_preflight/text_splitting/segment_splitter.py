"""Content-preserving rich text splitting service."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from request_preflight.limits_catalog import MAX_RICH_TEXT_LENGTH
from request_preflight.request_models import RichTextSegment


def split_segment(
    segment: RichTextSegment, max_length: int = MAX_RICH_TEXT_LENGTH
) -> list[RichTextSegment]:
    """Split one segment into pieces of at most ``max_length`` characters.

    Pieces are cut at raw character indices, so their contents concatenate back
    to the original content exactly. Every piece keeps the original annotations
    and link. A segment already within the limit is returned as the only piece.

    Args:
      segment: Segment whose content should be split.
      max_length: Maximum number of characters per piece.

    Returns:
      ``ceil(len(content) / max_length)`` segments in content order.

    Raises:
      ValueError: If ``max_length`` is not positive or the content is empty.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be greater than zero, got {max_length}.")
    content = segment.content
    if not content:
        raise ValueError("Cannot split a rich text segment with empty content.")
    if len(content) <= max_length:
        return [segment]
    return [
        replace(segment, content=content[start : start + max_length])
        for start in range(0, len(content), max_length)
    ]


def split_segments(
    segments: Iterable[RichTextSegment], max_length: int = MAX_RICH_TEXT_LENGTH
) -> list[RichTextSegment]:
    """Split every oversized segment of a rich text list, keeping sibling order."""
    result: list[RichTextSegment] = []
    for segment in segments:
        if len(segment.content) <= max_length:
            result.append(segment)
            continue
        result.extend(split_segment(segment, max_length))
    return result
