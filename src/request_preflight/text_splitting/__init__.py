"""Text splitting exports."""

from .segment_splitter import split_segment, split_segments

__all__ = ["split_segment", "split_segments"]
