"""Pre-flight validation and auto-correction of structured write requests."""

from .configuration import ValidationConfig
from .request_validation import RequestValidationError, RequestValidator
from .text_splitting import split_segment, split_segments
from .violation_reporting import ValidationResult, Violation, ViolationKind

__all__ = [
    "RequestValidator",
    "RequestValidationError",
    "ValidationConfig",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "split_segment",
    "split_segments",
]
