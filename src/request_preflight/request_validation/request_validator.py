"""Request validation service.

``RequestValidator`` offers three modes over the supported request shapes:

- ``validate`` reports every violation and never raises for them,
- ``validate_or_fix`` splits oversized rich text when configured and raises on
  the first violation it cannot repair,
- ``validate_or_throw`` raises on the first violation in a raw block array.

Violations are always acted on in walk order, so the first disqualifying
violation in document order is the one reported by a failure.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from typing import Any, TypeVar

from request_preflight.configuration import ValidationConfig
from request_preflight.field_walking import (
    index_path,
    rewrite_rich_text,
    walk_block_array,
    walk_request,
)
from request_preflight.limits_catalog import MAX_RICH_TEXT_LENGTH
from request_preflight.request_models import (
    BlockRequest,
    CreateDocumentRequest,
    CreateSchemaRequest,
    RichTextList,
    RichTextSegment,
    UpdateDocumentRequest,
)
from request_preflight.text_splitting import split_segment
from request_preflight.violation_reporting import ValidationResult, Violation, ViolationKind

from .field_checks import check_fields

_LOGGER = logging.getLogger("request_preflight.validation")
_LOGGER.addHandler(logging.NullHandler())

_FIXABLE_REQUEST_TYPES = (CreateDocumentRequest, UpdateDocumentRequest, CreateSchemaRequest)

RequestT = TypeVar("RequestT", CreateDocumentRequest, UpdateDocumentRequest, CreateSchemaRequest)


class RequestValidationError(Exception):
    """Raised when a request holds a violation that is not repaired."""

    def __init__(self, violation: Violation, result: ValidationResult) -> None:
        super().__init__(f"Request validation failed at {violation.field}: {violation.message}")
        self.violation = violation
        self.result = result


class RequestValidator:
    """Validates write requests against platform limits before they are sent.

    The validator only holds its immutable configuration, so one instance can
    be shared between threads and reused across unrelated requests.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig.default()

    @property
    def config(self) -> ValidationConfig:
        return self._config

    def validate(self, request: Any) -> ValidationResult:
        """Report every violation in a request or raw block sequence.

        Raises:
          TypeError: If the value is not a supported request shape.
        """
        return ValidationResult(violations=tuple(check_fields(walk_request(request))))

    def validate_block_array(
        self, field_name: str, blocks: Sequence[BlockRequest]
    ) -> ValidationResult:
        """Report every violation in a raw block array rooted at ``field_name``."""
        fields = walk_block_array(field_name, blocks)
        return ValidationResult(violations=tuple(check_fields(fields)))

    def validate_or_fix(self, request: RequestT) -> RequestT:
        """Return a request that satisfies all limits.

        Oversized rich text segments are split when ``auto_split_long_text`` is
        enabled. A request without violations is returned as the same instance.

        Raises:
          RequestValidationError: On the first violation that is not repaired.
          TypeError: If the value is not a document or schema request.
        """
        if not isinstance(request, _FIXABLE_REQUEST_TYPES):
            raise TypeError(
                f"validate_or_fix does not support {type(request).__name__}; "
                "use validate_or_throw for block arrays."
            )
        result = self.validate(request)
        if result.is_valid:
            return request

        split_paths: list[str] = []
        for violation in result.violations:
            if not self._is_repairable(violation):
                raise RequestValidationError(violation, result)
            split_paths.append(violation.field)

        fixed = rewrite_rich_text(request, partial(_split_marked_segments, frozenset(split_paths)))
        for path in split_paths:
            _LOGGER.info("Auto-split long text content in field '%s' into multiple segments", path)
        return fixed

    def validate_or_throw(self, field_name: str, blocks: Sequence[BlockRequest]) -> None:
        """Raise on the first violation in a raw block array; never repairs.

        Raises:
          RequestValidationError: If any violation is found.
        """
        result = self.validate_block_array(field_name, blocks)
        if not result.is_valid:
            raise RequestValidationError(result.violations[0], result)

    def _is_repairable(self, violation: Violation) -> bool:
        return (
            self._config.auto_split_long_text
            and violation.kind == ViolationKind.CONTENT_TOO_LONG
            and violation.auto_fix_available
        )


def _split_marked_segments(
    marked_paths: frozenset[str], list_path: str, segments: RichTextList
) -> RichTextList:
    # A property name can spell out a block path, so a marked path alone does
    # not prove that this segment is the oversized one.
    marked = [
        len(segment.content) > MAX_RICH_TEXT_LENGTH
        and index_path(list_path, index) in marked_paths
        for index, segment in enumerate(segments)
    ]
    if not any(marked):
        return segments
    rebuilt: list[RichTextSegment] = []
    for segment, is_marked in zip(segments, marked, strict=True):
        if is_marked:
            rebuilt.extend(split_segment(segment, MAX_RICH_TEXT_LENGTH))
        else:
            rebuilt.append(segment)
    return tuple(rebuilt)
