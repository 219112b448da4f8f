"""Request validation exports."""

from .field_checks import check_field, check_fields
from .request_validator import RequestValidationError, RequestValidator

__all__ = [
    "RequestValidator",
    "RequestValidationError",
    "check_field",
    "check_fields",
]
