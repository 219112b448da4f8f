"""Violation reporting exports."""

from .violation_models import ValidationResult, Violation, ViolationKind

__all__ = [
    "Violation",
    "ViolationKind",
    "ValidationResult",
]
