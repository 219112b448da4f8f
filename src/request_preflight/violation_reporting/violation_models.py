"""Violation reporting entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViolationKind(str, Enum):
    """Kinds of structural limit breaches."""

    CONTENT_TOO_LONG = "content_too_long"
    ARRAY_TOO_LARGE = "array_too_large"


@dataclass(frozen=True)
class Violation:
    """One detected limit breach tied to the exact field that caused it."""

    field: str
    kind: ViolationKind
    message: str
    auto_fix_available: bool
    current_value: object | None = None
    limit: object | None = None
    suggested_action: str | None = None

    @property
    def detailed_message(self) -> str:
        """Return the message with current value, limit, auto-fix and suggestion hints."""
        parts = [self.message]
        if self.current_value is not None and self.limit is not None:
            parts.append(f" (current: {self.current_value}, limit: {self.limit})")
        if self.auto_fix_available:
            parts.append(" - Auto-fix available")
        if self.suggested_action is not None:
            parts.append(f" - Suggested: {self.suggested_action}")
        return "".join(parts)


@dataclass(frozen=True)
class ValidationResult:
    """Ordered violations found by one validation call."""

    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return True when no violations are present."""
        return not self.violations

    @property
    def has_errors(self) -> bool:
        """Return True when any violation is present; every kind is an error."""
        return bool(self.violations)

    def violations_of(self, kind: ViolationKind) -> tuple[Violation, ...]:
        """Return the violations of one kind in field order."""
        return tuple(violation for violation in self.violations if violation.kind == kind)

    def violations_for_field(self, field: str) -> tuple[Violation, ...]:
        """Return the violations reported for one field path."""
        return tuple(violation for violation in self.violations if violation.field == field)

    def summary(self) -> str:
        """Return a human-readable multi-line summary of all violations."""
        if self.is_valid:
            return "No validation violations found"
        lines = ["Validation Summary:", f"  Errors: {len(self.violations)}", ""]
        lines.extend(
            f"  {violation.kind.name}: {violation.message}" for violation in self.violations
        )
        return "\n".join(lines)
