"""Violation and ValidationResult: validation outcomes as values.

INVARIANT: validation never raises. Every outcome is a ValidationResult,
either valid (no violations) or carrying every violation found.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_serializer

from unitrules.domain.types import ValueKind, ViolationKind, kind_of


def _jsonable(value: Any) -> Any:
    """Scalars, sequences and mappings pass through; anything else becomes its repr."""
    kind = kind_of(value)
    if kind == ValueKind.SEQUENCE:
        return [_jsonable(item) for item in value]
    if kind == ValueKind.MAPPING:
        return {str(key): _jsonable(item) for key, item in value.items()}
    if kind is None:
        return repr(value)
    return value


class Violation(BaseModel):
    """A single failed check.

    Attributes:
        kind: Category of failure.
        section: Section name the directive was looked up in.
        directive: Directive name (empty for an unknown section).
        message: Human-readable explanation.
        value: The offending value or sequence element, when there is one.
        predicate: Identifier of the failed predicate, for ``PredicateFailed``.
    """

    model_config = {"frozen": True}

    kind: ViolationKind
    section: str
    directive: str
    message: str
    value: Any = None
    predicate: str | None = None

    @field_serializer("value", when_used="json")
    def _serialize_value(self, value: Any) -> Any:
        return None if value is None else _jsonable(value)


class ValidationResult(BaseModel):
    """Outcome of validating one directive, a section, or a whole unit."""

    model_config = {"frozen": True}

    violations: tuple[Violation, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls()

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        """Violations of a single *kind*, in report order."""
        return [v for v in self.violations if v.kind == kind]

    def merge(self, *others: ValidationResult) -> ValidationResult:
        """Concatenate violations from *others* after this result's."""
        merged = list(self.violations)
        for other in others:
            merged.extend(other.violations)
        return ValidationResult(violations=tuple(merged))
