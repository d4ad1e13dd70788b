"""Rule and IntRange: the validation contract for one directive.

A Rule is inert data: accepted value kinds, an optional enumeration
(a finite value set and/or an inclusive integer range), a required flag,
and predicate identifiers resolved through the predicate registry.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from unitrules.domain.types import ValueKind

ScalarValue = bool | int | str


class IntRange(BaseModel):
    """Inclusive integer range; ``None`` leaves a side unbounded.

    Checked by comparison, never materialized.
    """

    model_config = {"frozen": True}

    minimum: int | None = None
    maximum: int | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> IntRange:
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(f"Empty range: {self.minimum} > {self.maximum}")
        return self

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def __str__(self) -> str:
        low = "" if self.minimum is None else str(self.minimum)
        high = "" if self.maximum is None else str(self.maximum)
        return f"{low}..{high}"


class Rule(BaseModel):
    """Validation contract for a single directive.

    Attributes:
        allowed_types: Value kinds the directive accepts.
        allowed_values: Finite set of accepted scalars (type-strict match).
        allowed_range: Inclusive integer range of accepted values.
        required: Whether the directive must appear when its section does.
        predicates: Predicate identifiers every value (or element) must satisfy.

    When both ``allowed_values`` and ``allowed_range`` are set, a value
    is accepted if it belongs to either.
    """

    model_config = {"frozen": True}

    allowed_types: frozenset[ValueKind]
    allowed_values: tuple[ScalarValue, ...] | None = None
    allowed_range: IntRange | None = None
    required: bool = False
    predicates: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def has_enumeration(self) -> bool:
        return self.allowed_values is not None or self.allowed_range is not None

    def allows(self, value: object) -> bool:
        """Return True if *value* belongs to the enumeration (or there is none)."""
        if not self.has_enumeration:
            return True
        if self.allowed_range is not None and value in self.allowed_range:
            return True
        if self.allowed_values is not None:
            return any(type(v) is type(value) and v == value for v in self.allowed_values)
        return False

    def describe_allowed(self) -> str:
        """Human-readable summary of the enumeration for messages."""
        parts: list[str] = []
        if self.allowed_values is not None:
            parts.extend(repr(v) for v in self.allowed_values)
        if self.allowed_range is not None:
            parts.append(f"integers in {self.allowed_range}")
        return ", ".join(parts)

    def extend(self, **changes: Any) -> Rule:
        """Return a validated copy of this rule with *changes* applied."""
        data = self.model_dump()
        data.update(changes)
        return Rule.model_validate(data)
