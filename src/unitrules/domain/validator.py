"""Validator: checks (section, directive, value) against the Catalog.

Checks for a directive run independently and every violation is
returned, so a configuration author sees all problems in one pass.
The Validator performs no I/O and holds no mutable state; it is a pure
function of (catalog, section, directive, value).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from unitrules.domain.catalog import Catalog
from unitrules.domain.rules import Rule
from unitrules.domain.types import ValueKind, ViolationKind, kind_of, type_name
from unitrules.domain.violations import ValidationResult, Violation


class Validator:
    """Validates directive values against an explicitly passed :class:`Catalog`."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, section: str, directive: str, value: object) -> ValidationResult:
        """Validate one directive value.

        Unknown section or directive yields ``UnknownDirective``; callers
        decide whether to warn and pass it through.
        """
        rule = self._catalog.rule(section, directive)
        if rule is None:
            where = section if section in self._catalog else f"unknown section {section}"
            return ValidationResult(
                violations=(
                    Violation(
                        kind=ViolationKind.UNKNOWN_DIRECTIVE,
                        section=section,
                        directive=directive,
                        message=f"Unknown directive '{directive}' in {where}",
                        value=value,
                    ),
                )
            )

        kind = kind_of(value)
        if kind is None or kind not in rule.allowed_types:
            return ValidationResult(
                violations=(
                    self._type_mismatch(section, directive, rule, value),
                )
            )

        violations: list[Violation] = []
        if kind == ValueKind.SEQUENCE:
            for element in value:  # type: ignore[attr-defined]
                if not isinstance(element, str):
                    violations.append(
                        Violation(
                            kind=ViolationKind.TYPE_MISMATCH,
                            section=section,
                            directive=directive,
                            message=(
                                f"Directive '{directive}' elements must be string, "
                                f"got {type_name(element)}"
                            ),
                            value=element,
                        )
                    )
                    continue
                violations.extend(self._check_scalar(section, directive, rule, element))
        elif kind != ValueKind.MAPPING:
            violations.extend(self._check_scalar(section, directive, rule, value))

        return ValidationResult(violations=tuple(violations))

    def validate_section(
        self,
        section: str,
        directives: Iterable[str] | Mapping[str, object],
    ) -> ValidationResult:
        """Report ``MissingRequired`` for required directives absent from *directives*.

        *directives* may be an iterable of names or a mapping keyed by name.
        """
        if section not in self._catalog:
            return ValidationResult(
                violations=(
                    Violation(
                        kind=ViolationKind.UNKNOWN_DIRECTIVE,
                        section=section,
                        directive="",
                        message=f"Unknown section '{section}'",
                    ),
                )
            )
        present = set(directives)
        violations = tuple(
            Violation(
                kind=ViolationKind.MISSING_REQUIRED,
                section=section,
                directive=name,
                message=f"Required directive '{name}' missing from [{section}]",
            )
            for name in self._catalog.required(section)
            if name not in present
        )
        return ValidationResult(violations=violations)

    def validate_options(self, section: str, options: Mapping[str, object]) -> ValidationResult:
        """Validate every directive in *options* plus the section's required set."""
        result = self.validate_section(section, options)
        if section not in self._catalog:
            return result
        return result.merge(
            *(self.validate(section, directive, value) for directive, value in options.items())
        )

    def validate_unit(self, unit: Mapping[str, Mapping[str, object]]) -> ValidationResult:
        """Validate a whole unit: section name -> directive options."""
        return ValidationResult.ok().merge(
            *(self.validate_options(section, options) for section, options in unit.items())
        )

    # ------------------------------------------------------------------
    # Internal checks
    # ------------------------------------------------------------------

    def _type_mismatch(
        self, section: str, directive: str, rule: Rule, value: object
    ) -> Violation:
        expected = ", ".join(sorted(str(k) for k in rule.allowed_types))
        return Violation(
            kind=ViolationKind.TYPE_MISMATCH,
            section=section,
            directive=directive,
            message=(
                f"Directive '{directive}' expects one of [{expected}], got {type_name(value)}"
            ),
            value=value,
        )

    def _check_scalar(
        self, section: str, directive: str, rule: Rule, value: object
    ) -> list[Violation]:
        """Enumeration and predicate checks for a scalar value or sequence element."""
        violations: list[Violation] = []

        if not rule.allows(value):
            violations.append(
                Violation(
                    kind=ViolationKind.VALUE_NOT_ALLOWED,
                    section=section,
                    directive=directive,
                    message=(
                        f"Value {value!r} not allowed for '{directive}'. "
                        f"Allowed: {rule.describe_allowed()}"
                    ),
                    value=value,
                )
            )

        registry = self._catalog.registry
        for name in rule.predicates:
            predicate = registry[name]
            if not predicate(value):
                violations.append(
                    Violation(
                        kind=ViolationKind.PREDICATE_FAILED,
                        section=section,
                        directive=directive,
                        message=(
                            f"Value {value!r} for '{directive}' failed check: "
                            f"{predicate.description}"
                        ),
                        value=value,
                        predicate=name,
                    )
                )

        return violations
