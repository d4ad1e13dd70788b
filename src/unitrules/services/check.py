"""UnitCheckService: apply caller policy to validator output.

The domain Validator only reports violations. This service decides, per
``[check]`` configuration, which violations are dropped, which become
warnings, and which fail the check.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from unitrules.config.settings import UnitRulesSettings
from unitrules.directives import default_catalog
from unitrules.domain.types import ViolationKind
from unitrules.domain.validator import Validator
from unitrules.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from unitrules.config.models import Policy
    from unitrules.domain.catalog import Catalog
    from unitrules.domain.violations import ValidationResult, Violation

logger = logging.getLogger(__name__)

INVALID_UNIT = "INVALID_UNIT"


class UnitCheckService:
    """Validates directive options and applies the configured violation policy.

    Args:
        settings: Policy and logging settings; env vars and defaults when omitted.
        catalog: Rule catalog; the built-in catalog when omitted.
    """

    def __init__(
        self,
        settings: UnitRulesSettings | None = None,
        catalog: Catalog | None = None,
    ) -> None:
        self._settings = settings if settings is not None else UnitRulesSettings()
        self._validator = Validator(catalog if catalog is not None else default_catalog())

    @property
    def validator(self) -> Validator:
        return self._validator

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_directive(self, section: str, directive: str, value: object) -> ServiceResult:
        """Check a single directive value."""
        result = self._validator.validate(section, directive, value)
        return self._apply_policy("check_directive", result)

    def check_unit(self, unit: Mapping[str, Mapping[str, object]]) -> ServiceResult:
        """Check every section of *unit* (section name -> directive options)."""
        result = self._validator.validate_unit(unit)
        logger.debug(
            "Checked unit: %d sections, %d violations",
            len(unit),
            len(result.violations),
        )
        return self._apply_policy("check_unit", result)

    # ------------------------------------------------------------------
    # Policy
    # ------------------------------------------------------------------

    def _policy_for(self, violation: Violation) -> Policy:
        policy = self._settings.check
        if violation.kind == ViolationKind.UNKNOWN_DIRECTIVE:
            if violation.section not in self._validator.catalog:
                return policy.unknown_section
            return policy.unknown_directive
        if violation.kind == ViolationKind.MISSING_REQUIRED:
            return policy.missing_required
        return "error"

    def _apply_policy(self, op: str, result: ValidationResult) -> ServiceResult:
        errors: list[Violation] = []
        warnings: list[str] = []

        for violation in result.violations:
            action = self._policy_for(violation)
            if action == "ignore":
                continue
            if action == "warn":
                logger.warning(
                    "%s: %s",
                    violation.kind,
                    violation.message,
                    extra={
                        "section": violation.section,
                        "directive": violation.directive,
                        "kind": str(violation.kind),
                    },
                )
                warnings.append(violation.message)
                continue
            errors.append(violation)

        data = {
            "violations": [v.model_dump(mode="json") for v in errors],
            "count": len(errors),
        }
        if not errors:
            return ServiceResult.success(op, data, warnings)

        kinds = sorted({str(v.kind) for v in errors})
        return ServiceResult.failure(
            op,
            ServiceError(
                code=INVALID_UNIT,
                message=f"{len(errors)} violation(s): {', '.join(kinds)}",
                detail={"kinds": kinds},
            ),
            data,
            warnings,
        )
