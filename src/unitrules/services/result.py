"""ServiceResult and ServiceError: the contract between services and callers.

INVARIANT: every service method returns a ServiceResult. Resource layers
of the embedding tool branch on ``ok`` and read ``warnings`` for
non-fatal findings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured failure payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of service operations.

    Attributes:
        ok: False when policy treats at least one finding as an error.
        op: Operation name (e.g. ``"check_unit"``).
        data: Operation payload; for checks, ``violations`` and ``count``.
        warnings: Findings downgraded to warnings by policy.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], warnings: list[str]) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings)

    @classmethod
    def failure(
        cls,
        op: str,
        error: ServiceError,
        data: dict[str, Any],
        warnings: list[str],
    ) -> ServiceResult:
        return cls(ok=False, op=op, data=data, warnings=warnings, error=error)
