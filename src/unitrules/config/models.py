"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, unitrules.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Policy = Literal["ignore", "warn", "error"]


class CheckConfig(BaseModel):
    """[check] section: how violation kinds are treated by callers.

    ``ignore`` drops the violation, ``warn`` reports it as a warning,
    ``error`` fails the check.
    """

    model_config = {"frozen": True}

    unknown_directive: Policy = "warn"
    unknown_section: Policy = "error"
    missing_required: Literal["warn", "error"] = "error"
