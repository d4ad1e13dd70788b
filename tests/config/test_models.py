"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from unitrules.config.models import CheckConfig


class TestCheckConfig:
    def test_defaults(self) -> None:
        config = CheckConfig()
        assert config.unknown_directive == "warn"
        assert config.unknown_section == "error"
        assert config.missing_required == "error"

    def test_invalid_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CheckConfig(unknown_directive="shrug")  # type: ignore[arg-type]

    def test_missing_required_cannot_be_ignored(self) -> None:
        with pytest.raises(ValidationError):
            CheckConfig(missing_required="ignore")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        config = CheckConfig()
        with pytest.raises(ValidationError):
            config.unknown_directive = "error"  # type: ignore[misc]
