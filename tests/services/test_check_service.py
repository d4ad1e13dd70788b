"""Tests for UnitCheckService: policy applied to validator output."""

from __future__ import annotations

import logging

import pytest

from unitrules.config.models import CheckConfig
from unitrules.config.settings import UnitRulesSettings
from unitrules.domain.catalog import Catalog
from unitrules.services.check import INVALID_UNIT, UnitCheckService


def _service(**policy: str) -> UnitCheckService:
    return UnitCheckService(settings=UnitRulesSettings(check=CheckConfig(**policy)))


class TestCheckUnit:
    def test_clean_unit(self) -> None:
        result = _service().check_unit(
            {
                "Unit": {"Description": "Demo"},
                "Service": {"ExecStart": "/usr/bin/demo", "Type": "notify"},
                "Install": {"WantedBy": ["multi-user.target"]},
            }
        )
        assert result.ok
        assert result.op == "check_unit"
        assert result.data == {"violations": [], "count": 0}
        assert result.warnings == []

    def test_errors_fail_the_check(self) -> None:
        result = _service().check_unit({"Service": {"Type": "sometimes", "Nice": 40}})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_UNIT
        assert result.data["count"] == 2
        kinds = {v["kind"] for v in result.data["violations"]}
        assert kinds == {"ValueNotAllowed"}
        assert result.error.detail == {"kinds": ["ValueNotAllowed"]}

    def test_unknown_directive_warns_by_default(self) -> None:
        result = _service().check_unit({"Service": {"ExecStart": "/bin/true", "NewOption": "x"}})
        assert result.ok
        assert len(result.warnings) == 1
        assert "NewOption" in result.warnings[0]

    def test_unknown_directive_ignored(self) -> None:
        result = _service(unknown_directive="ignore").check_unit({"Service": {"NewOption": "x"}})
        assert result.ok
        assert result.warnings == []

    def test_unknown_directive_as_error(self) -> None:
        result = _service(unknown_directive="error").check_unit({"Service": {"NewOption": "x"}})
        assert not result.ok
        assert result.data["violations"][0]["directive"] == "NewOption"

    def test_unknown_section_errors_by_default(self) -> None:
        result = _service().check_unit({"Bogus": {"A": "1"}})
        assert not result.ok
        assert result.data["violations"][0]["kind"] == "UnknownDirective"

    def test_unknown_section_can_warn(self) -> None:
        result = _service(unknown_section="warn").check_unit({"Bogus": {"A": "1"}})
        assert result.ok
        assert result.warnings == ["Unknown section 'Bogus'"]

    def test_missing_required_can_warn(self) -> None:
        result = _service(missing_required="warn").check_unit({"Automount": {}})
        assert result.ok
        assert "Where" in result.warnings[0]

    def test_missing_required_errors_by_default(self) -> None:
        result = _service().check_unit({"Automount": {}})
        assert not result.ok
        assert result.data["violations"][0]["kind"] == "MissingRequired"

    def test_warning_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="unitrules"):
            _service().check_unit({"Service": {"NewOption": "x"}})
        assert any("NewOption" in r.getMessage() for r in caplog.records)


class TestCheckDirective:
    def test_single_directive(self) -> None:
        result = _service().check_directive("Service", "CPUSchedulingPriority", 100)
        assert not result.ok
        assert result.op == "check_directive"
        [violation] = result.data["violations"]
        assert violation["value"] == 100

    def test_custom_catalog(self, small_catalog: Catalog) -> None:
        svc = UnitCheckService(settings=UnitRulesSettings(), catalog=small_catalog)
        assert svc.validator.catalog is small_catalog
        assert svc.check_directive("Demo", "Mode", "a").ok

    @pytest.mark.parametrize("value", [b"\xff", object()])
    def test_unsupported_value_type_reported(self, value: object) -> None:
        result = _service().check_directive("Service", "Nice", value)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_UNIT
        [violation] = result.data["violations"]
        assert violation["kind"] == "TypeMismatch"
        assert violation["value"] == repr(value)

    def test_unsupported_element_in_unknown_directive(self) -> None:
        result = _service(unknown_directive="error").check_unit(
            {"Service": {"NewOption": [object()]}}
        )
        assert not result.ok
        [violation] = result.data["violations"]
        assert violation["value"][0].startswith("<object object")
