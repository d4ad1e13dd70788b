"""Tests for Rule and IntRange."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from unitrules.domain.rules import IntRange, Rule
from unitrules.domain.types import ValueKind


class TestIntRange:
    def test_inclusive_bounds(self) -> None:
        r = IntRange(minimum=0, maximum=99)
        assert 0 in r
        assert 99 in r
        assert 100 not in r
        assert -1 not in r

    def test_unbounded_side(self) -> None:
        r = IntRange(minimum=2)
        assert 2 in r
        assert 10**9 in r
        assert 1 not in r

    def test_rejects_bool_and_non_int(self) -> None:
        r = IntRange(minimum=0, maximum=1)
        assert True not in r
        assert "1" not in r
        assert 0.5 not in r

    def test_empty_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IntRange(minimum=5, maximum=1)

    def test_str(self) -> None:
        assert str(IntRange(minimum=-20, maximum=19)) == "-20..19"
        assert str(IntRange(maximum=7)) == "..7"


class TestRuleEnumeration:
    def test_no_enumeration_allows_anything(self) -> None:
        rule = Rule(allowed_types={ValueKind.STRING})
        assert not rule.has_enumeration
        assert rule.allows("anything")

    def test_values_are_type_strict(self) -> None:
        rule = Rule(
            allowed_types={ValueKind.BOOLEAN, ValueKind.STRING},
            allowed_values=(True, False, "full"),
        )
        assert rule.allows(True)
        assert rule.allows("full")
        assert not rule.allows(1)
        assert not rule.allows("true")

    def test_values_keep_python_types(self) -> None:
        rule = Rule(allowed_types={ValueKind.BOOLEAN}, allowed_values=(True, False))
        assert rule.allowed_values == (True, False)
        assert all(isinstance(v, bool) for v in rule.allowed_values or ())

    def test_range_or_values(self) -> None:
        rule = Rule(
            allowed_types={ValueKind.INTEGER, ValueKind.STRING},
            allowed_values=("none", "idle"),
            allowed_range=IntRange(minimum=0, maximum=3),
        )
        assert rule.allows(3)
        assert rule.allows("idle")
        assert not rule.allows(4)
        assert not rule.allows("3")

    def test_describe_allowed(self) -> None:
        rule = Rule(
            allowed_types={ValueKind.INTEGER, ValueKind.STRING},
            allowed_values=("none",),
            allowed_range=IntRange(minimum=0, maximum=3),
        )
        assert rule.describe_allowed() == "'none', integers in 0..3"


class TestRuleModel:
    def test_frozen(self) -> None:
        rule = Rule(allowed_types={ValueKind.STRING})
        with pytest.raises(ValidationError):
            rule.required = True  # type: ignore[misc]

    def test_extend_returns_copy(self) -> None:
        base = Rule(allowed_types={ValueKind.STRING}, predicates=("absolute-path",))
        required = base.extend(required=True)
        assert required.required is True
        assert required.predicates == ("absolute-path",)
        assert required.allowed_types == frozenset({ValueKind.STRING})
        assert base.required is False

    def test_defaults(self) -> None:
        rule = Rule(allowed_types={ValueKind.INTEGER})
        assert rule.allowed_values is None
        assert rule.allowed_range is None
        assert rule.predicates == ()
        assert rule.required is False
