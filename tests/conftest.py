"""Shared pytest fixtures for unitrules tests."""

from __future__ import annotations

import pytest

from unitrules.directives import default_catalog
from unitrules.directives.common import BOOLEAN, STRING_KIND, rule
from unitrules.domain.catalog import Catalog, rule_set
from unitrules.domain.validator import Validator


@pytest.fixture
def catalog() -> Catalog:
    """The built-in catalog."""
    return default_catalog()


@pytest.fixture
def validator(catalog: Catalog) -> Validator:
    return Validator(catalog)


@pytest.fixture
def small_catalog() -> Catalog:
    """A two-section catalog covering each rule feature."""
    return Catalog(
        {
            "Demo": rule_set(
                ("Mode", rule(STRING_KIND, values=["a", "b", "c"])),
                ("Flag", BOOLEAN),
                ("Home", rule(STRING_KIND, predicates=["absolute-path"], required=True)),
            ),
            "Empty": rule_set(),
        }
    )
