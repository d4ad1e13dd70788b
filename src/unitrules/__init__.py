"""unitrules: validation rules for systemd unit-file directives."""

from __future__ import annotations

from unitrules.directives import UDEV_PROPERTIES, build_catalog, default_catalog
from unitrules.domain.catalog import Catalog, merge, rule_set
from unitrules.domain.errors import CatalogError
from unitrules.domain.predicates import PREDICATE_REGISTRY, Predicate, PredicateRegistry
from unitrules.domain.rules import IntRange, Rule
from unitrules.domain.types import UNIT_TYPES, ValueKind, ViolationKind
from unitrules.domain.validator import Validator
from unitrules.domain.violations import ValidationResult, Violation

__version__ = "0.1.0"

__all__ = [
    "PREDICATE_REGISTRY",
    "UDEV_PROPERTIES",
    "UNIT_TYPES",
    "Catalog",
    "CatalogError",
    "IntRange",
    "Predicate",
    "PredicateRegistry",
    "Rule",
    "ValidationResult",
    "Validator",
    "ValueKind",
    "Violation",
    "ViolationKind",
    "__version__",
    "build_catalog",
    "default_catalog",
    "merge",
    "rule_set",
]
