"""Catalog: the immutable section -> directive -> Rule table.

Section rule sets are composed explicitly: ``rule_set`` builds one from
``(directive, Rule)`` entries and rejects duplicates, ``merge`` layers
rule sets left to right with later entries winning. The Catalog checks
at construction that every referenced predicate is registered.

INVARIANT: a Catalog is never mutated after construction. It is safe to
share across threads without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from unitrules.domain.errors import CatalogError
from unitrules.domain.predicates import PREDICATE_REGISTRY, PredicateRegistry
from unitrules.domain.rules import Rule

logger = logging.getLogger(__name__)

RuleSet = Mapping[str, Rule]


def rule_set(*entries: tuple[str, Rule]) -> RuleSet:
    """Build a read-only rule set from ``(directive, Rule)`` pairs.

    Raises:
        CatalogError: If a directive name appears twice.
    """
    rules: dict[str, Rule] = {}
    for directive, rule in entries:
        if directive in rules:
            raise CatalogError(f"Duplicate directive: {directive}", directive=directive)
        rules[directive] = rule
    return MappingProxyType(rules)


def merge(*rule_sets: RuleSet) -> RuleSet:
    """Merge rule sets left to right; later entries win on key collision."""
    merged: dict[str, Rule] = {}
    for rules in rule_sets:
        merged.update(rules)
    return MappingProxyType(merged)


class Catalog(Mapping[str, Mapping[str, Rule]]):
    """Read-only mapping of section name to directive rules.

    Args:
        sections: Section name to rule set.
        registry: Predicate registry used to resolve rule predicates.

    Raises:
        CatalogError: If a rule references an unregistered predicate.
    """

    def __init__(
        self,
        sections: Mapping[str, RuleSet],
        registry: PredicateRegistry = PREDICATE_REGISTRY,
    ) -> None:
        frozen: dict[str, Mapping[str, Rule]] = {}
        for section, rules in sections.items():
            for directive, rule in rules.items():
                for name in rule.predicates:
                    if name not in registry:
                        raise CatalogError(
                            f"Unknown predicate '{name}' on {section}.{directive}",
                            section=section,
                            directive=directive,
                            predicate=name,
                        )
            frozen[section] = MappingProxyType(dict(rules))
        self._sections = MappingProxyType(frozen)
        self._registry = registry
        logger.debug(
            "Built catalog: %d sections, %d directives",
            len(frozen),
            sum(len(rules) for rules in frozen.values()),
        )

    # -- Mapping protocol --------------------------------------------------

    def __getitem__(self, section: str) -> Mapping[str, Rule]:
        return self._sections[section]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    # -- Queries -----------------------------------------------------------

    @property
    def registry(self) -> PredicateRegistry:
        return self._registry

    @property
    def sections(self) -> tuple[str, ...]:
        return tuple(self._sections)

    def directives(self, section: str) -> tuple[str, ...]:
        """Directive names of *section*; empty for an unknown section."""
        return tuple(self._sections.get(section, {}))

    def rule(self, section: str, directive: str) -> Rule | None:
        """Resolve *section* then *directive*; None if either is absent."""
        rules = self._sections.get(section)
        if rules is None:
            return None
        return rules.get(directive)

    def required(self, section: str) -> tuple[str, ...]:
        """Names of directives marked required in *section*."""
        rules = self._sections.get(section, {})
        return tuple(name for name, rule in rules.items() if rule.required)

    # -- Serialization -----------------------------------------------------

    def to_data(self) -> dict[str, list[dict[str, Any]]]:
        """Dump to JSON-compatible data: section -> list of rule dicts with ``name``."""
        data: dict[str, list[dict[str, Any]]] = {}
        for section, rules in self._sections.items():
            entries: list[dict[str, Any]] = []
            for directive, rule in rules.items():
                entry = rule.model_dump(mode="json", exclude_defaults=True)
                entry["allowed_types"] = sorted(str(k) for k in rule.allowed_types)
                entries.append({"name": directive, **entry})
            data[section] = entries
        return data

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, Iterable[Mapping[str, Any]]],
        registry: PredicateRegistry = PREDICATE_REGISTRY,
    ) -> Catalog:
        """Rebuild a Catalog from :meth:`to_data` output.

        Raises:
            CatalogError: On duplicate names within a section or unknown predicates.
        """
        sections: dict[str, RuleSet] = {}
        for section, entries in data.items():
            pairs: list[tuple[str, Rule]] = []
            for entry in entries:
                fields = dict(entry)
                name = fields.pop("name")
                pairs.append((name, Rule.model_validate(fields)))
            try:
                sections[section] = rule_set(*pairs)
            except CatalogError as exc:
                raise CatalogError(str(exc), section=section, directive=exc.directive) from exc
        return cls(sections, registry=registry)
