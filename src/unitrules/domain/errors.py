"""Construction-time errors for catalog data.

Per-value validation never raises; these surface once, when a catalog
or predicate registry is built from malformed definitions.
"""

from __future__ import annotations


class CatalogError(ValueError):
    """Malformed catalog data (duplicate directive, unresolved predicate)."""

    def __init__(
        self,
        message: str,
        *,
        section: str | None = None,
        directive: str | None = None,
        predicate: str | None = None,
    ) -> None:
        super().__init__(message)
        self.section = section
        self.directive = directive
        self.predicate = predicate
