"""Value kinds, violation kinds, and unit-type constants.

A directive value arrives already parsed into a Python value by the
calling resource layer. ``kind_of`` maps that runtime value onto the
five kinds a rule can accept.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ValueKind(StrEnum):
    """Primitive kinds a directive value may take."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class ViolationKind(StrEnum):
    """Categories of validation failure."""

    UNKNOWN_DIRECTIVE = "UnknownDirective"
    TYPE_MISMATCH = "TypeMismatch"
    VALUE_NOT_ALLOWED = "ValueNotAllowed"
    PREDICATE_FAILED = "PredicateFailed"
    MISSING_REQUIRED = "MissingRequired"


UNIT_TYPES: tuple[str, ...] = (
    "automount",
    "device",
    "mount",
    "path",
    "scope",
    "service",
    "slice",
    "socket",
    "swap",
    "target",
    "timer",
)

SECTION_NAMES: tuple[str, ...] = (
    "Unit",
    "Install",
    "Service",
    "Socket",
    "Mount",
    "Automount",
    "Swap",
    "Path",
    "Timer",
    "Slice",
    "Scope",
    "Device",
    "Target",
)


def kind_of(value: object) -> ValueKind | None:
    """Classify *value* into a :class:`ValueKind`.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    Returns None for values of any other Python type.

    Examples:
        >>> kind_of(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> kind_of(["a", "b"])
        <ValueKind.SEQUENCE: 'sequence'>
        >>> kind_of(1.5) is None
        True
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return None


def type_name(value: object) -> str:
    """Human-readable kind name for *value*, falling back to the Python type."""
    kind = kind_of(value)
    if kind is None:
        return type(value).__name__
    return str(kind)
