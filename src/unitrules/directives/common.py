"""Shared rules and enumerations reused across unit sections."""

from __future__ import annotations

from collections.abc import Iterable

from unitrules.domain.rules import IntRange, Rule, ScalarValue
from unitrules.domain.types import ValueKind

STRING_KIND = ValueKind.STRING
INTEGER_KIND = ValueKind.INTEGER
BOOLEAN_KIND = ValueKind.BOOLEAN
SEQUENCE_KIND = ValueKind.SEQUENCE
MAPPING_KIND = ValueKind.MAPPING


def rule(
    *kinds: ValueKind,
    values: Iterable[ScalarValue] | None = None,
    between: tuple[int | None, int | None] | None = None,
    predicates: Iterable[str] = (),
    required: bool = False,
) -> Rule:
    """Shorthand constructor for catalog entries."""
    return Rule(
        allowed_types=frozenset(kinds),
        allowed_values=None if values is None else tuple(values),
        allowed_range=None if between is None else IntRange(minimum=between[0], maximum=between[1]),
        predicates=tuple(predicates),
        required=required,
    )


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

ARCHITECTURES: tuple[str, ...] = (
    "x86",
    "x86-64",
    "ppc",
    "ppc-le",
    "ppc64",
    "ppc64-le",
    "ia64",
    "parisc",
    "parisc64",
    "s390",
    "s390x",
    "sparc",
    "sparc64",
    "mips",
    "mips-le",
    "mips64",
    "mips64-le",
    "alpha",
    "arm",
    "arm-be",
    "arm64",
    "arm64-be",
    "sh",
    "sh64",
    "m86k",
    "tilegx",
    "cris",
)

VIRTUALIZATIONS: tuple[str, ...] = (
    "qemu",
    "kvm",
    "zvm",
    "vmware",
    "microsoft",
    "oracle",
    "xen",
    "bochs",
    "uml",
    "openvz",
    "lxc",
    "lxc-libvirt",
    "systemd-nspawn",
    "docker",
    "rkt",
)

POWER_ACTIONS: tuple[str, ...] = (
    "none",
    "reboot",
    "reboot-force",
    "reboot-immediate",
    "poweroff",
    "poweroff-force",
    "poweroff-immediate",
)

SECURITY_MODULES: tuple[str, ...] = ("selinux", "apparmor", "ima", "smack", "audit")

# ---------------------------------------------------------------------------
# Shared rules
# ---------------------------------------------------------------------------

STRING = rule(STRING_KIND)
INTEGER = rule(INTEGER_KIND)
BOOLEAN = rule(BOOLEAN_KIND)
STRING_OR_ARRAY = rule(STRING_KIND, SEQUENCE_KIND)
STRING_OR_INT = rule(STRING_KIND, INTEGER_KIND)
ARRAY = STRING_OR_ARRAY

ABSOLUTE_PATH = rule(STRING_KIND, predicates=["absolute-path"])
SOFT_ABSOLUTE_PATH = rule(STRING_KIND, predicates=["soft-absolute-path"])
ARRAY_OF_ABSOLUTE_PATHS = rule(STRING_KIND, SEQUENCE_KIND, predicates=["absolute-path"])
ARRAY_OF_SOFT_ABSOLUTE_PATHS = rule(STRING_KIND, SEQUENCE_KIND, predicates=["soft-absolute-path"])
ARRAY_OF_UNITS = rule(STRING_KIND, SEQUENCE_KIND, predicates=["unit-name"])
ARRAY_OF_URIS = rule(SEQUENCE_KIND, predicates=["uri"])
CONDITIONAL_PATH = rule(STRING_KIND, predicates=["condition-path"])
CAP = rule(STRING_KIND, SEQUENCE_KIND, predicates=["capability"])
UNIT = rule(STRING_KIND, predicates=["unit-name"])

ARCH = rule(STRING_KIND, values=ARCHITECTURES)
VIRT = rule(STRING_KIND, values=VIRTUALIZATIONS)
POWER = rule(STRING_KIND, values=POWER_ACTIONS)
SECURITY = rule(STRING_KIND, values=SECURITY_MODULES)
NEEDS_UPDATE = rule(STRING_KIND, values=["/etc", "/var", "!/etc", "!/var"])
