"""Built-in directive catalog for every systemd unit section.

Section rule sets are composed from smaller shared sets in the sibling
modules. ``default_catalog()`` builds the Catalog once per process.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping

from unitrules.directives.exec import KILL_OPTIONS
from unitrules.directives.mount import AUTOMOUNT_OPTIONS, MOUNT_OPTIONS, SWAP_OPTIONS
from unitrules.directives.path import PATH_OPTIONS, TIMER_OPTIONS
from unitrules.directives.resource_control import RESOURCE_CONTROL_OPTIONS
from unitrules.directives.service import SERVICE_OPTIONS
from unitrules.directives.socket import SOCKET_OPTIONS
from unitrules.directives.unit import INSTALL_OPTIONS, UNIT_OPTIONS
from unitrules.domain.catalog import Catalog, RuleSet, merge, rule_set

# Device units are configured through udev properties, not a unit section.
UDEV_PROPERTIES: tuple[str, ...] = (
    "SYSTEMD_WANTS",
    "SYSTEMD_USER_WANTS",
    "SYSTEMD_ALIAS",
    "SYSTEMD_READY",
    "ID_MODEL_FROM_DATABASE",
    "ID_MODEL",
)

SECTION_RULES: Mapping[str, RuleSet] = {
    "Unit": UNIT_OPTIONS,
    "Install": INSTALL_OPTIONS,
    "Service": SERVICE_OPTIONS,
    "Socket": SOCKET_OPTIONS,
    "Mount": MOUNT_OPTIONS,
    "Automount": AUTOMOUNT_OPTIONS,
    "Swap": SWAP_OPTIONS,
    "Path": PATH_OPTIONS,
    "Timer": TIMER_OPTIONS,
    "Slice": RESOURCE_CONTROL_OPTIONS,
    "Scope": merge(RESOURCE_CONTROL_OPTIONS, KILL_OPTIONS),
    "Device": rule_set(),
    "Target": rule_set(),
}


def build_catalog() -> Catalog:
    """Construct a fresh Catalog from the built-in section rule sets."""
    return Catalog(SECTION_RULES)


@functools.cache
def default_catalog() -> Catalog:
    """The process-wide built-in Catalog, constructed on first use."""
    return build_catalog()
