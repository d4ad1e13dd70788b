"""Resource control rules (systemd.resource-control(5)).

Shared by [Service], [Socket], [Mount], [Swap], [Slice], and [Scope].
"""

from __future__ import annotations

from unitrules.directives.common import (
    BOOLEAN,
    INTEGER_KIND,
    STRING_KIND,
    STRING_OR_INT,
    rule,
)
from unitrules.domain.catalog import rule_set

CPU_SHARES = rule(INTEGER_KIND, between=(2, 262_144))
IO_WEIGHT = rule(INTEGER_KIND, between=(1, 10_000))
BLOCK_IO_WEIGHT = rule(INTEGER_KIND, between=(10, 1_000))
DEVICE_BANDWIDTH = rule(STRING_KIND, predicates=["device-bandwidth"])

RESOURCE_CONTROL_OPTIONS = rule_set(
    ("CPUAccounting", BOOLEAN),
    ("CPUShares", CPU_SHARES),
    ("StartupCPUShares", CPU_SHARES),
    ("CPUQuota", rule(STRING_KIND, predicates=["percentage"])),
    ("MemoryAccounting", BOOLEAN),
    ("MemoryLimit", STRING_OR_INT),
    ("TasksAccounting", BOOLEAN),
    ("TasksMax", rule(STRING_KIND, INTEGER_KIND, predicates=["integer-or-infinity"])),
    ("IOAccounting", BOOLEAN),
    ("IOWeight", IO_WEIGHT),
    ("StartupIOWeight", IO_WEIGHT),
    ("IODeviceWeight", rule(STRING_KIND, predicates=["io-device-weight"])),
    ("IOReadBandwidthMax", STRING_OR_INT),
    ("IOWriteBandwidthMax", STRING_OR_INT),
    ("IOReadIOPSMax", DEVICE_BANDWIDTH),
    ("IOWriteIOPSMax", DEVICE_BANDWIDTH),
    ("BlockIOAccounting", BOOLEAN),
    ("BlockIOWeight", BLOCK_IO_WEIGHT),
    ("StartupBlockIOWeight", BLOCK_IO_WEIGHT),
    ("BlockIODeviceWeight", rule(STRING_KIND, predicates=["blkio-device-weight"])),
    ("BlockIOReadBandwidth", DEVICE_BANDWIDTH),
    ("BlockIOWriteBandwidth", DEVICE_BANDWIDTH),
    ("DeviceAllow", rule(STRING_KIND, predicates=["device-access"])),
    ("DevicePolicy", rule(STRING_KIND, values=["strict", "auto", "closed"])),
    ("Slice", rule(STRING_KIND, predicates=["slice-name"])),
    ("Delegate", BOOLEAN),
)
