"""[Service] section rules (systemd.service(5))."""

from __future__ import annotations

from unitrules.directives.common import (
    ABSOLUTE_PATH,
    ARRAY_OF_UNITS,
    BOOLEAN,
    INTEGER,
    INTEGER_KIND,
    POWER,
    SEQUENCE_KIND,
    STRING,
    STRING_KIND,
    STRING_OR_INT,
    rule,
)
from unitrules.directives.exec import EXEC_OPTIONS, KILL_OPTIONS
from unitrules.directives.resource_control import RESOURCE_CONTROL_OPTIONS
from unitrules.domain.catalog import merge, rule_set

SERVICE_TYPES = ("simple", "forking", "oneshot", "dbus", "notify", "idle")

RESTART_POLICIES = (
    "no",
    "on-success",
    "on-failure",
    "on-abnormal",
    "on-watchdog",
    "on-abort",
    "always",
)

EXIT_STATUS = rule(STRING_KIND, SEQUENCE_KIND, INTEGER_KIND)

SERVICE_OPTIONS = merge(
    rule_set(
        ("Type", rule(STRING_KIND, values=SERVICE_TYPES)),
        ("RemainAfterExit", BOOLEAN),
        ("GuessMainPID", BOOLEAN),
        ("PIDFile", ABSOLUTE_PATH),
        ("BusName", STRING),
        ("ExecStart", STRING),
        ("ExecStartPre", STRING),
        ("ExecStartPost", STRING),
        ("ExecReload", STRING),
        ("ExecStop", STRING),
        ("ExecStopPost", STRING),
        ("RestartSec", STRING_OR_INT),
        ("TimeoutStartSec", STRING_OR_INT),
        ("TimeoutStopSec", STRING_OR_INT),
        ("TimeoutSec", STRING_OR_INT),
        ("RuntimeMaxSec", STRING_OR_INT),
        ("WatchdogSec", STRING_OR_INT),
        ("Restart", rule(STRING_KIND, values=RESTART_POLICIES)),
        ("SuccessExitStatus", EXIT_STATUS),
        ("RestartPreventExitStatus", EXIT_STATUS),
        ("RestartForceExitStatus", EXIT_STATUS),
        ("PermissionsStartOnly", BOOLEAN),
        ("RootDirectoryStartOnly", BOOLEAN),
        ("NonBlocking", BOOLEAN),
        ("NotifyAccess", rule(STRING_KIND, values=["none", "main", "all"])),
        ("Sockets", ARRAY_OF_UNITS),
        ("FailureAction", POWER),
        ("FileDescriptorStoreMax", INTEGER),
        ("USBFunctionDescriptors", STRING),
        ("USBFunctionStrings", STRING),
    ),
    EXEC_OPTIONS,
    KILL_OPTIONS,
    RESOURCE_CONTROL_OPTIONS,
)
