"""Execution environment and kill rules (systemd.exec(5), systemd.kill(5)).

Shared by [Service], [Socket], [Mount], and [Swap].
"""

from __future__ import annotations

from unitrules.directives.common import (
    ABSOLUTE_PATH,
    ARCH,
    ARRAY,
    ARRAY_OF_ABSOLUTE_PATHS,
    ARRAY_OF_SOFT_ABSOLUTE_PATHS,
    BOOLEAN,
    BOOLEAN_KIND,
    CAP,
    INTEGER_KIND,
    MAPPING_KIND,
    SEQUENCE_KIND,
    SOFT_ABSOLUTE_PATH,
    STRING,
    STRING_KIND,
    STRING_OR_ARRAY,
    STRING_OR_INT,
    rule,
)
from unitrules.domain.catalog import rule_set

OUTPUT_TARGETS = (
    "inherit",
    "null",
    "tty",
    "journal",
    "syslog",
    "kmsg",
    "journal+console",
    "syslog+console",
    "kmsg+console",
    "socket",
)

SYSLOG_FACILITIES = (
    "kern",
    "user",
    "mail",
    "daemon",
    "auth",
    "syslog",
    "lpr",
    "news",
    "uucp",
    "cron",
    "authpriv",
    "ftp",
    "local0",
    "local1",
    "local2",
    "local3",
    "local4",
    "local5",
    "local6",
    "local7",
)

SYSLOG_LEVELS = ("emerg", "alert", "crit", "err", "warning", "notice", "info", "debug")

# An empty string resets the list.
SECURE_BITS = (
    "",
    "keep-caps",
    "keep-caps-locked",
    "no-setuid-fixup",
    "no-setuid-fixup-locked",
    "noroot",
    "noroot-locked",
)

RESOURCE_LIMITS = (
    "CPU",
    "FSIZE",
    "DATA",
    "STACK",
    "CORE",
    "RSS",
    "NOFILE",
    "AS",
    "NPROC",
    "MEMLOCK",
    "LOCKS",
    "SIGPENDING",
    "MSGQUEUE",
    "NICE",
    "RTPRIO",
    "RTTIME",
)

EXEC_OPTIONS = rule_set(
    ("WorkingDirectory", rule(STRING_KIND, predicates=["working-directory"])),
    ("RootDirectory", ABSOLUTE_PATH),
    ("User", STRING_OR_INT),
    ("Group", STRING_OR_INT),
    ("SupplementaryGroups", ARRAY),
    ("Nice", rule(INTEGER_KIND, between=(-20, 19))),
    ("OOMScoreAdjust", rule(INTEGER_KIND, between=(-1000, 1000))),
    (
        "IOSchedulingClass",
        rule(
            INTEGER_KIND,
            STRING_KIND,
            values=["none", "realtime", "best-effort", "idle"],
            between=(0, 3),
        ),
    ),
    ("IOSchedulingPriority", rule(INTEGER_KIND, between=(0, 7))),
    ("CPUSchedulingPolicy", rule(STRING_KIND, values=["other", "batch", "idle", "fifo", "rr"])),
    ("CPUSchedulingPriority", rule(INTEGER_KIND, between=(0, 99))),
    ("CPUSchedulingResetOnFork", BOOLEAN),
    ("CPUAffinity", rule(STRING_KIND, INTEGER_KIND, SEQUENCE_KIND)),
    ("UMask", STRING),
    ("Environment", rule(STRING_KIND, SEQUENCE_KIND, MAPPING_KIND)),
    ("EnvironmentFile", SOFT_ABSOLUTE_PATH),
    ("PassEnvironment", STRING_OR_ARRAY),
    ("StandardInput", rule(STRING_KIND, values=["null", "tty", "tty-force", "tty-fail", "socket"])),
    ("StandardOutput", rule(STRING_KIND, values=OUTPUT_TARGETS)),
    ("StandardError", rule(STRING_KIND, values=OUTPUT_TARGETS)),
    ("TTYPath", ABSOLUTE_PATH),
    ("TTYReset", BOOLEAN),
    ("TTYVHangup", BOOLEAN),
    ("TTYVTDisallocate", BOOLEAN),
    ("SyslogIdentifier", STRING),
    ("SyslogFacility", rule(STRING_KIND, values=SYSLOG_FACILITIES)),
    ("SyslogLevel", rule(STRING_KIND, values=SYSLOG_LEVELS)),
    ("SyslogLevelPrefix", BOOLEAN),
    ("TimerSlackNSec", STRING_OR_INT),
    *((f"Limit{name}", STRING_OR_INT) for name in RESOURCE_LIMITS),
    ("PAMName", STRING),
    ("CapabilityBoundingSet", CAP),
    ("AmbientCapabilities", CAP),
    ("SecureBits", rule(STRING_KIND, SEQUENCE_KIND, values=SECURE_BITS)),
    ("ReadWriteDirectories", ARRAY_OF_ABSOLUTE_PATHS),
    ("ReadOnlyDirectories", ARRAY_OF_SOFT_ABSOLUTE_PATHS),
    ("InaccessibleDirectories", ARRAY_OF_SOFT_ABSOLUTE_PATHS),
    ("PrivateTmp", BOOLEAN),
    ("PrivateDevices", BOOLEAN),
    ("PrivateNetwork", BOOLEAN),
    ("ProtectSystem", rule(BOOLEAN_KIND, STRING_KIND, values=[True, False, "full"])),
    ("ProtectHome", rule(BOOLEAN_KIND, STRING_KIND, values=[True, False, "read-only"])),
    ("MountFlags", rule(STRING_KIND, values=["shared", "slave", "private"])),
    ("UtmpIdentifier", STRING),
    ("UtmpMode", rule(STRING_KIND, values=["init", "login", "user"])),
    ("SELinuxContext", STRING),
    ("AppArmorProfile", STRING),
    ("SmackProcessLabel", STRING),
    ("IgnoreSIGPIPE", BOOLEAN),
    ("NoNewPrivileges", BOOLEAN),
    ("SystemCallFilter", STRING_OR_ARRAY),
    ("SystemCallErrorNumber", STRING),
    ("SystemCallArchitectures", ARCH),
    ("RestrictAddressFamilies", STRING_OR_ARRAY),
    ("Personality", ARCH),
    ("RuntimeDirectory", rule(STRING_KIND, SEQUENCE_KIND, predicates=["relative-name"])),
    ("RuntimeDirectoryMode", STRING),
)

KILL_OPTIONS = rule_set(
    ("KillMode", rule(STRING_KIND, values=["control-group", "process", "mixed", "none"])),
    ("KillSignal", STRING_OR_INT),
    ("SendSIGHUP", BOOLEAN),
    ("SendSIGKILL", BOOLEAN),
)
