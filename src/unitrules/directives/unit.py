"""[Unit] and [Install] section rules (systemd.unit(5))."""

from __future__ import annotations

from unitrules.directives.common import (
    ABSOLUTE_PATH,
    ARCH,
    ARRAY_OF_ABSOLUTE_PATHS,
    ARRAY_OF_UNITS,
    ARRAY_OF_URIS,
    BOOLEAN,
    CAP,
    CONDITIONAL_PATH,
    INTEGER,
    NEEDS_UPDATE,
    POWER,
    SECURITY,
    STRING,
    STRING_KIND,
    STRING_OR_INT,
    VIRT,
    rule,
)
from unitrules.domain.catalog import rule_set

JOB_MODES = (
    "fail",
    "replace",
    "replace-irreversibly",
    "isolate",
    "flush",
    "ignore-dependencies",
    "ignore-requirements",
)

# Condition*= and Assert*= share one grammar; only the prefix differs.
_CHECK_SUFFIXES = (
    ("Architecture", ARCH),
    ("Virtualization", VIRT),
    ("Host", STRING),
    ("KernelCommandLine", STRING),
    ("Security", SECURITY),
    ("Capability", CAP),
    ("ACPower", BOOLEAN),
    ("NeedsUpdate", NEEDS_UPDATE),
    ("FirstBoot", BOOLEAN),
    ("PathExists", CONDITIONAL_PATH),
    ("PathExistsGlob", CONDITIONAL_PATH),
    ("PathIsDirectory", CONDITIONAL_PATH),
    ("PathIsSymbolicLink", CONDITIONAL_PATH),
    ("PathIsMountPoint", CONDITIONAL_PATH),
    ("PathIsReadWrite", CONDITIONAL_PATH),
    ("DirectoryNotEmpty", CONDITIONAL_PATH),
    ("FileNotEmpty", CONDITIONAL_PATH),
    ("FileIsExecutable", CONDITIONAL_PATH),
)

UNIT_OPTIONS = rule_set(
    ("Description", STRING),
    ("Documentation", ARRAY_OF_URIS),
    ("Requires", ARRAY_OF_UNITS),
    ("Requisite", ARRAY_OF_UNITS),
    ("Wants", ARRAY_OF_UNITS),
    ("BindsTo", ARRAY_OF_UNITS),
    ("PartOf", ARRAY_OF_UNITS),
    ("Conflicts", ARRAY_OF_UNITS),
    ("Before", ARRAY_OF_UNITS),
    ("After", ARRAY_OF_UNITS),
    ("OnFailure", ARRAY_OF_UNITS),
    ("PropagatesReloadTo", ARRAY_OF_UNITS),
    ("ReloadPropagatedFrom", ARRAY_OF_UNITS),
    ("JoinsNamespaceOf", ARRAY_OF_UNITS),
    ("RequiresMountsFor", ARRAY_OF_ABSOLUTE_PATHS),
    ("OnFailureJobMode", rule(STRING_KIND, values=JOB_MODES)),
    ("IgnoreOnIsolate", BOOLEAN),
    ("StopWhenUnneeded", BOOLEAN),
    ("RefuseManualStart", BOOLEAN),
    ("RefuseManualStop", BOOLEAN),
    ("AllowIsolate", BOOLEAN),
    ("DefaultDependencies", BOOLEAN),
    ("JobTimeoutSec", STRING_OR_INT),
    ("JobTimeoutAction", POWER),
    ("JobTimeoutRebootArgument", STRING),
    ("StartLimitIntervalSec", STRING_OR_INT),
    ("StartLimitBurst", INTEGER),
    ("StartLimitAction", POWER),
    ("RebootArgument", STRING),
    *((f"Condition{suffix}", check) for suffix, check in _CHECK_SUFFIXES),
    *((f"Assert{suffix}", check) for suffix, check in _CHECK_SUFFIXES),
    ("SourcePath", ABSOLUTE_PATH),
)

INSTALL_OPTIONS = rule_set(
    ("Alias", ARRAY_OF_UNITS),
    ("WantedBy", ARRAY_OF_UNITS),
    ("RequiredBy", ARRAY_OF_UNITS),
    ("Also", ARRAY_OF_UNITS),
    ("DefaultInstance", STRING),
)
