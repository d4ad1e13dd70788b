"""[Path] and [Timer] section rules (systemd.path(5), systemd.timer(5))."""

from __future__ import annotations

from unitrules.directives.common import (
    ABSOLUTE_PATH,
    BOOLEAN,
    STRING,
    STRING_OR_ARRAY,
    STRING_OR_INT,
    UNIT,
)
from unitrules.domain.catalog import rule_set

PATH_OPTIONS = rule_set(
    ("PathExists", ABSOLUTE_PATH),
    ("PathExistsGlob", ABSOLUTE_PATH),
    ("PathChanged", ABSOLUTE_PATH),
    ("PathModified", ABSOLUTE_PATH),
    ("DirectoryNotEmpty", ABSOLUTE_PATH),
    ("Unit", UNIT),
    ("MakeDirectory", BOOLEAN),
    ("DirectoryMode", STRING),
)

TIMER_OPTIONS = rule_set(
    ("OnActiveSec", STRING_OR_INT),
    ("OnBootSec", STRING_OR_INT),
    ("OnStartupSec", STRING_OR_INT),
    ("OnUnitActiveSec", STRING_OR_INT),
    ("OnUnitInactiveSec", STRING_OR_INT),
    ("OnCalendar", STRING_OR_ARRAY),
    ("AccuracySec", STRING_OR_INT),
    ("RandomizedDelaySec", STRING_OR_INT),
    ("Unit", UNIT),
    ("Persistent", BOOLEAN),
    ("WakeSystem", BOOLEAN),
    ("RemainAfterElapse", BOOLEAN),
)
