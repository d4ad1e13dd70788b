"""[Mount], [Automount], and [Swap] section rules.

See systemd.mount(5), systemd.automount(5), systemd.swap(5).
"""

from __future__ import annotations

from unitrules.directives.common import (
    ABSOLUTE_PATH,
    BOOLEAN,
    INTEGER,
    STRING,
    STRING_OR_INT,
)
from unitrules.directives.exec import EXEC_OPTIONS, KILL_OPTIONS
from unitrules.directives.resource_control import RESOURCE_CONTROL_OPTIONS
from unitrules.domain.catalog import merge, rule_set

REQUIRED_ABSOLUTE_PATH = ABSOLUTE_PATH.extend(required=True)

MOUNT_OPTIONS = merge(
    rule_set(
        ("What", REQUIRED_ABSOLUTE_PATH),
        ("Where", REQUIRED_ABSOLUTE_PATH),
        ("Type", STRING),
        ("Options", STRING),
        ("SloppyOptions", BOOLEAN),
        ("DirectoryMode", STRING),
        ("TimeoutSec", STRING_OR_INT),
    ),
    EXEC_OPTIONS,
    KILL_OPTIONS,
    RESOURCE_CONTROL_OPTIONS,
)

AUTOMOUNT_OPTIONS = rule_set(
    ("Where", REQUIRED_ABSOLUTE_PATH),
    ("DirectoryMode", STRING),
    ("TimeoutIdleSec", STRING_OR_INT),
)

SWAP_OPTIONS = merge(
    rule_set(
        ("What", REQUIRED_ABSOLUTE_PATH),
        ("Priority", INTEGER),
        ("Options", STRING),
        ("TimeoutSec", STRING_OR_INT),
    ),
    EXEC_OPTIONS,
    KILL_OPTIONS,
    RESOURCE_CONTROL_OPTIONS,
)
