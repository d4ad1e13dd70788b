"""[Socket] section rules (systemd.socket(5))."""

from __future__ import annotations

from unitrules.directives.common import (
    ABSOLUTE_PATH,
    ARRAY_OF_ABSOLUTE_PATHS,
    BOOLEAN,
    INTEGER,
    INTEGER_KIND,
    SEQUENCE_KIND,
    STRING,
    STRING_KIND,
    STRING_OR_INT,
    UNIT,
    rule,
)
from unitrules.directives.exec import EXEC_OPTIONS, KILL_OPTIONS
from unitrules.directives.resource_control import RESOURCE_CONTROL_OPTIONS
from unitrules.domain.catalog import merge, rule_set

LISTEN_ADDRESS = rule(STRING_KIND, INTEGER_KIND, SEQUENCE_KIND, predicates=["socket-address"])

IP_TOS_VALUES = ("low-delay", "throughput", "reliability", "low-cost")

SOCKET_OPTIONS = merge(
    rule_set(
        ("ListenStream", LISTEN_ADDRESS),
        ("ListenDatagram", LISTEN_ADDRESS),
        ("ListenSequentialPacket", LISTEN_ADDRESS),
        ("ListenFIFO", ABSOLUTE_PATH),
        ("ListenSpecial", ABSOLUTE_PATH),
        ("ListenNetlink", STRING),
        ("ListenMessageQueue", STRING),
        ("ListenUSBFunction", ABSOLUTE_PATH),
        ("SocketProtocol", rule(STRING_KIND, values=["udplite", "sctp"])),
        ("BindIPv6Only", rule(STRING_KIND, values=["default", "both", "ipv6-only"])),
        ("Backlog", INTEGER),
        ("BindToDevice", STRING),
        ("SocketUser", STRING_OR_INT),
        ("SocketGroup", STRING_OR_INT),
        ("SocketMode", STRING),
        ("DirectoryMode", STRING),
        ("Accept", BOOLEAN),
        ("Writable", BOOLEAN),
        ("MaxConnections", INTEGER),
        ("KeepAlive", BOOLEAN),
        ("KeepAliveTimeSec", STRING_OR_INT),
        ("KeepAliveIntervalSec", STRING_OR_INT),
        ("KeepAliveProbes", INTEGER),
        ("NoDelay", BOOLEAN),
        ("Priority", INTEGER),
        ("DeferAcceptSec", STRING_OR_INT),
        ("ReceiveBuffer", STRING_OR_INT),
        ("SendBuffer", STRING_OR_INT),
        ("IPTOS", rule(STRING_KIND, INTEGER_KIND, values=IP_TOS_VALUES, between=(0, 255))),
        ("IPTTL", rule(INTEGER_KIND, between=(1, 255))),
        ("Mark", INTEGER),
        ("ReusePort", BOOLEAN),
        ("SmackLabel", STRING),
        ("SmackLabelIPIn", STRING),
        ("SmackLabelIPOut", STRING),
        ("SELinuxContextFromNet", BOOLEAN),
        ("PipeSize", STRING_OR_INT),
        ("MessageQueueMaxMessages", INTEGER),
        ("MessageQueueMessageSize", INTEGER),
        ("FreeBind", BOOLEAN),
        ("Transparent", BOOLEAN),
        ("Broadcast", BOOLEAN),
        ("PassCredentials", BOOLEAN),
        ("PassSecurity", BOOLEAN),
        ("TCPCongestion", STRING),
        ("ExecStartPre", STRING),
        ("ExecStartPost", STRING),
        ("ExecStopPre", STRING),
        ("ExecStopPost", STRING),
        ("TimeoutSec", STRING_OR_INT),
        ("Service", UNIT),
        ("RemoveOnStop", BOOLEAN),
        ("Symlinks", ARRAY_OF_ABSOLUTE_PATHS),
        ("FileDescriptorName", STRING),
        ("TriggerLimitIntervalSec", STRING_OR_INT),
        ("TriggerLimitBurst", INTEGER),
    ),
    EXEC_OPTIONS,
    KILL_OPTIONS,
    RESOURCE_CONTROL_OPTIONS,
)
