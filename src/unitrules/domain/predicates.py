"""Predicate library and registry.

Predicates are pure ``value -> bool`` checks on the structure of a
directive value (is it an absolute path, a capability string, a unit
name, ...). Rules reference them by a stable identifier so catalog data
stays serializable; the registry resolves identifiers to functions.

A single "is an absolute path" check covers three directive domains, each
with its own id: ``absolute-path`` (strict), ``soft-absolute-path`` (optional
leading ``-``) and ``condition-path`` (empty, or leading ``|``/``!`` markers).

INVARIANT: every predicate is total. Values outside its domain (wrong
type, malformed numbers) yield False, never an exception.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from urllib.parse import urlsplit

from unitrules.domain.errors import CatalogError
from unitrules.domain.types import UNIT_TYPES

PredicateFunc = Callable[[object], bool]

CAPABILITY_PATTERN = re.compile(r"!?CAP_(?:[A-Z_]+)?[A-Z]+")
PERCENTAGE_PATTERN = re.compile(r"\d+%")
BANDWIDTH_PATTERN = re.compile(r"\d+[KMGT]?")
URI_SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

CONDITION_MARKERS = "|!"
SOFT_MARKER = "-"

DEVICE_ACCESS_MODES: tuple[str, ...] = ("r", "w", "m")


# ---------------------------------------------------------------------------
# Path predicates
# ---------------------------------------------------------------------------


def is_absolute_path(value: object, markers: str = "") -> bool:
    """Return True if *value* is a string naming an absolute path.

    Any leading run of characters from *markers* is stripped first, so
    ``is_absolute_path("-/etc/foo", markers="-")`` is True.
    """
    if not isinstance(value, str):
        return False
    if markers:
        value = value.lstrip(markers)
    return value.startswith("/")


def is_soft_absolute_path(value: object) -> bool:
    """Absolute path with an optional leading ``-`` (ignore-if-missing marker)."""
    if not isinstance(value, str):
        return False
    return is_absolute_path(value.removeprefix(SOFT_MARKER))


def is_condition_path(value: object) -> bool:
    """Empty string (resets the condition), or a piped/negated absolute path."""
    if not isinstance(value, str):
        return False
    return value == "" or is_absolute_path(value, markers=CONDITION_MARKERS)


def is_working_directory(value: object) -> bool:
    return value == "~" or is_soft_absolute_path(value)


def is_relative_name(value: object) -> bool:
    """A bare directory name without any ``/``."""
    return isinstance(value, str) and "/" not in value


# ---------------------------------------------------------------------------
# Name and string-shape predicates
# ---------------------------------------------------------------------------


def is_capability(value: object) -> bool:
    """Match ``[!]CAP_<UPPER_SNAKE_CASE>``.

    Examples:
        >>> is_capability("CAP_SYS_ADMIN")
        True
        >>> is_capability("!CAP_NET_ADMIN")
        True
        >>> is_capability("cap_sys_admin")
        False
    """
    return isinstance(value, str) and CAPABILITY_PATTERN.fullmatch(value) is not None


def is_unit_name(value: object) -> bool:
    """Return True if *value* has a non-empty stem and a unit-type suffix."""
    if not isinstance(value, str):
        return False
    stem, dot, suffix = value.rpartition(".")
    return bool(stem) and bool(dot) and suffix in UNIT_TYPES


def is_slice_name(value: object) -> bool:
    return isinstance(value, str) and value.endswith(".slice")


def is_uri(value: object) -> bool:
    """Return True if *value* parses as a well-formed URI.

    Requires a syntactically valid scheme, no whitespace, and something
    after the scheme (``man:systemd.unit(5)``, ``https://host/path``).
    """
    if not isinstance(value, str) or not value or any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not URI_SCHEME_PATTERN.fullmatch(parts.scheme):
        return False
    return bool(parts.netloc or parts.path)


def is_percentage(value: object) -> bool:
    return isinstance(value, str) and PERCENTAGE_PATTERN.fullmatch(value) is not None


def is_integer_or_infinity(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or value == "infinity"


# ---------------------------------------------------------------------------
# Two-token device arguments
# ---------------------------------------------------------------------------


def is_device_argument(value: object, check: Callable[[str], bool]) -> bool:
    """Return True if *value* is ``<absolute path> <token>`` and *check(token)* holds.

    The string must split on whitespace into exactly two tokens.
    """
    if not isinstance(value, str):
        return False
    tokens = value.split()
    if len(tokens) != 2:
        return False
    path, argument = tokens
    return is_absolute_path(path) and check(argument)


def int_token_in_range(minimum: int, maximum: int) -> Callable[[str], bool]:
    """Build a token check accepting decimal integers within ``[minimum, maximum]``."""

    def check(token: str) -> bool:
        return token.isascii() and token.isdigit() and minimum <= int(token) <= maximum

    return check


def is_bandwidth_argument(value: object) -> bool:
    """``<absolute path> <bytes>`` where bytes may carry a K/M/G/T suffix."""
    return is_device_argument(value, lambda token: BANDWIDTH_PATTERN.fullmatch(token) is not None)


def is_device_access_argument(value: object) -> bool:
    return is_device_argument(value, lambda token: token in DEVICE_ACCESS_MODES)


def is_socket_address(value: object) -> bool:
    """Listen address: a path, an ``@abstract`` name, a port, or ``host:port``.

    IPv6 hosts must be bracketed (``[::1]:80``); hosts never contain whitespace.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return 1 <= value <= 65535
    if not isinstance(value, str) or not value:
        return False
    if is_absolute_path(value):
        return True
    if value.startswith("@"):
        return len(value) > 1
    port_ok = int_token_in_range(1, 65535)
    if port_ok(value):
        return True
    host, sep, port = value.rpartition(":")
    if not (host and sep and port_ok(port)) or any(c.isspace() for c in host):
        return False
    if host.startswith("["):
        return len(host) > 2 and host.endswith("]")
    return ":" not in host


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Predicate:
    """A named, described predicate function."""

    name: str
    description: str
    func: PredicateFunc

    def __call__(self, value: object) -> bool:
        return self.func(value)


class PredicateRegistry(Mapping[str, Predicate]):
    """Mapping of stable predicate identifiers to :class:`Predicate` objects."""

    def __init__(self) -> None:
        self._predicates: dict[str, Predicate] = {}

    def register(self, name: str, description: str, func: PredicateFunc) -> Predicate:
        """Register *func* under *name*.

        Raises:
            CatalogError: If *name* is already registered.
        """
        if name in self._predicates:
            raise CatalogError(f"Predicate already registered: {name}", predicate=name)
        predicate = Predicate(name=name, description=description, func=func)
        self._predicates[name] = predicate
        return predicate

    def __getitem__(self, name: str) -> Predicate:
        return self._predicates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)


PREDICATE_REGISTRY = PredicateRegistry()


def _register_predicates() -> None:
    """Populate :data:`PREDICATE_REGISTRY` with built-in predicates."""
    reg = PREDICATE_REGISTRY.register
    reg("absolute-path", "is an absolute path", is_absolute_path)
    reg("soft-absolute-path", "is an absolute path", is_soft_absolute_path)
    reg(
        "condition-path",
        "is empty string or a (piped/negated) absolute path",
        is_condition_path,
    )
    reg("working-directory", "is a valid working directory argument", is_working_directory)
    reg("relative-name", "only simple, relative paths", is_relative_name)
    reg("capability", "matches capability string", is_capability)
    reg("unit-name", "is a unit name", is_unit_name)
    reg("slice-name", "is a slice", is_slice_name)
    reg("uri", "is a valid URI", is_uri)
    reg("percentage", "is a percentage", is_percentage)
    reg("integer-or-infinity", 'is an integer or "infinity"', is_integer_or_infinity)
    reg(
        "io-device-weight",
        "is a valid device weight argument",
        lambda v: is_device_argument(v, int_token_in_range(1, 10_000)),
    )
    reg(
        "blkio-device-weight",
        "is a valid device weight argument",
        lambda v: is_device_argument(v, int_token_in_range(10, 1_000)),
    )
    reg("device-bandwidth", "is a valid device bandwidth argument", is_bandwidth_argument)
    reg("device-access", "is a valid device access argument", is_device_access_argument)
    reg("socket-address", "is a socket address", is_socket_address)


_register_predicates()
