"""Tests for the predicate library and registry."""

from __future__ import annotations

import pytest

from unitrules.domain.errors import CatalogError
from unitrules.domain.predicates import (
    PREDICATE_REGISTRY,
    PredicateRegistry,
    int_token_in_range,
    is_absolute_path,
    is_bandwidth_argument,
    is_capability,
    is_condition_path,
    is_device_access_argument,
    is_device_argument,
    is_integer_or_infinity,
    is_percentage,
    is_relative_name,
    is_slice_name,
    is_socket_address,
    is_soft_absolute_path,
    is_unit_name,
    is_uri,
    is_working_directory,
)


class TestAbsolutePath:
    def test_absolute(self) -> None:
        assert is_absolute_path("/etc/foo")

    @pytest.mark.parametrize("value", ["etc/foo", "", "foo", "~/x", "./x"])
    def test_not_absolute(self, value: str) -> None:
        assert not is_absolute_path(value)

    def test_plain_rejects_markers(self) -> None:
        assert not is_absolute_path("-/etc/foo")

    def test_markers_stripped(self) -> None:
        assert is_absolute_path("-/etc/foo", markers="-")
        assert is_absolute_path("|!/etc", markers="|!")

    def test_non_string(self) -> None:
        assert not is_absolute_path(42)
        assert not is_absolute_path(None)


class TestSoftAbsolutePath:
    def test_soft_marker_stripped(self) -> None:
        assert is_soft_absolute_path("-/etc/foo")

    def test_plain_path(self) -> None:
        assert is_soft_absolute_path("/etc/foo")

    @pytest.mark.parametrize("value", ["etc/foo", "-etc/foo", "!/etc"])
    def test_rejected(self, value: str) -> None:
        assert not is_soft_absolute_path(value)


class TestConditionPath:
    @pytest.mark.parametrize("value", ["/etc", "!/etc", "|/etc", "|!/etc", ""])
    def test_accepted(self, value: str) -> None:
        assert is_condition_path(value)

    @pytest.mark.parametrize("value", ["etc", "!etc", "-/etc"])
    def test_rejected(self, value: str) -> None:
        assert not is_condition_path(value)


class TestWorkingDirectory:
    @pytest.mark.parametrize("value", ["~", "/srv/app", "-/srv/app"])
    def test_accepted(self, value: str) -> None:
        assert is_working_directory(value)

    def test_relative_rejected(self) -> None:
        assert not is_working_directory("srv")


class TestCapability:
    @pytest.mark.parametrize("value", ["CAP_SYS_ADMIN", "!CAP_NET_ADMIN", "CAP_CHOWN"])
    def test_accepted(self, value: str) -> None:
        assert is_capability(value)

    @pytest.mark.parametrize(
        "value",
        ["SYS_ADMIN", "cap_sys_admin", "CAP_", "CAP_SYS_ADMIN_", "CAP_sys", "!!CAP_X", 7],
    )
    def test_rejected(self, value: object) -> None:
        assert not is_capability(value)


class TestUnitName:
    @pytest.mark.parametrize(
        "value",
        ["foo.service", "foo.timer", "multi-user.target", "-.slice", "dev-sda1.device"],
    )
    def test_accepted(self, value: str) -> None:
        assert is_unit_name(value)

    @pytest.mark.parametrize("value", ["foo.txt", "service", ".service", "fooservice", ""])
    def test_rejected(self, value: str) -> None:
        assert not is_unit_name(value)


class TestSliceName:
    def test_slice(self) -> None:
        assert is_slice_name("system.slice")
        assert not is_slice_name("system.service")


class TestUri:
    @pytest.mark.parametrize(
        "value",
        [
            "https://www.freedesktop.org/software/systemd/man/systemd.unit.html",
            "man:systemd.unit(5)",
            "file:/usr/share/doc/foo",
            "info:foo",
        ],
    )
    def test_accepted(self, value: str) -> None:
        assert is_uri(value)

    @pytest.mark.parametrize("value", ["not a uri", "/just/a/path", "", "1http://x", "http:"])
    def test_rejected(self, value: str) -> None:
        assert not is_uri(value)


class TestNumericStrings:
    def test_percentage(self) -> None:
        assert is_percentage("20%")
        assert not is_percentage("20")
        assert not is_percentage("%")
        assert not is_percentage("2.5%")

    def test_integer_or_infinity(self) -> None:
        assert is_integer_or_infinity(512)
        assert is_integer_or_infinity("infinity")
        assert not is_integer_or_infinity("512")
        assert not is_integer_or_infinity(True)

    def test_relative_name(self) -> None:
        assert is_relative_name("myapp")
        assert not is_relative_name("run/myapp")


class TestDeviceArguments:
    def test_generic_two_tokens(self) -> None:
        assert is_device_argument("/dev/sda 500", int_token_in_range(1, 10_000))
        assert not is_device_argument("/dev/sda", int_token_in_range(1, 10_000))
        assert not is_device_argument("/dev/sda 500 extra", int_token_in_range(1, 10_000))
        assert not is_device_argument("dev/sda 500", int_token_in_range(1, 10_000))

    def test_range_bounds(self) -> None:
        check = int_token_in_range(10, 1000)
        assert check("10")
        assert check("1000")
        assert not check("9")
        assert not check("1001")
        assert not check("-5")
        assert not check("²")

    def test_bandwidth(self) -> None:
        assert is_bandwidth_argument("/dev/sda 5M")
        assert is_bandwidth_argument("/dev/sda 1000")
        assert not is_bandwidth_argument("/dev/sda fast")

    def test_access(self) -> None:
        assert is_device_access_argument("/dev/null r")
        assert is_device_access_argument("/dev/null m")
        assert not is_device_access_argument("/dev/null x")
        assert not is_device_access_argument(5)


class TestSocketAddress:
    @pytest.mark.parametrize(
        "value",
        ["/run/foo.sock", "@abstract", "8080", 8080, "127.0.0.1:80", "[::1]:443"],
    )
    def test_accepted(self, value: object) -> None:
        assert is_socket_address(value)

    @pytest.mark.parametrize(
        "value",
        ["", "@", "70000", 0, "host:", "host:port", True, "a b:80", "::1", "[]:80", "[::1:80"],
    )
    def test_rejected(self, value: object) -> None:
        assert not is_socket_address(value)


class TestRegistry:
    def test_builtin_ids(self) -> None:
        for name in (
            "absolute-path",
            "soft-absolute-path",
            "condition-path",
            "capability",
            "unit-name",
            "uri",
            "io-device-weight",
            "blkio-device-weight",
            "device-bandwidth",
            "device-access",
        ):
            assert name in PREDICATE_REGISTRY

    def test_descriptions(self) -> None:
        assert PREDICATE_REGISTRY["absolute-path"].description == "is an absolute path"
        assert PREDICATE_REGISTRY["capability"].description == "matches capability string"

    def test_predicate_callable(self) -> None:
        weight = PREDICATE_REGISTRY["io-device-weight"]
        assert weight("/dev/sda 10000")
        assert not weight("/dev/sda 10001")

    def test_duplicate_registration_rejected(self) -> None:
        registry = PredicateRegistry()
        registry.register("even", "is even", lambda v: isinstance(v, int) and v % 2 == 0)
        with pytest.raises(CatalogError) as exc_info:
            registry.register("even", "is even", lambda v: False)
        assert exc_info.value.predicate == "even"

    def test_unknown_id_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            PREDICATE_REGISTRY["no-such-predicate"]
        assert PREDICATE_REGISTRY.get("no-such-predicate") is None

    @pytest.mark.parametrize("name", sorted(PREDICATE_REGISTRY))
    def test_every_predicate_is_total(self, name: str) -> None:
        predicate = PREDICATE_REGISTRY[name]
        for value in (None, 3.5, ["x"], {"k": "v"}, "", "²", -1):
            assert predicate(value) in (True, False)
