from ipaddress import IPv4Address, IPv6Address

import pytest

from argmask.args.units import (
    TimeUnit,
    UnitParseError,
    parse_ipv4,
    parse_ipv4_mask,
    parse_ipv6,
    parse_size,
    parse_time,
    parse_uint,
)


def test_parse_uint_strict() -> None:
    assert parse_uint("0") == 0
    assert parse_uint("4294967296") == 4294967296
    assert parse_uint("") is None
    assert parse_uint("12a") is None
    assert parse_uint("+1") is None
    assert parse_uint("١٢") is None  # non-ASCII digits


def test_parse_uint_lenient_keeps_leading_digits() -> None:
    assert parse_uint("12ab", strict=False) == 12
    assert parse_uint("ab", strict=False) == 0
    assert parse_uint("", strict=False) == 0


def test_parse_time_units() -> None:
    assert parse_time("500") == 500
    assert parse_time("500ms") == 500
    assert parse_time("2s") == 2000
    assert parse_time("1m") == 60_000
    assert parse_time("1h") == 3_600_000
    assert parse_time("1d") == 86_400_000
    assert parse_time("1500us") == 1


def test_parse_time_in_other_output_units() -> None:
    assert parse_time("250", TimeUnit.US) == 250
    assert parse_time("1ms", TimeUnit.US) == 1000
    assert parse_time("1500ms", TimeUnit.S) == 1


def test_parse_time_reports_offending_character() -> None:
    with pytest.raises(UnitParseError) as excinfo:
        parse_time("5mx")

    assert excinfo.value.position == 2
    assert excinfo.value.text == "5mx"
    assert str(excinfo.value) == "unexpected character 'x' at position 2 in delay '5mx'"


def test_parse_time_requires_a_value() -> None:
    with pytest.raises(UnitParseError, match="position 0"):
        parse_time("ms")


def test_parse_size_multipliers() -> None:
    assert parse_size("100") == 100
    assert parse_size("1k") == 1024
    assert parse_size("2M") == 2 * 1024 * 1024
    assert parse_size("1g") == 1024**3


def test_parse_size_rejects_unknown_suffix() -> None:
    with pytest.raises(UnitParseError, match="unexpected character 't'"):
        parse_size("1t")


def test_parse_ipv4() -> None:
    assert parse_ipv4("192.168.0.1") == IPv4Address("192.168.0.1")
    assert parse_ipv4("192.168.0") is None
    assert parse_ipv4("::1") is None


def test_parse_ipv6() -> None:
    assert parse_ipv6("::1") == IPv6Address("::1")
    assert parse_ipv6("::ffff:10.0.0.1") == IPv6Address("::ffff:10.0.0.1")
    assert parse_ipv6("fe80::1%eth0") is None
    assert parse_ipv6("10.0.0.1") is None


def test_parse_ipv4_mask_forms() -> None:
    assert parse_ipv4_mask("255.255.255.0") == IPv4Address("255.255.255.0")
    assert parse_ipv4_mask("24") == IPv4Address("255.255.255.0")
    assert parse_ipv4_mask("/16") == IPv4Address("255.255.0.0")
    assert parse_ipv4_mask("10.0.0.1/24") == IPv4Address("255.255.255.0")
    assert parse_ipv4_mask("0") == IPv4Address("0.0.0.0")
    assert parse_ipv4_mask("32") == IPv4Address("255.255.255.255")


def test_parse_ipv4_mask_rejects_garbage() -> None:
    assert parse_ipv4_mask("33") is None
    assert parse_ipv4_mask("abc") is None
    assert parse_ipv4_mask("10.0.0/24") is None
    assert parse_ipv4_mask("10.0.0.1/") is None
    assert parse_ipv4_mask("255.255.255") is None
