from ipaddress import IPv4Address

import pytest

from argmask.args import (
    ARG_TYPE_NAMES,
    END_OF_ARGS,
    ArgType,
    IPv4Arg,
    SIntArg,
    StrArg,
    UIntArg,
    arg_type_name,
)


def test_every_type_has_a_diagnostic_name() -> None:
    assert set(ARG_TYPE_NAMES) == set(ArgType)
    assert ArgType.USR.type_name == "user list"
    assert arg_type_name(ArgType.TIME) == "delay"
    assert arg_type_name(15) == "unknown type #15"


def test_type_names_are_read_only() -> None:
    with pytest.raises(TypeError):
        ARG_TYPE_NAMES[ArgType.STR] = "text"  # type: ignore[index]


def test_deferred_types() -> None:
    deferred = {arg_type for arg_type in ArgType if arg_type.is_deferred}

    assert deferred == {ArgType.FE, ArgType.BE, ArgType.TAB, ArgType.SRV, ArgType.USR}
    assert ArgType.STR.is_string
    assert not ArgType.UINT.is_string


def test_value_variants_report_their_type() -> None:
    assert UIntArg(1).type == ArgType.UINT
    assert SIntArg(-1).type == ArgType.SINT
    assert IPv4Arg(IPv4Address("1.2.3.4")).type == ArgType.IPV4
    assert StrArg(ArgType.TAB, "t").type == ArgType.TAB
    assert END_OF_ARGS.type == ArgType.STOP
    assert END_OF_ARGS.value is None


def test_string_variant_rejects_non_string_types() -> None:
    with pytest.raises(ValueError, match="StrArg cannot carry type UINT"):
        StrArg(ArgType.UINT, "1")
