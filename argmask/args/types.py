"""Argument type tags and parsed argument values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address
from types import MappingProxyType
from typing import Final, Mapping, TypeAlias


class ArgType(IntEnum):
    # Values are the 4-bit codes stored in argument masks.
    STOP = 0
    UINT = 1
    SINT = 2
    STR = 3
    IPV4 = 4
    MSK4 = 5
    IPV6 = 6
    MSK6 = 7
    TIME = 8
    SIZE = 9
    FE = 10
    BE = 11
    TAB = 12
    SRV = 13
    USR = 14

    @property
    def is_deferred(self) -> bool:
        """Names resolved to live objects by a later configuration stage."""
        return self in (
            ArgType.FE,
            ArgType.BE,
            ArgType.TAB,
            ArgType.SRV,
            ArgType.USR,
        )

    @property
    def is_string(self) -> bool:
        return self == ArgType.STR or self.is_deferred

    @property
    def type_name(self) -> str:
        return ARG_TYPE_NAMES[self]


ARG_TYPE_NAMES: Final[Mapping[ArgType, str]] = MappingProxyType(
    {
        ArgType.STOP: "end of arguments",
        ArgType.UINT: "unsigned integer",
        ArgType.SINT: "signed integer",
        ArgType.STR: "string",
        ArgType.IPV4: "IPv4 address",
        ArgType.MSK4: "IPv4 mask",
        ArgType.IPV6: "IPv6 address",
        ArgType.MSK6: "IPv6 mask",
        ArgType.TIME: "delay",
        ArgType.SIZE: "size",
        ArgType.FE: "frontend",
        ArgType.BE: "backend",
        ArgType.TAB: "table",
        ArgType.SRV: "server",
        ArgType.USR: "user list",
    }
)


def arg_type_name(code: int) -> str:
    """Diagnostic name for a raw mask code, including codes no type uses."""
    try:
        return ARG_TYPE_NAMES[ArgType(code)]
    except ValueError:
        return f"unknown type #{code}"


@dataclass(frozen=True, slots=True)
class UIntArg:
    value: int

    @property
    def type(self) -> ArgType:
        return ArgType.UINT


@dataclass(frozen=True, slots=True)
class SIntArg:
    """Explicitly signed integer (`+N` or `-N`)."""

    value: int

    @property
    def type(self) -> ArgType:
        return ArgType.SINT


@dataclass(frozen=True, slots=True)
class StrArg:
    """Raw string argument, or a name waiting for resolution (frontend, server, ...)."""

    type: ArgType
    value: str

    def __post_init__(self):
        if not self.type.is_string:
            raise ValueError(f"StrArg cannot carry type {self.type.name}")

    @property
    def is_deferred(self) -> bool:
        return self.type.is_deferred


@dataclass(frozen=True, slots=True)
class IPv4Arg:
    """IPv4 address; IPv4 masks are stored here too."""

    value: IPv4Address

    @property
    def type(self) -> ArgType:
        return ArgType.IPV4


@dataclass(frozen=True, slots=True)
class IPv6Arg:
    value: IPv6Address

    @property
    def type(self) -> ArgType:
        return ArgType.IPV6


@dataclass(frozen=True, slots=True)
class StopArg:
    """End-of-arguments marker."""

    @property
    def type(self) -> ArgType:
        return ArgType.STOP

    @property
    def value(self) -> None:
        return None


Arg: TypeAlias = UIntArg | SIntArg | StrArg | IPv4Arg | IPv6Arg

END_OF_ARGS: Final[StopArg] = StopArg()
"""Returned for every position past the parsed arguments."""


__all__ = [
    "ARG_TYPE_NAMES",
    "END_OF_ARGS",
    "Arg",
    "ArgType",
    "IPv4Arg",
    "IPv6Arg",
    "SIntArg",
    "StopArg",
    "StrArg",
    "UIntArg",
    "arg_type_name",
]
