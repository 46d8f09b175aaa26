"""Typed argument lists (mask decoding, value conversion, parsing)."""

from argmask.args.mask import MAX_ARGS, ArgMask, ArgSlot, arg_mask, decode_mask
from argmask.args.options import ArgParserOptions, ParseMode
from argmask.args.parser import ArgListParser, make_arg_list
from argmask.args.result import ArgListError, ArgListResult
from argmask.args.types import (
    ARG_TYPE_NAMES,
    END_OF_ARGS,
    Arg,
    ArgType,
    IPv4Arg,
    IPv6Arg,
    SIntArg,
    StopArg,
    StrArg,
    UIntArg,
    arg_type_name,
)
from argmask.args.units import TimeUnit, UnitParseError

__all__ = [
    "ARG_TYPE_NAMES",
    "END_OF_ARGS",
    "MAX_ARGS",
    "Arg",
    "ArgListError",
    "ArgListParser",
    "ArgListResult",
    "ArgMask",
    "ArgParserOptions",
    "ArgSlot",
    "ArgType",
    "IPv4Arg",
    "IPv6Arg",
    "ParseMode",
    "SIntArg",
    "StopArg",
    "StrArg",
    "TimeUnit",
    "UIntArg",
    "UnitParseError",
    "arg_mask",
    "arg_type_name",
    "decode_mask",
    "make_arg_list",
]
