"""Typed argument-list parsing for configuration directives."""

from argmask.args import (
    END_OF_ARGS,
    ArgListError,
    ArgListParser,
    ArgListResult,
    ArgMask,
    ArgParserOptions,
    ArgType,
    ParseMode,
    arg_mask,
    decode_mask,
    make_arg_list,
)

__all__ = [
    "END_OF_ARGS",
    "ArgListError",
    "ArgListParser",
    "ArgListResult",
    "ArgMask",
    "ArgParserOptions",
    "ArgType",
    "ParseMode",
    "arg_mask",
    "decode_mask",
    "make_arg_list",
]
