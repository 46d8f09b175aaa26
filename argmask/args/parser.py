"""Mask-driven parser for comma-separated argument lists."""

from __future__ import annotations

import logging

from argmask.args.mask import ArgMask, decode_mask
from argmask.args.options import ArgParserOptions, ParseMode
from argmask.args.result import ArgListResult
from argmask.args.types import (
    Arg,
    ArgType,
    IPv4Arg,
    IPv6Arg,
    SIntArg,
    StrArg,
    UIntArg,
    arg_type_name,
)
from argmask.args.units import (
    UnitParseError,
    parse_ipv4,
    parse_ipv4_mask,
    parse_ipv6,
    parse_size,
    parse_time,
    parse_uint,
)
from argmask.diagnostics import (
    ARGS_INVALID_VALUE,
    ARGS_MISSING_ARGUMENTS,
    ARGS_TOO_MANY_ARGUMENTS,
    ARGS_UNSUPPORTED_TYPE,
    Diagnostic,
)
from argmask.text import TextRange

logger = logging.getLogger(__name__)

ARG_SEPARATOR = ","


class _ConversionFailed(Exception):
    def __init__(self, detail: str | None = None, *, unsupported: bool = False) -> None:
        super().__init__(detail)
        self.detail = detail
        self.unsupported = unsupported


class ArgListParser:
    """Builds typed argument lists from directive argument fragments."""

    def __init__(self, options: ArgParserOptions | None = None) -> None:
        self._options = options or ArgParserOptions()

    @property
    def options(self) -> ArgParserOptions:
        return self._options

    def parse(self, text: str, mask: int | ArgMask, *, length: int | None = None) -> ArgListResult:
        """Parse `text[:length]` against `mask`.

        Stops at the first error. Trailing optional arguments may be omitted,
        in which case fewer arguments than declared slots are returned.
        """
        if length is None:
            length = len(text)
        elif not 0 <= length <= len(text):
            raise ValueError(f"length must be within 0..{len(text)}, got {length}")

        source = text[:length]
        decoded = mask if isinstance(mask, ArgMask) else decode_mask(mask)

        if not decoded.nbarg or (not source and not decoded.min_arg):
            return ArgListResult(source_text=source, mask=decoded, args=None, arg_index=0, offset=0)

        args: list[Arg] = []
        pos = 0
        cursor = 0
        end = len(source)

        # An empty fragment holds no argument at all; empty arguments only
        # exist around commas.
        while source and pos < decoded.nbarg:
            token_end = source.find(ARG_SEPARATOR, cursor)
            if token_end < 0:
                token_end = end

            word = source[cursor:token_end]
            code = decoded.slots[pos].code
            try:
                args.append(self._convert(word, code))
            except _ConversionFailed as exc:
                spec = ARGS_UNSUPPORTED_TYPE if exc.unsupported else ARGS_INVALID_VALUE
                message = spec.render(text=word, type_name=arg_type_name(code))
                if exc.detail:
                    message = f"{message}: {exc.detail}"
                diagnostic = Diagnostic.from_spec(spec, TextRange(cursor, token_end), message)
                return self._failure(source, decoded, diagnostic, pos, token_end)

            pos += 1
            cursor = token_end
            if cursor == end or pos >= decoded.nbarg:
                break
            cursor += len(ARG_SEPARATOR)

        if pos < decoded.min_arg:
            message = ARGS_MISSING_ARGUMENTS.render(
                got=pos,
                expected=decoded.min_arg,
                type_name=decoded.expected_name(pos),
            )
            diagnostic = Diagnostic.from_spec(ARGS_MISSING_ARGUMENTS, TextRange.empty(cursor), message)
            return self._failure(source, decoded, diagnostic, pos, cursor)

        if cursor < end:
            # The cursor stopped on the comma that follows the last slot.
            rest_start = cursor + len(ARG_SEPARATOR)
            message = ARGS_TOO_MANY_ARGUMENTS.render(remaining=source[rest_start:end])
            diagnostic = Diagnostic.from_spec(ARGS_TOO_MANY_ARGUMENTS, TextRange(rest_start, end), message)
            return self._failure(source, decoded, diagnostic, pos, rest_start)

        logger.debug(f"Parsed {pos}/{decoded.nbarg} arguments from {source!r}")
        return ArgListResult(
            source_text=source,
            mask=decoded,
            args=tuple(args),
            arg_index=pos,
            offset=cursor,
        )

    def _failure(
        self,
        source: str,
        mask: ArgMask,
        diagnostic: Diagnostic,
        pos: int,
        offset: int,
    ) -> ArgListResult:
        logger.debug(f"Argument {pos} of {source!r} rejected [{diagnostic.code}]: {diagnostic.message}")
        return ArgListResult(
            source_text=source,
            mask=mask,
            args=None,
            arg_index=pos,
            offset=offset,
            diagnostics=(diagnostic,),
        )

    def _convert(self, word: str, code: int) -> Arg:
        match code:
            case ArgType.SINT:
                if not word:
                    raise _ConversionFailed()
                if word[0].isascii() and word[0].isdigit():
                    return UIntArg(self._uint(word))
                sign = word[0]
                if sign not in "+-":
                    raise _ConversionFailed()
                magnitude = self._uint(word[1:])
                return SIntArg(-magnitude if sign == "-" else magnitude)

            case ArgType.UINT:
                if not word:
                    raise _ConversionFailed()
                return UIntArg(self._uint(word))

            case ArgType.STR | ArgType.FE | ArgType.BE | ArgType.TAB | ArgType.SRV | ArgType.USR:
                # Names are resolved by the caller once the whole config is known.
                return StrArg(ArgType(code), word)

            case ArgType.IPV4:
                address = parse_ipv4(word) if word else None
                if address is None:
                    raise _ConversionFailed()
                return IPv4Arg(address)

            case ArgType.MSK4:
                netmask = parse_ipv4_mask(word) if word else None
                if netmask is None:
                    raise _ConversionFailed()
                return IPv4Arg(netmask)

            case ArgType.IPV6:
                address6 = parse_ipv6(word) if word else None
                if address6 is None:
                    raise _ConversionFailed()
                return IPv6Arg(address6)

            case ArgType.MSK6:
                # TODO: accept IPv6 prefix lengths once a consumer needs MSK6 slots.
                raise _ConversionFailed()

            case ArgType.TIME:
                if not word:
                    raise _ConversionFailed()
                try:
                    return UIntArg(parse_time(word, self._options.time_unit))
                except UnitParseError as exc:
                    raise _ConversionFailed(str(exc)) from exc

            case ArgType.SIZE:
                if not word:
                    raise _ConversionFailed()
                try:
                    return UIntArg(parse_size(word))
                except UnitParseError as exc:
                    raise _ConversionFailed(str(exc)) from exc

            case _:
                raise _ConversionFailed(unsupported=True)

    def _uint(self, text: str) -> int:
        value = parse_uint(text, strict=self._options.strict_integers)
        if value is None:
            raise _ConversionFailed()
        return value


def _resolve_options(
    options: ArgParserOptions | None,
    mode: ParseMode | None,
) -> ArgParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ArgParserOptions.for_mode(mode)

    return ArgParserOptions()


def make_arg_list(
    text: str,
    mask: int | ArgMask,
    options: ArgParserOptions | None = None,
    *,
    length: int | None = None,
    mode: ParseMode | None = None,
) -> ArgListResult:
    parser = ArgListParser(_resolve_options(options=options, mode=mode))
    return parser.parse(text, mask, length=length)
