"""Argument masks.

A mask packs an argument list description into one integer:

- bits 0-3 hold the number of mandatory arguments;
- each following 4-bit group holds the `ArgType` code of one position, up
  to `MAX_ARGS` positions. A zero group ends the list early.

`arg_mask(ArgType.STR, ArgType.UINT, min_arg=1)` describes a mandatory
string followed by an optional unsigned integer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from argmask.args.types import ArgType, arg_type_name

MAX_ARGS: Final[int] = 8
ARG_BITS: Final[int] = 4
ARG_FIELD: Final[int] = (1 << ARG_BITS) - 1


@dataclass(frozen=True, slots=True)
class ArgSlot:
    """One declared argument position."""

    position: int
    code: int
    optional: bool

    @property
    def type(self) -> ArgType | None:
        try:
            return ArgType(self.code)
        except ValueError:
            return None

    @property
    def name(self) -> str:
        return arg_type_name(self.code)


@dataclass(frozen=True, slots=True)
class ArgMask:
    """Mask decoded once into its minimum count and ordered slots."""

    raw: int
    min_arg: int
    slots: tuple[ArgSlot, ...]

    @property
    def nbarg(self) -> int:
        return len(self.slots)

    def expected_code(self, pos: int) -> int:
        """Type code expected at `pos`, `ArgType.STOP` past the last slot."""
        if 0 <= pos < len(self.slots):
            return self.slots[pos].code
        return ArgType.STOP

    def expected_name(self, pos: int) -> str:
        return arg_type_name(self.expected_code(pos))

    def __int__(self) -> int:
        return self.raw


def decode_mask(raw: int) -> ArgMask:
    if raw < 0:
        raise ValueError(f"Argument mask cannot be negative: {raw}")

    min_arg = raw & ARG_FIELD
    fields = raw >> ARG_BITS

    slots: list[ArgSlot] = []
    for pos in range(MAX_ARGS):
        code = (fields >> (pos * ARG_BITS)) & ARG_FIELD
        if not code:
            break
        slots.append(ArgSlot(position=pos, code=code, optional=pos >= min_arg))

    return ArgMask(raw=raw, min_arg=min_arg, slots=tuple(slots))


def arg_mask(*types: ArgType | int, min_arg: int | None = None) -> int:
    """Encode a mask from positional types.

    All declared types are mandatory unless `min_arg` says otherwise.
    """
    if len(types) > MAX_ARGS:
        raise ValueError(f"At most {MAX_ARGS} arguments can be declared, got {len(types)}")
    if min_arg is None:
        min_arg = len(types)
    if not 0 <= min_arg <= ARG_FIELD:
        raise ValueError(f"min_arg must be within 0..{ARG_FIELD}, got {min_arg}")

    raw = min_arg
    for pos, arg_type in enumerate(types):
        code = int(arg_type)
        if code == ArgType.STOP:
            raise ValueError(f"Argument {pos} cannot be declared as end of arguments")
        if not 0 < code <= ARG_FIELD:
            raise ValueError(f"Argument {pos} type code out of range: {code}")
        raw |= code << ((pos + 1) * ARG_BITS)
    return raw
