"""Argument parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from argmask.args.units import TimeUnit


class ParseMode(StrEnum):
    """Top-level argument parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ArgParserOptions:
    """Settings controlling value conversion."""

    mode: ParseMode = ParseMode.STRICT
    time_unit: TimeUnit = TimeUnit.MS
    strict_integers: bool = True

    @staticmethod
    def for_mode(mode: ParseMode, *, time_unit: TimeUnit = TimeUnit.MS) -> "ArgParserOptions":
        if mode == ParseMode.PERMISSIVE:
            # Legacy integer conversion: keep leading digits, ignore trailing junk.
            return ArgParserOptions(
                mode=mode,
                time_unit=time_unit,
                strict_integers=False,
            )

        return ArgParserOptions(
            mode=mode,
            time_unit=time_unit,
            strict_integers=True,
        )
