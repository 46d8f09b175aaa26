"""Value converters used by the argument list parser.

Each helper converts one complete token. Address and integer helpers return
`None` on failure; delay and size helpers raise `UnitParseError`, whose text
is shown to the user as is.
"""

from __future__ import annotations

from enum import StrEnum
from ipaddress import IPv4Address, IPv4Network, IPv6Address
import re
from typing import Final, Mapping

_DIGITS_RE = re.compile(r"[0-9]+")
_LEADING_DIGITS_RE = re.compile(r"[0-9]*")
_PREFIX_LEN_RE = re.compile(r"[0-9]{1,2}")


class TimeUnit(StrEnum):
    US = "us"
    MS = "ms"
    S = "s"

    @property
    def microseconds(self) -> int:
        return _TIME_SUFFIXES[self.value]


# Suffix -> multiplier, in microseconds for delays and bytes for sizes.
_TIME_SUFFIXES: Final[Mapping[str, int]] = {
    "us": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60_000_000,
    "h": 3_600_000_000,
    "d": 86_400_000_000,
}

_SIZE_SUFFIXES: Final[Mapping[str, int]] = {
    "k": 1 << 10,
    "K": 1 << 10,
    "m": 1 << 20,
    "M": 1 << 20,
    "g": 1 << 30,
    "G": 1 << 30,
}


class UnitParseError(ValueError):
    """A delay or size literal could not be converted."""

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(message)
        self.text = text
        self.position = position


def parse_uint(text: str, *, strict: bool = True) -> int | None:
    """Decimal magnitude.

    Strict mode accepts ASCII digits only. Lenient mode keeps the leading
    digits and ignores the rest, so `"12ab"` is 12 and `""` is 0.
    """
    if strict:
        if _DIGITS_RE.fullmatch(text) is None:
            return None
        return int(text)

    digits = _LEADING_DIGITS_RE.match(text).group()
    return int(digits) if digits else 0


def _split_suffix(text: str, suffixes: Mapping[str, int], kind: str) -> tuple[int, str | None]:
    digits = _LEADING_DIGITS_RE.match(text).group()
    if not digits:
        if not text:
            raise UnitParseError(f"missing {kind} value", text, 0)
        raise UnitParseError(
            f"unexpected character '{text[0]}' at position 0 in {kind} '{text}'",
            text,
            0,
        )

    rest = text[len(digits) :]
    if not rest:
        return int(digits), None

    bad = len(digits)
    for suffix in sorted(suffixes, key=len, reverse=True):
        if rest.startswith(suffix):
            if rest == suffix:
                return int(digits), suffix
            bad += len(suffix)
            break

    raise UnitParseError(
        f"unexpected character '{text[bad]}' at position {bad} in {kind} '{text}'",
        text,
        bad,
    )


def parse_time(text: str, unit: TimeUnit = TimeUnit.MS) -> int:
    """Delay literal (`500`, `500ms`, `2s`, `1m`, ...) expressed in `unit`.

    A bare number is already in `unit`. Sub-unit remainders are truncated.
    """
    value, suffix = _split_suffix(text, _TIME_SUFFIXES, "delay")
    if suffix is None:
        return value
    return value * _TIME_SUFFIXES[suffix] // unit.microseconds


def parse_size(text: str) -> int:
    """Size literal in bytes, with optional `k`, `m` or `g` binary multipliers."""
    value, suffix = _split_suffix(text, _SIZE_SUFFIXES, "size")
    if suffix is None:
        return value
    return value * _SIZE_SUFFIXES[suffix]


def parse_ipv4(text: str) -> IPv4Address | None:
    try:
        return IPv4Address(text)
    except ValueError:
        return None


def parse_ipv6(text: str) -> IPv6Address | None:
    # Scoped addresses (`fe80::1%eth0`) are not plain addresses.
    if "%" in text:
        return None
    try:
        return IPv6Address(text)
    except ValueError:
        return None


def parse_ipv4_mask(text: str) -> IPv4Address | None:
    """IPv4 netmask from `255.255.255.0`, `24`, `/24` or `10.0.0.1/24`."""
    if "/" in text:
        address, _, text = text.partition("/")
        if address and parse_ipv4(address) is None:
            return None

    if "." in text:
        return parse_ipv4(text)

    if _PREFIX_LEN_RE.fullmatch(text) is None:
        return None
    prefix_len = int(text)
    if prefix_len > 32:
        return None
    return IPv4Network((0, prefix_len)).netmask


__all__ = [
    "TimeUnit",
    "UnitParseError",
    "parse_ipv4",
    "parse_ipv4_mask",
    "parse_ipv6",
    "parse_size",
    "parse_time",
    "parse_uint",
]
