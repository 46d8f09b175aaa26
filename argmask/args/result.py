"""Argument list parse carriers."""

from __future__ import annotations

from dataclasses import dataclass

from argmask.args.mask import ArgMask
from argmask.args.types import END_OF_ARGS, Arg, StopArg
from argmask.diagnostics import Diagnostic, first_error, has_errors


class ArgListError(ValueError):
    """Raised by `ArgListResult.unwrap()` for a failed parse."""

    def __init__(self, diagnostic: Diagnostic, *, arg_index: int, offset: int) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.arg_index = arg_index
        self.offset = offset

    @property
    def code(self) -> str:
        return self.diagnostic.code


@dataclass(frozen=True, slots=True)
class ArgListResult:
    """Outcome of one argument list parse.

    On success `args` holds one value per parsed position, or is `None` when
    the mask declares no argument or an empty fragment has nothing mandatory.
    On failure `args` is always `None` and `diagnostics` holds exactly one
    error. `arg_index` is the position reached and `offset` the index in
    `source_text` where scanning stopped, in both cases.
    """

    source_text: str
    mask: ArgMask
    args: tuple[Arg, ...] | None
    arg_index: int
    offset: int
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def ok(self) -> bool:
        return not self.has_errors

    @property
    def count(self) -> int:
        """Number of parsed arguments, -1 on failure."""
        return self.arg_index if self.ok else -1

    @property
    def error(self) -> Diagnostic | None:
        return first_error(self.diagnostics)

    @property
    def message(self) -> str | None:
        error = self.error
        return None if error is None else error.message

    @property
    def remaining(self) -> str:
        """Input left unread at `offset`."""
        return self.source_text[self.offset :]

    def get(self, pos: int) -> Arg | StopArg:
        if self.args is None or not 0 <= pos < len(self.args):
            return END_OF_ARGS
        return self.args[pos]

    def unwrap(self) -> tuple[Arg, ...]:
        error = self.error
        if error is not None:
            raise ArgListError(error, arg_index=self.arg_index, offset=self.offset)
        return self.args or ()
