"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from argmask.diagnostics.diagnostic import Diagnostic


def first_error(diagnostics: Iterable[Diagnostic]) -> Diagnostic | None:
    return next((d for d in diagnostics if d.severity == "error"), None)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return first_error(diagnostics) is not None


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """One-line rendering, e.g. `[ARGS_INVALID_VALUE] 4..7: Failed to parse ...`."""
    start, end = diagnostic.range.as_tuple()
    return f"[{diagnostic.code}] {start}..{end}: {diagnostic.message}"
