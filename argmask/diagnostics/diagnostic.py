"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass

from argmask.diagnostics.codes import DiagnosticSpec, Severity
from argmask.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted while parsing an argument list."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> Diagnostic:
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
