"""Diagnostics."""

from argmask.diagnostics.codes import (
    ARGS_INVALID_VALUE,
    ARGS_MISSING_ARGUMENTS,
    ARGS_TOO_MANY_ARGUMENTS,
    ARGS_UNSUPPORTED_TYPE,
    DiagnosticSpec,
    Severity,
)
from argmask.diagnostics.diagnostic import Diagnostic
from argmask.diagnostics.report import first_error, format_diagnostic, has_errors

__all__ = [
    "ARGS_INVALID_VALUE",
    "ARGS_MISSING_ARGUMENTS",
    "ARGS_TOO_MANY_ARGUMENTS",
    "ARGS_UNSUPPORTED_TYPE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "first_error",
    "format_diagnostic",
    "has_errors",
]
