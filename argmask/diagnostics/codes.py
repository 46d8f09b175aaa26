"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def render(self, **fields: object) -> str:
        """Fill the `{field}` placeholders of the message template."""
        return self.message.format(**fields)


ARGS_MISSING_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ARGS_MISSING_ARGUMENTS",
    message="Missing arguments (got {got}/{expected}), type '{type_name}' expected",
    hint="Provide at least the mandatory arguments, separated by commas.",
    severity="error",
    category="args",
)

ARGS_TOO_MANY_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ARGS_TOO_MANY_ARGUMENTS",
    message="End of arguments expected at '{remaining}'",
    hint="Remove the extra comma-separated arguments.",
    severity="error",
    category="args",
)

ARGS_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ARGS_INVALID_VALUE",
    message="Failed to parse '{text}' as type '{type_name}'",
    severity="error",
    category="args",
)

ARGS_UNSUPPORTED_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ARGS_UNSUPPORTED_TYPE",
    message="Failed to parse '{text}' as type '{type_name}'",
    hint="The argument mask declares a type code the parser does not know.",
    severity="error",
    category="args",
)
