# src/linecalc_core/circuit/exceptions.py
"""
Defines the diagnosable exceptions for the circuit model subsystem.
"""
from dataclasses import dataclass
from typing import Any

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class InvalidLineTypeError(DiagnosableError):
    """
    Raised when a line type selector does not name one of the registered line models.

    This is a contract violation by the caller: validated inputs always carry a
    `LineType` member. It is raised instead of silently falling back to any model.
    """
    line_type: Any
    details: str

    def __str__(self):
        return f"Invalid line type {self.line_type!r}: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Line Type",
            details=self.details,
            suggestion="Select one of the supported line models: short, medium_pi or medium_t.",
            context={'line_type': repr(self.line_type)}
        )
