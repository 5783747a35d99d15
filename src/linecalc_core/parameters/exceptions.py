# src/linecalc_core/parameters/exceptions.py
"""
Defines custom, diagnosable exceptions for loading and validating parameter sets.

`ParsingError` covers file-level and YAML syntax problems, `SchemaValidationError`
covers documents that load but do not conform to the Cerberus parameter schema.
Both derive from the global `DiagnosableError` so the `load_parameters` facade can
turn them into a single user-facing `ParameterLoadError`.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """A local, concrete base class for all parameter set parsing errors."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parameter Set Error",
            details=str(self),
            suggestion="Please check the format and content of the parameter set.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Raised for file-system issues (missing file, permissions) or content that is not
    a YAML mapping at all.
    """
    details: str
    file_path: Optional[Path] = None

    def __str__(self):
        return f"Parsing error in '{self.file_path or '<inline>'}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Raised when a parameter set is a valid mapping but violates the schema
    (missing required values, unknown keys, negative or non-finite numbers,
    unsupported line type selectors).
    """
    errors: Dict[str, Any]
    file_path: Optional[Path] = None

    def _error_lines(self):
        return [
            f"  - Field '{field}': {message}"
            for field, message in sorted(_flatten_errors(self.errors))
        ]

    def __str__(self):
        return (
            f"Parameter schema validation failed for '{self.file_path or '<inline>'}':\n"
            + "\n".join(self._error_lines())
        )

    def get_diagnostic_report(self) -> str:
        error_lines = self._error_lines()
        details = (
            "The parameter set does not conform to the required schema.\n"
            f"See details for {len(error_lines)} issue(s) below:\n\n" + "\n".join(error_lines)
        )
        return format_diagnostic_report(
            error_type="Parameter Schema Validation Error",
            details=details,
            suggestion=(
                "Provide 'line_type' (short, medium_pi or medium_t), the 'voltage' and 'current' phasors, "
                "and finite, non-negative 'resistance', 'inductance' and 'capacitance' values."
            ),
            context={'source_file': self.file_path}
        )


def _flatten_errors(errors: Dict[str, Any], prefix: str = ""):
    """Yields (dotted_field, message) pairs from Cerberus' nested error tree."""
    for field, entries in errors.items():
        path = f"{prefix}{field}"
        for entry in entries:
            if isinstance(entry, dict):
                yield from _flatten_errors(entry, prefix=f"{path}.")
            else:
                yield path, entry
