# src/linecalc_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class LineCalcError(Exception):
    """Base class for all custom, user-facing errors in LineCalc Core."""
    pass

class ParameterLoadError(LineCalcError):
    """
    Raised when an input parameter set cannot be loaded, either because the file is
    unreadable or because its content violates the parameter schema.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass

class EvaluationError(LineCalcError):
    """
    Raised when evaluating a parameter set fails, e.g. because the line type
    selector is outside the supported set of line models.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    Facades check for it with isinstance() to decide which failures they can
    translate into a user-facing error.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    Concrete, catchable base class for the internal exceptions of every subsystem.

    Subclasses must implement `get_diagnostic_report`; the abstract declaration makes
    forgetting it fail at instantiation time rather than at report time.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    A stateless helper to format the final multi-line report string, ensuring a
    consistent look and feel for all user-facing diagnostics.

    Args:
        error_type: The high-level category of the error (e.g., "Invalid Line Type").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (source file, line type).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "=============== LineCalc Core: Actionable Diagnostic Report ===============",
        f"Error Type:     {error_type}",
    ]
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if line_type := context.get('line_type'):
        lines.append(f"Line Type:      {line_type}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("===========================================================================")
    return "\n".join(lines)
