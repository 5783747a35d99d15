# src/linecalc_core/evaluation/__init__.py
from .propagation import propagate, power_loss
from .results import EvaluationResult, RESULT_LABELS
from .engine import evaluate, run_evaluation
from .report import format_complex, render_report

__all__ = [
    # Pipeline Stages
    "propagate",
    "power_loss",
    # Result Contract
    "EvaluationResult",
    "RESULT_LABELS",
    # Entry Points
    "evaluate",
    "run_evaluation",
    # Rendering
    "format_complex",
    "render_report",
]
