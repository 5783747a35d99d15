# src/linecalc_core/evaluation/engine.py
"""
Public entry points for evaluating a parameter set.

`evaluate` is the pure pipeline: coefficients -> propagation -> power loss. It keeps
no state between calls, so identical inputs always give identical results.
`run_evaluation` is the facade for applications: it logs the run and turns any
diagnosable failure into a single user-facing `EvaluationError`.
"""
import logging

from ..circuit.abcd import coefficients
from ..errors import EvaluationError, Diagnosable
from ..parameters.inputs import InputParameters
from .propagation import propagate, power_loss
from .results import EvaluationResult

logger = logging.getLogger(__name__)


def evaluate(params: InputParameters) -> EvaluationResult:
    """
    Evaluates one parameter set.

    Raises:
        InvalidLineTypeError: if `params.line_type` is not a supported line model.
    """
    coeffs = coefficients(params)
    sending_voltage, sending_current = propagate(coeffs, params.current, params.voltage)
    loss = power_loss(params, sending_current)
    logger.debug(f"Vs={sending_voltage}, Is={sending_current}, Pl={loss}")
    return EvaluationResult(
        coefficients=coeffs,
        sending_voltage=sending_voltage,
        sending_current=sending_current,
        power_loss=loss,
    )


def run_evaluation(params: InputParameters) -> EvaluationResult:
    """
    Evaluates one parameter set, reporting failures as `EvaluationError`.

    Raises:
        EvaluationError: with the diagnostic report of the underlying failure as its
                         message. The original exception is chained for debugging.
    """
    line_type = getattr(params.line_type, "label", params.line_type)
    logger.info(f"--- Evaluating '{line_type}' line ---")
    try:
        result = evaluate(params)
    except Exception as e:
        if isinstance(e, Diagnosable):
            report = e.get_diagnostic_report()
            logger.error(f"Evaluation failed: {e}")
            raise EvaluationError(report) from e
        logger.error(f"An unexpected internal error occurred during evaluation: {e}", exc_info=True)
        raise
    logger.info("--- Evaluation completed successfully ---")
    return result
