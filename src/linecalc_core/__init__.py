# src/linecalc_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("LineCalc Core package initialized.")

from .constants import ANGULAR_FREQUENCY_FACTOR
from .parameters import InputParameters, LineType, ParameterSetParser, load_parameters, parameters_from_mapping
from .circuit import ABCDCoefficients, impedance, shunt_term, coefficients, InvalidLineTypeError
from .evaluation import (
    EvaluationResult, propagate, power_loss, evaluate, run_evaluation, format_complex, render_report
)
from .errors import LineCalcError, ParameterLoadError, EvaluationError

__all__ = [
    # Constants
    "ANGULAR_FREQUENCY_FACTOR",
    # Inputs
    "InputParameters", "LineType", "ParameterSetParser", "load_parameters", "parameters_from_mapping",
    # Circuit Model
    "ABCDCoefficients", "impedance", "shunt_term", "coefficients", "InvalidLineTypeError",
    # Evaluation
    "EvaluationResult", "propagate", "power_loss", "evaluate", "run_evaluation",
    "format_complex", "render_report",
    # Top-Level Errors (Actionable Diagnostics)
    "LineCalcError", "ParameterLoadError", "EvaluationError",
]
