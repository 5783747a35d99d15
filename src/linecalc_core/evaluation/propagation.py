# src/linecalc_core/evaluation/propagation.py
import logging
from typing import Tuple

from ..circuit.abcd import ABCDCoefficients
from ..circuit.base import instantiate_line_model
from ..circuit.capabilities import ILossContributor
from ..parameters.inputs import InputParameters

logger = logging.getLogger(__name__)


def propagate(coeffs: ABCDCoefficients, current: complex, voltage: complex) -> Tuple[complex, complex]:
    """
    Pushes the input phasor pair through the transmission matrix:

        Vs = a*current + b*voltage
        Is = c*current + d*voltage

    Returns:
        (Vs, Is) as Python complex numbers.
    """
    current, voltage = complex(current), complex(voltage)
    sending_voltage = coeffs.a * current + coeffs.b * voltage
    sending_current = coeffs.c * current + coeffs.d * voltage
    return complex(sending_voltage), complex(sending_current)


def power_loss(params: InputParameters, sending_current: complex) -> complex:
    """
    Resistive power loss for the line model selected by `params.line_type`.

    Raises:
        InvalidLineTypeError: if `params.line_type` is not a supported line model.
    """
    model = instantiate_line_model(params)
    loss = model.require_capability(ILossContributor).get_power_loss(model, sending_current)
    return complex(loss)
