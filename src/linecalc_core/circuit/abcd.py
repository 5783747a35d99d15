# src/linecalc_core/circuit/abcd.py
"""
Series impedance, shunt admittance and the ABCD (transmission) coefficients of a
line segment.

    [Vs]   [A  B] [Ir]
    [Is] = [C  D] [Vr]
"""
import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from ..constants import ANGULAR_FREQUENCY_FACTOR
from ..parameters.inputs import InputParameters
from .base import instantiate_line_model
from .capabilities import IAbcdContributor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ABCDCoefficients:
    """The four complex coefficients of a two-port transmission matrix."""
    a: complex
    b: complex
    c: complex
    d: complex

    def __iter__(self) -> Iterator[complex]:
        return iter((self.a, self.b, self.c, self.d))

    def as_matrix(self) -> np.ndarray:
        """The coefficients as a 2x2 complex128 array [[a, b], [c, d]]."""
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=np.complex128)

    def determinant(self) -> complex:
        """a*d - b*c. Not 1 in general for the approximate medium-line models."""
        return self.a * self.d - self.b * self.c


def impedance(params: InputParameters) -> complex:
    """Series impedance Z = R + j*50*L."""
    return complex(params.resistance, ANGULAR_FREQUENCY_FACTOR * params.inductance)


def shunt_term(params: InputParameters) -> complex:
    """Purely reactive shunt admittance Y = j*50*C."""
    return complex(0.0, ANGULAR_FREQUENCY_FACTOR * params.capacitance)


def series_shunt_terms(params: InputParameters) -> Tuple[complex, complex]:
    return impedance(params), shunt_term(params)


def coefficients(params: InputParameters) -> ABCDCoefficients:
    """
    Derives the ABCD coefficients for the line model selected by `params.line_type`.

    Raises:
        InvalidLineTypeError: if `params.line_type` is not a supported line model.
    """
    model = instantiate_line_model(params)
    coeffs = model.require_capability(IAbcdContributor).get_abcd(model)
    logger.debug(f"{type(model).__name__} coefficients: {coeffs}")
    return coeffs
