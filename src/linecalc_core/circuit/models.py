# src/linecalc_core/circuit/models.py
"""
The concrete lumped line models: short, medium nominal-Pi and medium nominal-T.

Each model provides its ABCD coefficients and its power loss formula. The loss
formulas differ in which current they square (the propagated sending-end current,
the raw input current, or both), following where the resistance sits in each
equivalent circuit.
"""

import logging

from ..parameters.inputs import LineType
from .abcd import ABCDCoefficients, series_shunt_terms, shunt_term
from .base import LineModelBase, register_line_model
from .capabilities import IAbcdContributor, ILossContributor, provides


logger = logging.getLogger(__name__)


def _half_product(z: complex, y: complex) -> complex:
    """The shared diagonal term 1 + Z*Y/2 of the medium-line models."""
    return 1 + z * y * 0.5


def _quarter_product(z: complex, y: complex) -> complex:
    return 1 + z * y * 0.25


@register_line_model(LineType.SHORT)
class ShortLine(LineModelBase):
    """Series impedance only; the shunt capacitance is neglected."""

    @provides(IAbcdContributor)
    class AbcdContributor:
        def get_abcd(self, model: 'ShortLine') -> ABCDCoefficients:
            z, _ = series_shunt_terms(model.params)
            return ABCDCoefficients(a=complex(1, 0), b=z, c=complex(0, 0), d=complex(1, 0))

    @provides(ILossContributor)
    class LossContributor:
        def get_power_loss(self, model: 'ShortLine', sending_current: complex) -> complex:
            return sending_current ** 2 * model.params.resistance


@register_line_model(LineType.MEDIUM_PI)
class MediumPiLine(LineModelBase):
    """Nominal-Pi: half the shunt admittance at each end, the full impedance between."""

    @provides(IAbcdContributor)
    class AbcdContributor:
        def get_abcd(self, model: 'MediumPiLine') -> ABCDCoefficients:
            z, y = series_shunt_terms(model.params)
            diagonal = _half_product(z, y)
            return ABCDCoefficients(a=diagonal, b=z, c=y * _quarter_product(z, y), d=diagonal)

    @provides(ILossContributor)
    class LossContributor:
        def get_power_loss(self, model: 'MediumPiLine', sending_current: complex) -> complex:
            # Receiving-end shunt branch current plus the input current; Is is not used.
            params = model.params
            return (shunt_term(params) * 0.5 + params.current) ** 2 * params.resistance


@register_line_model(LineType.MEDIUM_T)
class MediumTLine(LineModelBase):
    """Nominal-T: half the impedance on each side of the full shunt admittance."""

    @provides(IAbcdContributor)
    class AbcdContributor:
        def get_abcd(self, model: 'MediumTLine') -> ABCDCoefficients:
            z, y = series_shunt_terms(model.params)
            diagonal = _half_product(z, y)
            return ABCDCoefficients(a=diagonal, b=z * _quarter_product(z, y), c=y, d=diagonal)

    @provides(ILossContributor)
    class LossContributor:
        def get_power_loss(self, model: 'MediumTLine', sending_current: complex) -> complex:
            # Each half of the resistance carries one of the two end currents.
            params = model.params
            return (sending_current ** 2 + params.current ** 2) * (params.resistance / 2)
