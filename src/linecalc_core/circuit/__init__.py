# src/linecalc_core/circuit/__init__.py
import logging
logger = logging.getLogger(__name__)

# Import the registry first, then the concrete models to trigger registration.
from .base import (
    LineModelBase, LINE_MODEL_REGISTRY, register_line_model, resolve_line_model, instantiate_line_model
)
from .capabilities import IAbcdContributor, ILossContributor, provides
from .abcd import ABCDCoefficients, impedance, shunt_term, coefficients
from .models import ShortLine, MediumPiLine, MediumTLine
from .exceptions import InvalidLineTypeError

logger.debug(f"Available line models: {[line_type.label for line_type in LINE_MODEL_REGISTRY]}")

__all__ = [
    # Registry
    "LineModelBase",
    "LINE_MODEL_REGISTRY",
    "register_line_model",
    "resolve_line_model",
    "instantiate_line_model",
    # Capabilities
    "IAbcdContributor",
    "ILossContributor",
    "provides",
    # Circuit Model
    "ABCDCoefficients",
    "impedance",
    "shunt_term",
    "coefficients",
    # Line Models
    "ShortLine",
    "MediumPiLine",
    "MediumTLine",
    # Exceptions
    "InvalidLineTypeError",
]
