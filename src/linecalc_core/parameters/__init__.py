# src/linecalc_core/parameters/__init__.py
from .inputs import InputParameters, LineType
from .parser import (
    ParameterSetParser,
    ParsedParameterSet,
    load_parameters,
    parameters_from_mapping,
)
from .exceptions import ParsingError, SchemaValidationError

__all__ = [
    # Input Records
    "InputParameters",
    "LineType",
    # Parser and Facades
    "ParameterSetParser",
    "ParsedParameterSet",
    "load_parameters",
    "parameters_from_mapping",
    # Exceptions
    "ParsingError",
    "SchemaValidationError",
]
