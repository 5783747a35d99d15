# src/linecalc_core/parameters/parser.py
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import cerberus
import yaml

from .inputs import InputParameters, LineType
from .exceptions import ParsingError, SchemaValidationError
from ..errors import ParameterLoadError, Diagnosable

logger = logging.getLogger(__name__)


class ParameterValidator(cerberus.Validator):
    """Cerberus validator with the numeric and selector rules used by parameter sets."""

    def _validate_finite(self, constraint, field, value):
        """
        Rejects NaN and infinite numbers.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, (int, float)) and not math.isfinite(value):
            self._error(field, f"must be a finite number, got {value}")

    def _validate_line_type_selector(self, constraint, field, value):
        """
        Accepts only selectors that resolve to a LineType member.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint:
            return
        try:
            LineType.from_label(value)
        except ValueError:
            allowed = [member.label for member in LineType] + [str(member.value) for member in LineType]
            self._error(field, f"unsupported line type '{value}'. Allowed selectors: {allowed}")

    def _normalize_coerce_phasor(self, value):
        # A bare number is shorthand for a phasor with zero imaginary part.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return {"real": value, "imag": 0.0}
        return value


@dataclass(frozen=True)
class ParsedParameterSet:
    """A validated parameter set together with where it came from."""
    name: str
    source_path: Optional[Path]
    parameters: InputParameters


class ParameterSetParser:
    """
    Loads and validates parameter sets (YAML files or plain mappings) and turns them
    into `InputParameters` records. All validation and defaulting for the calculation
    happens here; the circuit model trusts what it receives.
    """
    _number_rule = {"type": "number", "finite": True}
    _line_parameter_rule = {"type": "number", "required": True, "finite": True, "min": 0}

    _phasor_rule = {
        "required": True,
        "coerce": "phasor",
        "type": "dict",
        "schema": {
            "real": {**_number_rule, "required": True},
            "imag": {**_number_rule, "default": 0.0},
        },
    }

    _schema = {
        "name": {"type": "string", "required": False, "empty": False},
        "line_type": {"type": ["string", "integer"], "required": True, "line_type_selector": True},
        "voltage": _phasor_rule,
        "current": _phasor_rule,
        "resistance": _line_parameter_rule,
        "inductance": _line_parameter_rule,
        "capacitance": _line_parameter_rule,
    }

    def __init__(self):
        self._validator = ParameterValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("ParameterSetParser initialized.")

    def parse(self, source_path: Union[str, Path]) -> ParsedParameterSet:
        """Parses a YAML parameter set file."""
        path = Path(source_path).resolve()
        logger.info(f"Parsing parameter set: {path}")
        return self.parse_mapping(self.load_document(path), source_path=path)

    def parse_mapping(self, raw: Mapping[str, Any], source_path: Optional[Path] = None) -> ParsedParameterSet:
        """Validates an in-memory document with the same schema used for files."""
        if not self._validator.validate(dict(raw)):
            raise SchemaValidationError(self._validator.errors, source_path)

        document = self._validator.document
        parameters = InputParameters.from_mapping(document)
        name = document.get("name") or (source_path.stem if source_path else "inline")
        logger.debug(f"Parameter set '{name}' validated: {parameters}")
        return ParsedParameterSet(name=name, source_path=source_path, parameters=parameters)

    def load_document(self, source: Union[str, Path]) -> Dict[str, Any]:
        """Reads the raw YAML mapping of a parameter set file without validating it."""
        source = Path(source)
        if not source.is_file():
            raise ParsingError(details=f"Parameter file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e

        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content


def load_parameters(source_path: Union[str, Path]) -> InputParameters:
    """
    Facade for reading a parameter set file.

    Raises:
        ParameterLoadError: with the diagnostic report of the underlying parsing or
                            schema failure as its message. The original exception
                            is chained for debugging.
    """
    return _translate_failures(lambda: ParameterSetParser().parse(source_path)).parameters


def parameters_from_mapping(raw: Mapping[str, Any]) -> InputParameters:
    """Facade for validating an in-memory parameter document."""
    return _translate_failures(lambda: ParameterSetParser().parse_mapping(raw)).parameters


def _translate_failures(action):
    try:
        return action()
    except Exception as e:
        if isinstance(e, Diagnosable):
            report = e.get_diagnostic_report()
            logger.error(f"Loading the parameter set failed: {e}")
            raise ParameterLoadError(report) from e
        raise
