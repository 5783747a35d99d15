# src/linecalc_core/parameters/inputs.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)


class LineType(IntEnum):
    """
    The closed set of lumped transmission line models. The integer values are the
    selectors used by parameter files and the command line ('0', '1', '2').
    """
    SHORT = 0      # Series impedance only.
    MEDIUM_PI = 1  # Shunt admittance split across both ends, impedance in the middle.
    MEDIUM_T = 2   # Impedance split across both ends, shunt admittance in the middle.

    @classmethod
    def from_label(cls, label: Union[str, int]) -> "LineType":
        """
        Resolves a user-facing selector ('short', 'MEDIUM_PI', 2, ...) to a member.
        Raises ValueError for anything outside the enumerated set.
        """
        if isinstance(label, cls):
            return label
        if isinstance(label, bool):
            raise ValueError(f"'{label}' is not a valid line type selector.")
        if isinstance(label, int):
            return cls(label)
        if isinstance(label, str):
            key = label.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                return cls(int(key))
        raise ValueError(f"'{label}' is not a valid line type selector.")

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class InputParameters:
    """
    One complete, already validated input set for a single evaluation.

    No defaults are applied and no values are checked here: the record is built by a
    caller (the parameter set parser, the CLI, or user code) that owns validation.
    `line_type` is normally a `LineType`; anything else is rejected when the circuit
    model is derived.
    """
    voltage: complex
    current: complex
    line_type: LineType
    resistance: float
    inductance: float
    capacitance: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InputParameters":
        """
        Builds a record from a schema-validated document, i.e. a mapping whose phasors
        are `{'real': .., 'imag': ..}` dictionaries and whose line type is a selector
        accepted by `LineType.from_label`.
        """
        return cls(
            voltage=_phasor(data["voltage"]),
            current=_phasor(data["current"]),
            line_type=LineType.from_label(data["line_type"]),
            resistance=float(data["resistance"]),
            inductance=float(data["inductance"]),
            capacitance=float(data["capacitance"]),
        )


def _phasor(value: Any) -> complex:
    if isinstance(value, Mapping):
        return complex(float(value["real"]), float(value.get("imag", 0.0)))
    return complex(value)
