# src/linecalc_core/evaluation/results.py
"""
The result contract handed from the evaluation pipeline to whatever renders it.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple

from ..circuit.abcd import ABCDCoefficients

#: Display labels, in the order results are reported.
RESULT_LABELS: Tuple[str, ...] = ("A", "B", "C", "D", "Vs", "Is", "Pl")


@dataclass(frozen=True)
class EvaluationResult:
    """
    The immutable outcome of one evaluation.

    Attributes:
        coefficients: The ABCD coefficients of the selected line model.
        sending_voltage: Vs, derived from the input phasors.
        sending_current: Is, derived from the input phasors.
        power_loss: Pl. Complex because the loss formulas square complex phasors;
                    its imaginary part is whatever the formula yields.
    """
    coefficients: ABCDCoefficients
    sending_voltage: complex
    sending_current: complex
    power_loss: complex

    def items(self) -> Iterator[Tuple[str, complex]]:
        """(label, value) pairs in report order: A, B, C, D, Vs, Is, Pl."""
        values = (*self.coefficients, self.sending_voltage, self.sending_current, self.power_loss)
        return zip(RESULT_LABELS, values)

    def as_dict(self):
        return dict(self.items())
