# src/linecalc_core/evaluation/report.py
"""
Plain-text rendering of evaluation results, one labeled line per value.

Numbers are written as the shortest text that round-trips to the same float, laid
out like JavaScript's `Number.prototype.toString`: plain notation for magnitudes
from 1e-6 up to 1e21, `1.5e-7` / `1e+21` outside of it, and `-0` shown as `0`.
"""
import logging
import math
from decimal import Decimal

from ..constants import DISPLAY_EPSILON
from .results import EvaluationResult

logger = logging.getLogger(__name__)


def _format_real(value: float) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr() gives the shortest round-trip digits.
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return sign + text


def format_complex(value: complex) -> str:
    """
    Renders a complex number as "re + imi" / "re - imi".

    Parts smaller than 1e-15 in magnitude count as zero. Zero parts are omitted
    ("3", "4i", "0") and a unit imaginary part is written as a bare "i"
    ("1 + i", "-i"). Non-finite values render as "NaN" or "Infinity".
    """
    value = complex(value)
    re, im = value.real, value.imag
    if math.isnan(re) or math.isnan(im):
        return "NaN"
    if math.isinf(re) or math.isinf(im):
        return "Infinity"
    if abs(re) < DISPLAY_EPSILON:
        re = 0.0
    if abs(im) < DISPLAY_EPSILON:
        im = 0.0

    str_re = _format_real(re)
    if im == 0:
        return str_re
    if re == 0:
        if im == 1:
            return "i"
        if im == -1:
            return "-i"
        return f"{_format_real(im)}i"
    if im < 0:
        return f"{str_re} - i" if im == -1 else f"{str_re} - {_format_real(-im)}i"
    return f"{str_re} + i" if im == 1 else f"{str_re} + {_format_real(im)}i"


def render_report(result: EvaluationResult) -> str:
    """The seven result values as "Label: value" lines in the order A, B, C, D, Vs, Is, Pl."""
    return "\n".join(f"{label}: {format_complex(value)}" for label, value in result.items())
