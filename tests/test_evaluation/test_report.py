# tests/test_evaluation/test_report.py

import pytest

from linecalc_core import evaluate
from linecalc_core.evaluation import format_complex, render_report
from linecalc_core.parameters import LineType


@pytest.mark.parametrize("value, expected", [
    (2 + 50j, "2 + 50i"),
    (-47 + 53j, "-47 + 53i"),
    (1.5 - 2j, "1.5 - 2i"),
    (3 - 1j, "3 - i"),
    (1 + 1j, "1 + i"),
    (4j, "4i"),
    (-2.5j, "-2.5i"),
    (1j, "i"),
    (-1j, "-i"),
    (1 + 0j, "1"),
    (-1249 + 0j, "-1249"),
    (0j, "0"),
    (complex(-0.0, 0.0), "0"),
    (0.1 + 0.2 + 0j, "0.30000000000000004"),
    (1e20 + 0j, "100000000000000000000"),
    (1e21 + 0j, "1e+21"),
    (123.456 - 0.000001j, "123.456 - 0.000001i"),
    (1.5e-7 + 0j, "1.5e-7"),
    (-2.5e25j, "-2.5e+25i"),
    (complex(1e-16, 2), "2i"),
    (complex(3, -5e-16), "3"),
])
def test_format_complex(value, expected):
    assert format_complex(value) == expected


def test_format_accepts_real_numbers():
    assert format_complex(3) == "3"
    assert format_complex(-0.25) == "-0.25"


def test_render_short_line_report(params_factory):
    report = render_report(evaluate(params_factory(line_type=LineType.SHORT)))

    assert report.splitlines() == [
        "A: 1",
        "B: 2 + 50i",
        "C: 0",
        "D: 1",
        "Vs: -47 + 53i",
        "Is: 1 + i",
        "Pl: 4i",
    ]


def test_render_medium_pi_report(params_factory):
    report = render_report(evaluate(params_factory(line_type=LineType.MEDIUM_PI)))

    assert report == "\n".join([
        "A: -1249 + 50i",
        "B: 2 + 50i",
        "C: -1250 - 31200i",
        "D: -1249 + 50i",
        "Vs: -1347 - 1147i",
        "Is: 28651 - 33649i",
        "Pl: -1350 + 104i",
    ])


@pytest.mark.parametrize("value, expected", [
    (complex(float("nan"), 1), "NaN"),
    (complex(1, float("inf")), "Infinity"),
])
def test_format_non_finite(value, expected):
    assert format_complex(value) == expected
