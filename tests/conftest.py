# tests/conftest.py
import pytest

from linecalc_core.parameters import InputParameters, LineType


def make_params(
    line_type=LineType.SHORT,
    voltage=1 + 1j,
    current=1 + 1j,
    resistance=2.0,
    inductance=1.0,
    capacitance=1.0,
) -> InputParameters:
    """Builds an InputParameters record; defaults are the reference values R=2, L=1, C=1, V=I=1+1j."""
    return InputParameters(
        voltage=voltage,
        current=current,
        line_type=line_type,
        resistance=resistance,
        inductance=inductance,
        capacitance=capacitance,
    )


@pytest.fixture
def params_factory():
    return make_params


@pytest.fixture
def write_parameter_file(tmp_path):
    """Writes a YAML parameter set into tmp_path and returns its path."""
    def _write(content: str, name: str = "line.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
