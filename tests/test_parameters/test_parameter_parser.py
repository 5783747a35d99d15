# tests/test_parameters/test_parameter_parser.py

import pytest

from linecalc_core.errors import ParameterLoadError
from linecalc_core.parameters import (
    InputParameters,
    LineType,
    ParameterSetParser,
    ParsingError,
    SchemaValidationError,
    load_parameters,
    parameters_from_mapping,
)

VALID_SHORT_LINE = """
name: feeder_7
line_type: short
voltage: {real: 1.0, imag: 1.0}
current: {real: 1.0, imag: 1.0}
resistance: 2.0
inductance: 1
capacitance: 1
"""


def _valid_document(**overrides):
    document = {
        "line_type": "medium_t",
        "voltage": {"real": 6350.0, "imag": 0.0},
        "current": {"real": 80.0, "imag": -30.0},
        "resistance": 0.3,
        "inductance": 0.012,
        "capacitance": 0.002,
    }
    document.update(overrides)
    return document


class TestValidParameterSets:

    def test_parse_full_file(self, write_parameter_file):
        path = write_parameter_file(VALID_SHORT_LINE)
        parsed = ParameterSetParser().parse(path)

        assert parsed.name == "feeder_7"
        assert parsed.source_path == path.resolve()
        assert parsed.parameters == InputParameters(
            voltage=1 + 1j,
            current=1 + 1j,
            line_type=LineType.SHORT,
            resistance=2.0,
            inductance=1.0,
            capacitance=1.0,
        )

    def test_name_defaults_to_file_stem(self, write_parameter_file):
        path = write_parameter_file(VALID_SHORT_LINE.replace("name: feeder_7\n", ""), name="line_12.yaml")
        assert ParameterSetParser().parse(path).name == "line_12"

    def test_imaginary_parts_default_to_zero(self):
        params = parameters_from_mapping(_valid_document(voltage={"real": 230}, current={"real": 4.5}))
        assert params.voltage == 230 + 0j
        assert params.current == 4.5 + 0j

    def test_bare_numbers_are_real_phasors(self):
        params = parameters_from_mapping(_valid_document(voltage=230, current=-4.5))
        assert params.voltage == 230 + 0j
        assert params.current == -4.5 + 0j

    @pytest.mark.parametrize("selector, expected", [
        ("short", LineType.SHORT),
        ("MEDIUM_PI", LineType.MEDIUM_PI),
        ("medium-t", LineType.MEDIUM_T),
        (0, LineType.SHORT),
        (1, LineType.MEDIUM_PI),
        ("2", LineType.MEDIUM_T),
    ])
    def test_line_type_selectors(self, selector, expected):
        params = parameters_from_mapping(_valid_document(line_type=selector))
        assert params.line_type is expected

    def test_numbers_are_stored_as_floats(self):
        params = parameters_from_mapping(_valid_document(resistance=2, inductance=0, capacitance=1))
        assert isinstance(params.resistance, float)
        assert isinstance(params.inductance, float)
        assert isinstance(params.capacitance, float)

    def test_load_parameters_facade(self, write_parameter_file):
        params = load_parameters(write_parameter_file(VALID_SHORT_LINE))
        assert params.line_type is LineType.SHORT
        assert params.resistance == 2.0


class TestSchemaViolations:

    def _errors(self, document):
        with pytest.raises(SchemaValidationError) as excinfo:
            ParameterSetParser().parse_mapping(document)
        return excinfo.value

    @pytest.mark.parametrize("missing", ["line_type", "voltage", "current", "resistance", "inductance", "capacitance"])
    def test_required_fields(self, missing):
        document = _valid_document()
        del document[missing]
        error = self._errors(document)
        assert missing in error.errors

    def test_phasor_requires_real_part(self):
        error = self._errors(_valid_document(voltage={"imag": 3.0}))
        assert "Field 'voltage.real'" in str(error)

    @pytest.mark.parametrize("field", ["resistance", "inductance", "capacitance"])
    def test_line_parameters_must_be_non_negative(self, field):
        error = self._errors(_valid_document(**{field: -0.5}))
        assert field in error.errors

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_numbers_must_be_finite(self, value):
        error = self._errors(_valid_document(resistance=value))
        assert "must be a finite number" in str(error)

    def test_non_finite_phasor_component(self):
        error = self._errors(_valid_document(current={"real": 1.0, "imag": float("nan")}))
        assert "current.imag" in str(error)

    @pytest.mark.parametrize("selector", ["long", "medium", 3, -1])
    def test_unsupported_line_type(self, selector):
        error = self._errors(_valid_document(line_type=selector))
        assert "unsupported line type" in str(error)

    def test_unknown_keys_are_rejected(self):
        error = self._errors(_valid_document(frequency=60))
        assert "frequency" in error.errors

    def test_strings_are_not_numbers(self):
        error = self._errors(_valid_document(resistance="2 ohm"))
        assert "resistance" in error.errors

    def test_report_lists_every_issue(self):
        document = _valid_document(resistance=-1, line_type="long")
        del document["capacitance"]
        report = self._errors(document).get_diagnostic_report()

        assert "Parameter Schema Validation Error" in report
        assert "3 issue(s)" in report
        assert "Field 'capacitance'" in report
        assert "Field 'line_type'" in report
        assert "Field 'resistance'" in report


class TestFileErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParsingError, match="not found"):
            ParameterSetParser().parse(tmp_path / "nope.yaml")

    def test_empty_file(self, write_parameter_file):
        with pytest.raises(ParsingError, match="empty"):
            ParameterSetParser().parse(write_parameter_file(""))

    def test_root_must_be_a_mapping(self, write_parameter_file):
        with pytest.raises(ParsingError, match="must be a dictionary"):
            ParameterSetParser().parse(write_parameter_file("- 1\n- 2\n"))

    def test_invalid_yaml_syntax(self, write_parameter_file):
        path = write_parameter_file("line_type: short\n  voltage: [1, \n")
        with pytest.raises(ParsingError, match="Invalid YAML syntax"):
            ParameterSetParser().parse(path)

    def test_load_parameters_wraps_failures(self, tmp_path):
        missing = tmp_path / "nope.yaml"
        with pytest.raises(ParameterLoadError) as excinfo:
            load_parameters(missing)

        assert isinstance(excinfo.value.__cause__, ParsingError)
        assert "YAML Parsing or File Error" in str(excinfo.value)
        assert missing.name in str(excinfo.value)

    def test_parameters_from_mapping_wraps_schema_failures(self):
        with pytest.raises(ParameterLoadError) as excinfo:
            parameters_from_mapping({"line_type": "short"})
        assert isinstance(excinfo.value.__cause__, SchemaValidationError)
