# src/linecalc_core/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .log_config import setup_logging
from .errors import DiagnosableError, LineCalcError, ParameterLoadError
from .parameters import InputParameters, ParameterSetParser
from .evaluation import run_evaluation, render_report

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="linecalc",
        description="ABCD coefficients, sending-end voltage/current and power loss of a transmission line.",
    )
    ap.add_argument('file', nargs='?', help="YAML parameter set; flags below override its values")
    ap.add_argument('--line-type', help="short | medium_pi | medium_t (or 0 | 1 | 2)")
    ap.add_argument('--voltage', type=float, nargs=2, metavar=('RE', 'IM'), help="receiving-end voltage phasor")
    ap.add_argument('--current', type=float, nargs=2, metavar=('RE', 'IM'), help="receiving-end current phasor")
    ap.add_argument('--resistance', type=float)
    ap.add_argument('--inductance', type=float)
    ap.add_argument('--capacitance', type=float)
    ap.add_argument('-v', '--verbose', action='store_true', help="log debug output")
    return ap


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.line_type is not None:
        overrides['line_type'] = args.line_type
    for phasor in ('voltage', 'current'):
        value = getattr(args, phasor)
        if value is not None:
            overrides[phasor] = {'real': value[0], 'imag': value[1]}
    for name in ('resistance', 'inductance', 'capacitance'):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return overrides


def load_cli_parameters(args: argparse.Namespace) -> InputParameters:
    """Merges the optional parameter file with command-line overrides and validates the result."""
    parser = ParameterSetParser()
    try:
        raw: Dict[str, Any] = {}
        source_path: Optional[Path] = None
        if args.file:
            source_path = Path(args.file).resolve()
            raw = parser.load_document(source_path)
        raw.update(_overrides_from_args(args))
        return parser.parse_mapping(raw, source_path=source_path).parameters
    except DiagnosableError as e:
        raise ParameterLoadError(e.get_diagnostic_report()) from e


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    # stdout carries only the report.
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        params = load_cli_parameters(args)
        result = run_evaluation(params)
    except LineCalcError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(render_report(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
