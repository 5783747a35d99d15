# src/linecalc_core/constants.py
import logging

logger = logging.getLogger(__name__)

# --- Model Constants ---

#: Fixed factor applied to the inductance and capacitance coefficients to obtain the
#: series reactance and shunt susceptance. It stands in for the nominal angular
#: frequency of the line and is deliberately not configurable.
ANGULAR_FREQUENCY_FACTOR: float = 50.0

#: Magnitude below which a real or imaginary part is shown as zero in reports.
DISPLAY_EPSILON: float = 1e-15

logger.debug("Defined core constants: ANGULAR_FREQUENCY_FACTOR, DISPLAY_EPSILON")
