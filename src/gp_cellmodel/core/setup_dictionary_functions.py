import json
import logging
from pathlib import Path
from typing import Union
import pint
from .data_structures import Constants, States
from .cell_model import initStates, V_INIT

logger = logging.getLogger(__name__)

ureg = pint.UnitRegistry()

# Configuration key -> (Constants field, model unit). A unit of None marks a
# dimensionless parameter given as a bare number.
CONSTANT_KEYS = {
    "sodium_conductivity": ("g_Na", "mS/mm^2"),
    "sodium_reversal_potential": ("E_Na", "mV"),
    "potassium_reversal_potential": ("E_K", "mV"),
    "h_half_potential": ("E_h", "mV"),
    "m_half_potential": ("E_m", "mV"),
    "m_slope": ("k_m", "mV"),
    "rectification_slope": ("k_r", "mV"),
    "h_slope": ("k_h", "mV"),
    "m_time_constant": ("tau_m", "ms"),
    "h_time_constant": ("tau_ho", "ms"),
    "h_time_constant_skew": ("delta_h", None),
    "potassium_conductivity": ("g_K", "mS/mm^2"),
    "membrane_capacitance": ("C_m", "uF/mm^2"),
    "stim_start": ("stim_start", "ms"),
    "stim_period": ("stim_period", "ms"),
    "stim_duration": ("stim_duration", "ms"),
    "stim_amplitude": ("stim_amplitude", "uA/uF"),
}


def load_config(input_file: Union[str, Path]) -> dict:
    """Read a JSON cell configuration file."""
    with open(input_file, "r") as read_file:
        return json.load(read_file)


def SetupConstants(constant_input: dict) -> Constants:
    """
    Build the model constants from a configuration dictionary.

    Keys are the descriptive names in CONSTANT_KEYS. Dimensional entries are
    {"value": ..., "unit": ...} and are converted to the model units;
    dimensionless entries are plain numbers. Missing keys keep the published
    defaults.
    """
    defaults = Constants()
    values = defaults._asdict()

    for key in constant_input:
        if key not in CONSTANT_KEYS:
            logger.warning("Ignoring unknown constant '%s'", key)

    for key, (field, unit) in CONSTANT_KEYS.items():
        if key not in constant_input:
            continue
        if unit is None:
            values[field] = float(constant_input[key])
        else:
            values[field] = get_with_units(
                constant_input, key, getattr(defaults, field), unit
            )
        logger.debug("Constant %s set to %s", field, values[field])

    constants = Constants(**values)
    check_constants(constants)
    return constants


def SetupInitialConditions(ic_input: dict, constants: Constants) -> States:
    """
    Initial states from a configuration dictionary. Only the membrane voltage
    is configurable; the gates always start relaxed at that voltage.
    """
    V_init = get_with_units(ic_input, "membrane_voltage", V_INIT, "mV")
    return initStates(constants, V_init)


def get_with_units(prop_obj, key, default_value, default_unit):
    """
    Extracts a property with units, converts to the model unit, returns float.
    """
    entry = prop_obj.get(key, {"value": default_value, "unit": default_unit})
    value = entry["value"]
    unit = entry["unit"]
    result = (value * ureg(unit)).to(default_unit).magnitude
    return float(result)


def check_constants(constants: Constants) -> None:
    """
    Reject parameter sets for which the model's denominators are not
    guaranteed positive, or for which a voltage slope is zero.
    """
    for field in ["k_m", "k_h", "k_r"]:
        if getattr(constants, field) == 0:
            raise ValueError(f"{field} must be non-zero")
    for field in ["tau_m", "tau_ho", "C_m", "stim_period"]:
        if not getattr(constants, field) > 0:
            raise ValueError(
                f"{field} must be positive, got {getattr(constants, field)}"
            )
    if not 0 < constants.delta_h < 1:
        raise ValueError(f"delta_h must lie in (0, 1), got {constants.delta_h}")
    if constants.stim_duration < 0:
        raise ValueError(
            f"stim_duration must be non-negative, got {constants.stim_duration}"
        )
