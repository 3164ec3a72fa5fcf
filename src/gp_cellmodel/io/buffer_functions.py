"""
Flat-buffer binding for hosts that own the model vectors as plain arrays.

Mirrors the classic calling convention initConsts(CONSTANTS, RATES, STATES) /
computeRates(VOI, CONSTANTS, RATES, STATES, ALGEBRAIC): the caller allocates
the four 1-D float arrays once per cell and every call writes its outputs
into them in place. No logic lives here beyond translating between the
buffers and the named records of gp_cellmodel.core.
"""

import numpy as np
from gp_cellmodel.core.cell_model import initConsts, computeRates, computeVariables
from gp_cellmodel.core.data_structures import (
    Constants,
    States,
    NUM_CONSTANTS,
    NUM_STATES,
    NUM_RATES,
    NUM_ALGEBRAIC,
    recordToArray,
    recordFromArray,
)


def allocateBuffers() -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Zeroed (CONSTANTS, RATES, STATES, ALGEBRAIC) buffers of the right lengths."""
    return (
        np.zeros(NUM_CONSTANTS),
        np.zeros(NUM_RATES),
        np.zeros(NUM_STATES),
        np.zeros(NUM_ALGEBRAIC),
    )


def checkBuffer(buffer: np.ndarray, length: int, name: str) -> None:
    """
    Raise ValueError unless buffer is a writable 1-D float64 array of the
    given length.
    """
    if not isinstance(buffer, np.ndarray):
        raise ValueError(f"{name} must be a numpy array, got {type(buffer).__name__}")
    if buffer.shape != (length,):
        raise ValueError(f"{name} must have shape ({length},), got {buffer.shape}")
    if buffer.dtype != np.float64:
        raise ValueError(f"{name} must be float64, got {buffer.dtype}")
    if not buffer.flags.writeable:
        raise ValueError(f"{name} is read-only")


def initConstsBuffers(
    CONSTANTS: np.ndarray, RATES: np.ndarray, STATES: np.ndarray
) -> int:
    """Fill CONSTANTS and STATES with the initial values. RATES is untouched."""
    checkBuffer(CONSTANTS, NUM_CONSTANTS, "CONSTANTS")
    checkBuffer(RATES, NUM_RATES, "RATES")
    checkBuffer(STATES, NUM_STATES, "STATES")

    constants, states = initConsts()
    CONSTANTS[:] = np.asarray(recordToArray(constants))
    STATES[:] = np.asarray(recordToArray(states))
    return 0


def computeRatesBuffers(
    VOI: float,
    CONSTANTS: np.ndarray,
    RATES: np.ndarray,
    STATES: np.ndarray,
    ALGEBRAIC: np.ndarray,
) -> int:
    """Overwrite RATES and ALGEBRAIC with the model right-hand side at time VOI."""
    constants, states = readInputs(CONSTANTS, RATES, STATES, ALGEBRAIC)

    rates, algebraic = computeRates(VOI, constants, states)
    RATES[:] = np.asarray(recordToArray(rates))
    ALGEBRAIC[:] = np.asarray(recordToArray(algebraic))
    return 0


def computeVariablesBuffers(
    VOI: float,
    CONSTANTS: np.ndarray,
    RATES: np.ndarray,
    STATES: np.ndarray,
    ALGEBRAIC: np.ndarray,
) -> int:
    """Overwrite ALGEBRAIC at time VOI. RATES is untouched."""
    constants, states = readInputs(CONSTANTS, RATES, STATES, ALGEBRAIC)

    algebraic = computeVariables(VOI, constants, states)
    ALGEBRAIC[:] = np.asarray(recordToArray(algebraic))
    return 0


def readInputs(
    CONSTANTS: np.ndarray,
    RATES: np.ndarray,
    STATES: np.ndarray,
    ALGEBRAIC: np.ndarray,
) -> tuple[Constants, States]:
    """Validate all four buffers, then read the input records."""
    checkBuffer(CONSTANTS, NUM_CONSTANTS, "CONSTANTS")
    checkBuffer(RATES, NUM_RATES, "RATES")
    checkBuffer(STATES, NUM_STATES, "STATES")
    checkBuffer(ALGEBRAIC, NUM_ALGEBRAIC, "ALGEBRAIC")
    return recordFromArray(Constants, CONSTANTS), recordFromArray(States, STATES)
