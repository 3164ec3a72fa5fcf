from typing import NamedTuple, Union
import jax.numpy as jnp
import numpy as np


Scalar = Union[float, jnp.ndarray]


class Constants(NamedTuple):
    g_Na: Scalar = 0.11  # Sodium conductance (mS/mm^2)
    E_Na: Scalar = 65.0  # Sodium reversal potential (mV)
    E_K: Scalar = -83.0  # Potassium reversal potential (mV)
    E_h: Scalar = -74.7  # h-gate half-inactivation potential (mV)
    E_m: Scalar = -41.0  # m-gate half-activation potential (mV)
    k_m: Scalar = -4.0  # m-gate slope (mV)
    k_r: Scalar = 21.28  # Rectification slope of i_K (mV)
    k_h: Scalar = 4.4  # h-gate slope (mV)
    tau_m: Scalar = 0.12  # m-gate time constant (ms)
    tau_ho: Scalar = 6.80738  # h-gate base time constant (ms)
    delta_h: Scalar = 0.799163  # h-gate kinetic skew, in (0, 1)
    g_K: Scalar = 0.003  # Potassium conductance (mS/mm^2)
    C_m: Scalar = 0.01  # Membrane capacitance (uF/mm^2)
    stim_start: Scalar = 10.0  # (ms)
    stim_period: Scalar = 1000.0  # (ms)
    stim_duration: Scalar = 1.0  # (ms)
    stim_amplitude: Scalar = 80.0  # (uA/uF)


class States(NamedTuple):
    V: Scalar  # Membrane voltage (mV)
    m: Scalar  # Sodium activation gate
    h: Scalar  # Sodium inactivation gate


class Rates(NamedTuple):
    dV_dt: Scalar  # (mV/ms)
    dm_dt: Scalar  # (1/ms)
    dh_dt: Scalar  # (1/ms)


class Algebraic(NamedTuple):
    m_inf: Scalar  # Steady-state m
    h_inf: Scalar  # Steady-state h
    tau_h: Scalar  # Voltage-dependent h time constant (ms)
    i_Na: Scalar  # Fast sodium current (uA/mm^2)
    i_K: Scalar  # Rectifying potassium current (uA/mm^2)
    i_tot: Scalar  # Total ionic current (uA/mm^2)
    i_Stim: Scalar  # Stimulus current (uA/uF)


# Flat layout sizes, in field order
NUM_CONSTANTS = len(Constants._fields)
NUM_STATES = len(States._fields)
NUM_RATES = len(Rates._fields)
NUM_ALGEBRAIC = len(Algebraic._fields)


def recordToArray(record: NamedTuple) -> jnp.ndarray:
    """
    Flatten a record into a 1-D array whose index order is the record's field
    order (the fixed index contract of the flat layout).

    Batched records (fields of shape (N,)) become arrays of shape (len, N).
    """
    return jnp.stack([jnp.asarray(value, dtype=jnp.float64) for value in record])


def recordFromArray(record_type: type, array) -> NamedTuple:
    """
    Rebuild a record of ``record_type`` from a flat array in layout order.

    Raises ValueError if the array does not have exactly one entry per field;
    a mismatched length is a caller bug and is never truncated or padded.
    """
    values = np.asarray(array, dtype=np.float64)
    expected = len(record_type._fields)
    if values.ndim != 1 or values.shape[0] != expected:
        raise ValueError(
            f"{record_type.__name__} needs a 1-D array of length {expected}, "
            f"got shape {values.shape}"
        )
    return record_type(*(float(v) for v in values))
