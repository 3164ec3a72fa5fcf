import jax
import jax.numpy as jnp
from .data_structures import Constants


@jax.jit
def computeSteadyStateGate(
    voltage: jnp.ndarray, half_voltage: float, slope: float
) -> jnp.ndarray:
    """
    Logistic steady-state (voltage-clamped) value of a gating variable.

        x_inf = 1 / (1 + exp((V - V_half) / slope))

    A negative slope gives an activation gate (rises with V), a positive
    slope an inactivation gate.
    """
    return 1.0 / (1.0 + jnp.exp((voltage - half_voltage) / slope))


@jax.jit
def computeSteadyStateGates(
    voltage: jnp.ndarray, constants: Constants
) -> tuple[jnp.ndarray, jnp.ndarray]:
    """Return (m_inf, h_inf) at the given membrane voltage."""
    m_inf = computeSteadyStateGate(voltage, constants.E_m, constants.k_m)
    h_inf = computeSteadyStateGate(voltage, constants.E_h, constants.k_h)
    return m_inf, h_inf


@jax.jit
def computeTauH(voltage: jnp.ndarray, constants: Constants) -> jnp.ndarray:
    """
    Voltage-dependent relaxation time of the h-gate (ms).

        tau_h = 2 tau_ho exp(delta_h (V - E_h) / k_h) / (1 + exp((V - E_h) / k_h))

    The skew delta_h in (0, 1) makes recovery and inactivation asymmetric;
    delta_h = 0.5 gives a symmetric bell with peak tau_ho at V = E_h.
    """
    scaled_displacement = (voltage - constants.E_h) / constants.k_h
    numerator = 2.0 * constants.tau_ho * jnp.exp(
        constants.delta_h * scaled_displacement
    )
    return numerator / (1.0 + jnp.exp(scaled_displacement))


@jax.jit
def computeGateRate(
    steady_state: jnp.ndarray, gate: jnp.ndarray, time_constant: jnp.ndarray
) -> jnp.ndarray:
    """Relaxation kinetics: d(gate)/dt = (x_inf - x) / tau."""
    return (steady_state - gate) / time_constant
