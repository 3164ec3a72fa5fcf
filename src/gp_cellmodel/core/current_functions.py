import jax
import jax.numpy as jnp
from .data_structures import Constants


@jax.jit
def computeSodiumCurrent(
    voltage: jnp.ndarray, m: jnp.ndarray, h: jnp.ndarray, constants: Constants
) -> jnp.ndarray:
    """Fast depolarizing current i_Na = g_Na m^3 h (V - E_Na), uA/mm^2."""
    return constants.g_Na * m**3 * h * (voltage - constants.E_Na)


@jax.jit
def computePotassiumCurrent(voltage: jnp.ndarray, constants: Constants) -> jnp.ndarray:
    """
    Rectifying current i_K = g_K (V - E_K) exp(-(V - E_K) / k_r), uA/mm^2.

    Drives V back toward E_K; the exponential factor reduces the outward
    current at depolarized potentials.
    """
    displacement = voltage - constants.E_K
    return constants.g_K * displacement * jnp.exp(-displacement / constants.k_r)


@jax.jit
def isStimulusActive(time: jnp.ndarray, constants: Constants) -> jnp.ndarray:
    """
    True when the time falls in the stimulus window of its period.

    The phase uses a floor-based modulo, so negative and very large times map
    into [0, stim_period). Both window bounds are inclusive.
    """
    period = constants.stim_period
    phase = time - jnp.floor(time / period) * period
    return (phase >= constants.stim_start) & (
        phase <= constants.stim_start + constants.stim_duration
    )


@jax.jit
def computeStimulusCurrent(time: jnp.ndarray, constants: Constants) -> jnp.ndarray:
    """Stimulus current (uA/uF): -stim_amplitude inside the window, 0 outside."""
    return jnp.where(
        isStimulusActive(time, constants), -constants.stim_amplitude, 0.0
    )
