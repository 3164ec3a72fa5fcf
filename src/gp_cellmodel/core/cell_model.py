import jax
import jax.numpy as jnp
from .data_structures import Constants, States, Rates, Algebraic
from .gating_functions import computeSteadyStateGates, computeTauH, computeGateRate
from .current_functions import (
    computeSodiumCurrent,
    computePotassiumCurrent,
    computeStimulusCurrent,
)

# Resting membrane voltage used as the initial condition (mV)
V_INIT = -83.0


def initConsts() -> tuple[Constants, States]:
    """
    Set the model constants to their published values and relax the gates to
    steady state at the resting voltage.

    Rates are not part of the initial condition; the first call to
    computeRates produces them.
    """
    constants = Constants()
    return constants, initStates(constants)


def initStates(constants: Constants, V_init: float = V_INIT) -> States:
    """
    Initial condition for a given parameter set: V = V_init and m, h equal to
    their steady-state values at V_init, evaluated with the same sigmoid as
    computeRates so that dm/dt and dh/dt start at zero.
    """
    voltage = jnp.asarray(V_init, dtype=jnp.float64)
    m_init, h_init = computeSteadyStateGates(voltage, constants)
    return States(V=voltage, m=m_init, h=h_init)


@jax.jit
def computeAlgebraic(time: float, constants: Constants, states: States) -> Algebraic:
    """
    Evaluate all algebraic variables from the current time and state.

    Every slot depends only on earlier slots, constants and states. The gate
    targets and tau_h come first, then the ionic currents and their sum, and
    finally the periodic stimulus current.
    """
    voltage = states.V

    # --- Gating kinetics ---
    m_inf, h_inf = computeSteadyStateGates(voltage, constants)
    tau_h = computeTauH(voltage, constants)

    # --- Ionic currents ---
    i_Na = computeSodiumCurrent(voltage, states.m, states.h, constants)
    i_K = computePotassiumCurrent(voltage, constants)
    i_tot = i_Na + i_K

    # --- External stimulus ---
    i_Stim = computeStimulusCurrent(time, constants)

    return Algebraic(
        m_inf=m_inf,
        h_inf=h_inf,
        tau_h=tau_h,
        i_Na=i_Na,
        i_K=i_K,
        i_tot=i_tot,
        i_Stim=i_Stim,
    )


@jax.jit
def computeStateRates(
    constants: Constants, states: States, algebraic: Algebraic
) -> Rates:
    """Time derivatives of (V, m, h) given already evaluated algebraic variables."""
    dm_dt = computeGateRate(algebraic.m_inf, states.m, constants.tau_m)
    dh_dt = computeGateRate(algebraic.h_inf, states.h, algebraic.tau_h)
    dV_dt = -algebraic.i_tot / constants.C_m - algebraic.i_Stim
    return Rates(dV_dt=dV_dt, dm_dt=dm_dt, dh_dt=dh_dt)


def computeRates(
    time: float, constants: Constants, states: States
) -> tuple[Rates, Algebraic]:
    """
    Right-hand side of the cell ODE system at the given time and state.

    Returns the rates together with the algebraic variables evaluated on the
    way, so integrators that also need currents do not evaluate them twice.
    """
    algebraic = computeAlgebraic(time, constants, states)
    rates = computeStateRates(constants, states, algebraic)
    return rates, algebraic


def computeVariables(time: float, constants: Constants, states: States) -> Algebraic:
    """
    Algebraic variables at an already advanced state, without computing rates.

    Shares the compiled kernel with computeRates, so both return identical
    values for identical inputs.
    """
    return computeAlgebraic(time, constants, states)
