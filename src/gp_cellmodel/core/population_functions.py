from functools import partial
from typing import Optional
import jax
import jax.numpy as jnp
from .data_structures import Constants, States, Rates, Algebraic
from .cell_model import initStates, computeAlgebraic, computeStateRates, V_INIT


def initPopulation(
    num_cells: int, constants: Optional[Constants] = None, V_init: float = V_INIT
) -> tuple[Constants, States]:
    """
    Initialize a batch of independent cells sharing one parameter set.

    Every field of the returned States has shape (num_cells,). The cells are
    not coupled; each one evolves exactly as a single cell would.
    """
    if constants is None:
        constants = Constants()
    single = initStates(constants, V_init)
    states = States(*(jnp.full((num_cells,), value) for value in single))
    return constants, states


@jax.jit
def computeRatesPopulation(
    time: float, constants: Constants, states: States
) -> tuple[Rates, Algebraic]:
    """
    Vectorized computeRates over a batch of cells.

    Constants and time are shared; states carry a leading cell axis.
    """

    def stepCell(cell_states):
        algebraic = computeAlgebraic(time, constants, cell_states)
        return computeStateRates(constants, cell_states, algebraic), algebraic

    return jax.vmap(stepCell)(states)


@jax.jit
def computeVariablesPopulation(
    time: float, constants: Constants, states: States
) -> Algebraic:
    """Vectorized computeVariables over a batch of cells."""
    vcomputeAlgebraic = jax.vmap(partial(computeAlgebraic, time, constants))
    return vcomputeAlgebraic(states)
