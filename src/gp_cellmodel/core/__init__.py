"""Core numerical routines."""

import jax

# Cell model quantities are IEEE doubles throughout
jax.config.update("jax_enable_x64", True)

from .cell_model import (  # noqa: E402
    initConsts,
    initStates,
    computeRates,
    computeVariables,
)

__all__ = ["initConsts", "initStates", "computeRates", "computeVariables"]
