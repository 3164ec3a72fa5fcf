import math
import pytest
import jax.numpy as jnp
import numpy as np

from gp_cellmodel.core.data_structures import Constants
from gp_cellmodel.core.gating_functions import (
    computeSteadyStateGate,
    computeSteadyStateGates,
    computeTauH,
    computeGateRate,
)


def test_computeSteadyStateGate_half_point_and_limits():
    assert float(computeSteadyStateGate(-41.0, -41.0, -4.0)) == 0.5
    # Negative slope: activation gate opens with depolarization
    assert float(computeSteadyStateGate(40.0, -41.0, -4.0)) == pytest.approx(1.0)
    assert float(computeSteadyStateGate(-120.0, -41.0, -4.0)) == pytest.approx(
        0.0, abs=1e-8
    )
    # Positive slope: inactivation gate closes with depolarization
    assert float(computeSteadyStateGate(40.0, -74.7, 4.4)) == pytest.approx(
        0.0, abs=1e-8
    )
    assert float(computeSteadyStateGate(-120.0, -74.7, 4.4)) == pytest.approx(
        1.0 / (1.0 + math.exp(-45.3 / 4.4)), rel=1e-12
    )
    assert float(computeSteadyStateGate(-200.0, -74.7, 4.4)) == pytest.approx(1.0)


def test_computeSteadyStateGates_monotonic_over_voltage():
    constants = Constants()
    V = jnp.linspace(-120.0, 60.0, 181)
    m_inf, h_inf = computeSteadyStateGates(V, constants)

    assert m_inf.shape == V.shape
    assert jnp.all(jnp.diff(m_inf) >= 0)
    assert jnp.all(jnp.diff(h_inf) <= 0)
    assert jnp.all((m_inf >= 0) & (m_inf <= 1))
    assert jnp.all((h_inf >= 0) & (h_inf <= 1))


def test_computeTauH_equals_base_at_half_potential():
    constants = Constants()
    assert float(computeTauH(constants.E_h, constants)) == pytest.approx(
        constants.tau_ho, rel=1e-14
    )


def test_computeTauH_closed_form_and_positive():
    constants = Constants()
    for V in [-100.0, -83.0, -60.0, -20.0, 30.0]:
        x = (V - constants.E_h) / constants.k_h
        expected = (
            2.0 * constants.tau_ho * math.exp(constants.delta_h * x) / (1.0 + math.exp(x))
        )
        assert float(computeTauH(V, constants)) == pytest.approx(expected, rel=1e-12)

    tau = computeTauH(jnp.linspace(-150.0, 80.0, 231), constants)
    assert jnp.all(tau > 0)


def test_computeTauH_skew_controls_asymmetry():
    symmetric = Constants(delta_h=0.5)
    offsets = np.array([2.0, 5.0, 10.0])
    above = computeTauH(symmetric.E_h + offsets, symmetric)
    below = computeTauH(symmetric.E_h - offsets, symmetric)
    np.testing.assert_allclose(above, below, rtol=1e-12)

    skewed = Constants()
    above = computeTauH(skewed.E_h + offsets, skewed)
    below = computeTauH(skewed.E_h - offsets, skewed)
    assert jnp.all(above > below)


def test_computeGateRate_relaxation():
    assert float(computeGateRate(0.8, 0.2, 2.0)) == pytest.approx(0.3)
    assert float(computeGateRate(0.5, 0.5, 0.12)) == 0.0
    assert float(computeGateRate(0.1, 0.6, 0.5)) == pytest.approx(-1.0)


if __name__ == "__main__":
    pytest.main([__file__])
