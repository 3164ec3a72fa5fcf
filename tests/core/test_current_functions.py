import math
import pytest
import jax.numpy as jnp
import numpy as np

from gp_cellmodel.core.data_structures import Constants
from gp_cellmodel.core.current_functions import (
    computeSodiumCurrent,
    computePotassiumCurrent,
    isStimulusActive,
    computeStimulusCurrent,
)


def test_computeSodiumCurrent_formula_and_reversal():
    constants = Constants()
    V, m, h = -20.0, 0.7, 0.4
    expected = 0.11 * m**3 * h * (V - 65.0)
    assert float(computeSodiumCurrent(V, m, h, constants)) == pytest.approx(
        expected, rel=1e-13
    )
    # Inward (negative) below E_Na, zero at E_Na
    assert float(computeSodiumCurrent(V, m, h, constants)) < 0
    assert float(computeSodiumCurrent(65.0, m, h, constants)) == 0.0
    assert float(computeSodiumCurrent(V, 0.0, h, constants)) == 0.0


def test_computePotassiumCurrent_formula_and_reversal():
    constants = Constants()
    V = -40.0
    expected = 0.003 * (V + 83.0) * math.exp(-(V + 83.0) / 21.28)
    assert float(computePotassiumCurrent(V, constants)) == pytest.approx(
        expected, rel=1e-13
    )
    assert float(computePotassiumCurrent(-83.0, constants)) == 0.0
    # Outward above E_K, inward below
    assert float(computePotassiumCurrent(-40.0, constants)) > 0
    assert float(computePotassiumCurrent(-100.0, constants)) < 0


@pytest.mark.parametrize(
    "time",
    [10.0, 10.5, 11.0, 1010.0, 1011.0, 2010.7, -990.0, -989.5, -1990.0, 1000010.5],
)
def test_stimulus_on_inside_window(time):
    constants = Constants()
    assert bool(isStimulusActive(time, constants))
    assert float(computeStimulusCurrent(time, constants)) == -80.0


@pytest.mark.parametrize(
    "time",
    [0.0, 9.999, 11.001, 500.0, 999.99, 1000.0, -5.0, -985.0, -1000.0, 1e6],
)
def test_stimulus_off_outside_window(time):
    constants = Constants()
    assert not bool(isStimulusActive(time, constants))
    assert float(computeStimulusCurrent(time, constants)) == 0.0


def test_computeStimulusCurrent_vectorized_over_time():
    constants = Constants()
    times = jnp.arange(-3000.0, 3000.0, 0.25)
    i_Stim = computeStimulusCurrent(times, constants)

    phase = np.mod(np.asarray(times), 1000.0)
    expected = np.where((phase >= 10.0) & (phase <= 11.0), -80.0, 0.0)
    np.testing.assert_array_equal(np.asarray(i_Stim), expected)
    # Five samples per window (inclusive bounds) in each of six periods
    assert int(jnp.sum(i_Stim != 0)) == 6 * 5


def test_stimulus_protocol_is_configurable():
    constants = Constants(
        stim_start=0.0, stim_period=500.0, stim_duration=2.0, stim_amplitude=40.0
    )
    assert float(computeStimulusCurrent(501.5, constants)) == -40.0
    assert float(computeStimulusCurrent(503.0, constants)) == 0.0


if __name__ == "__main__":
    pytest.main([__file__])
