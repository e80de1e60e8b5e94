# tests/test_integrator.py

import math

import numpy as np
import pytest
from odecompare.integrator import (
    EulerState,
    IntegrationParameters,
    MidpointState,
    ResultSeries,
    integrate,
)
from odecompare.systems_library import GrowthSystem


def growth(x, y):
    return 2.0 * y


@pytest.fixture
def default_params():
    """The inputs suggested for the interactive program."""
    return IntegrationParameters(x0=0.1, y0=0.1, step_length=0.1, step_count=10)


@pytest.mark.parametrize("n", [1, 2, 10, 57])
def test_all_series_have_step_count_entries(n):
    series = integrate(IntegrationParameters(0.0, 1.0, 0.05, n), growth)
    assert len(series) == n
    for name in ResultSeries.columns:
        assert len(getattr(series, name)) == n


def test_zero_steps_gives_empty_series():
    series = integrate(IntegrationParameters(0.0, 1.0, 0.1, 0), growth)
    assert len(series) == 0
    for name in ResultSeries.columns:
        assert getattr(series, name).shape == (0,)


def test_integration_is_deterministic(default_params):
    first = integrate(default_params, growth)
    second = integrate(default_params, growth)
    for name in ResultSeries.columns:
        assert np.array_equal(getattr(first, name), getattr(second, name))


def test_exact_series_follows_constant_of_integration(default_params):
    series = integrate(default_params, growth)
    constant = default_params.y0 / math.exp(2 * default_params.x0)
    expected = constant * np.exp(2 * series.x)
    assert np.allclose(series.exact, expected, rtol=1e-9, atol=0)


def test_x_advances_by_step_length(default_params):
    series = integrate(default_params, growth)
    expected = default_params.x0 + default_params.step_length * np.arange(1, default_params.step_count + 1)
    assert np.allclose(series.x, expected)


def test_single_step_known_values():
    """x0=0, y0=1, h=0.1: Euler gives 1 + 0.1*2*1, the exact value is e^0.2."""
    series = integrate(IntegrationParameters(x0=0.0, y0=1.0, step_length=0.1, step_count=1), growth)
    assert series.x[0] == pytest.approx(0.1)
    assert series.euler[0] == pytest.approx(1.2)
    # Probe y = 1 + 0.05*2 = 1.1, so y = 1 + 0.1*2.2
    assert series.midpoint[0] == pytest.approx(1.22)
    assert series.exact[0] == pytest.approx(1.2214027582, abs=1e-10)


def test_default_exact_matches_growth_system(default_params):
    system = GrowthSystem(x0=default_params.x0, y0=default_params.y0)
    implicit = integrate(default_params, growth)
    explicit = integrate(default_params, system.get_derivative, exact=system.solve_analytical)
    assert np.array_equal(implicit.exact, explicit.exact)
    assert np.array_equal(implicit.euler, explicit.euler)


def test_derivative_is_pluggable():
    """y' = 2y - 4x from y(0) = 2 has the solution y = 2x + 1 + e^(2x)."""
    def f(x, y):
        return 2 * y - 4 * x

    def exact(x):
        return 2 * x + 1 + math.exp(2 * x)

    series = integrate(IntegrationParameters(0.0, 2.0, 0.5, 1), f, exact=exact)
    assert series.euler[0] == pytest.approx(4.0)
    assert series.midpoint[0] == pytest.approx(4.5)
    assert series.exact[0] == pytest.approx(2 + math.e)


def test_derivative_uses_pre_step_x():
    """With y' = x, Euler samples the slope at the start of each interval."""
    series = integrate(IntegrationParameters(0.0, 0.0, 1.0, 2), lambda x, y: x, exact=lambda x: x * x / 2)
    assert list(series.euler) == pytest.approx([0.0, 1.0])
    # The midpoint rule is exact for a slope linear in x.
    assert list(series.midpoint) == pytest.approx([0.5, 2.0])
    assert np.allclose(series.midpoint, series.exact)


def test_midpoint_converges_faster_than_euler():
    n = 10
    euler_errors, midpoint_errors = [], []
    for h in (0.1, 0.01, 0.001):
        series = integrate(IntegrationParameters(0.0, 1.0, h, n), growth)
        errors = series.errors()
        euler_errors.append(errors['euler'][-1])
        midpoint_errors.append(errors['midpoint'][-1])

    assert all(m < e for m, e in zip(midpoint_errors, euler_errors))

    # Shrinking h tenfold over a fixed number of steps: Euler error drops ~100x, midpoint ~1000x.
    euler_ratio = euler_errors[1] / euler_errors[2]
    midpoint_ratio = midpoint_errors[1] / midpoint_errors[2]
    assert 50 < euler_ratio < 200
    assert midpoint_ratio > 500


def test_non_finite_input_propagates():
    series = integrate(IntegrationParameters(0.0, float('nan'), 0.1, 3), growth)
    assert len(series) == 3
    assert np.all(np.isnan(series.euler))
    assert np.all(np.isnan(series.midpoint))
    assert np.all(np.isnan(series.exact))

    series = integrate(IntegrationParameters(float('nan'), 1.0, 0.1, 2), growth)
    assert np.all(np.isnan(series.x))
    assert np.all(np.isnan(series.exact))


def test_negative_step_length_integrates_backwards():
    series = integrate(IntegrationParameters(1.0, 1.0, -0.1, 3), growth)
    assert np.allclose(series.x, [0.9, 0.8, 0.7])
    assert np.all(np.diff(series.euler) < 0)


def test_finalized_series_is_read_only(default_params):
    series = integrate(default_params, growth)
    with pytest.raises(ValueError):
        series.euler[0] = 0.0
    with pytest.raises(RuntimeError):
        series.append(1.0, 1.0, 1.0, 1.0)


def test_to_frame_and_errors(default_params):
    series = integrate(default_params, growth)
    df = series.to_frame()
    assert list(df.columns) == ['x', 'euler', 'midpoint', 'exact']
    assert len(df) == default_params.step_count
    errors = series.errors()
    assert np.allclose(errors['euler'], np.abs(df['euler'] - df['exact']))
    assert np.all(errors['midpoint'] < errors['euler'])


def test_state_steps():
    euler = EulerState(0.0, 1.0)
    euler.step(growth, 0.5)
    assert (euler.x, euler.y) == pytest.approx((0.5, 2.0))

    midpoint = MidpointState(0.0, 1.0)
    midpoint.step(growth, 0.5)
    # Probe 1 + 0.25*2 = 1.5, then 1 + 0.5*3
    assert (midpoint.x, midpoint.y) == pytest.approx((0.5, 2.5))


@pytest.mark.parametrize("kwargs", [
    dict(step_count=-1),
    dict(step_count=2.5),
    dict(step_count=True),
    dict(step_length=0.0),
])
def test_invalid_parameters_rejected(kwargs):
    values = dict(x0=0.0, y0=1.0, step_length=0.1, step_count=5)
    values.update(kwargs)
    with pytest.raises(ValueError):
        IntegrationParameters(**values)
