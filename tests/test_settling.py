import numpy as np

from settling import (MAX_EXPONENT, lower_branch_lambertw, solve_log_linear,
                      linear_envelope_crossing, natural_frequency_for_settling)


def test_lower_branch_lambertw():
    assert np.isclose(lower_branch_lambertw(-1 / np.e), -1.0, atol=1e-6)
    w = lower_branch_lambertw(-0.1)
    assert w < -1
    assert np.isclose(w * np.exp(w), -0.1)
    assert np.isnan(lower_branch_lambertw(-1.0))


def test_solve_log_linear():
    for c in [1.5, 5.0, 40.0]:
        y = solve_log_linear(c)
        assert y >= 1
        assert np.isclose(y - np.log(y), c)


def test_solve_log_linear_is_continuous_at_series_switch():
    below = solve_log_linear(MAX_EXPONENT - 1e-9)
    above = solve_log_linear(MAX_EXPONENT)
    assert np.isclose(below, above, rtol=1e-7)
    y = solve_log_linear(1e6)
    assert np.isclose(y - np.log(y), 1e6)


def test_linear_envelope_crossing():
    a, b, rate, epsilon = 1.0, 12.0, 6.0, 0.001
    t = linear_envelope_crossing(a, b, rate, epsilon)
    assert np.isclose((a + b * t) * np.exp(-rate * t), epsilon)
    later = np.linspace(t, t + 3, 50)
    assert np.all((a + b * later) * np.exp(-rate * later) <= epsilon * (1 + 1e-9))


def test_linear_envelope_crossing_edge_cases():
    assert linear_envelope_crossing(1.0, 1.0, 0.0, 0.001) == np.inf
    assert np.isnan(linear_envelope_crossing(1.0, 1.0, np.nan, 0.001))
    assert np.isclose(linear_envelope_crossing(1.0, 0.0, 2.0, 0.001), np.log(1000) / 2)
    # Already inside the threshold
    assert linear_envelope_crossing(0.0001, 0.0001, 5.0, 0.001) == 0.0


def test_natural_frequency_for_settling():
    root = natural_frequency_for_settling(2.0, 0.3, 0.01)
    envelope = 0.3 / np.sqrt(1 - 0.09) * np.exp(-0.3 * root * 2.0)
    assert np.isclose(envelope, 0.01)

    root = natural_frequency_for_settling(0.5, 1.0, 0.001)
    assert np.isclose((1 + root * 0.5) * np.exp(-root * 0.5), 0.001)

    assert np.isnan(natural_frequency_for_settling(1.0, 1e-9, 0.001))


def test_branch_point_is_exact():
    assert lower_branch_lambertw(-np.exp(-1.0)) == -1.0
    assert np.isclose(solve_log_linear(1.0), 1.0)
    assert np.isclose(solve_log_linear(1.0 + 1e-15), 1.0, atol=1e-6)


def test_linear_envelope_crossing_keeps_nan():
    assert np.isnan(linear_envelope_crossing(np.nan, 0.0, 2.0, 0.001))
    assert np.isnan(linear_envelope_crossing(np.nan, 1.0, 2.0, 0.001))
    assert np.isnan(linear_envelope_crossing(1.0, np.nan, 2.0, 0.001))
