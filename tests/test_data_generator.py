import numpy as np
import pytest

from spring import Spring
from spring_system import SpringSystem
from data_generator import (get_time_points, generate_pristine_data, generate_closed_form_data,
                            generate_stepped_data)

NUM_STEPS = 90
TIME_INCREMENT = 1 / 60


@pytest.fixture(params=[(1.0, 2.0, 9.0), (1.0, 6.0, 9.0), (2.0, 6.0, 2.0), (0.5, 0.3, 40.0)],
                ids=['ud', 'cd', 'od', 'light'])
def spring_system(request):
    m, c, k = request.param
    return SpringSystem.from_params(m, c, k, target=1.0, initial_velocity=0.5)


def test_time_points():
    t = get_time_points(5, 0.25)
    assert np.array_equal(t, np.array([0.0, 0.25, 0.5, 0.75, 1.0]))


def test_closed_form_matches_odeint(spring_system):
    x_p, v_p, a_p, f_p, t_p = generate_pristine_data(spring_system, NUM_STEPS, TIME_INCREMENT)
    x_c, v_c, a_c, f_c, t_c = generate_closed_form_data(spring_system, NUM_STEPS, TIME_INCREMENT)

    assert np.array_equal(t_p, t_c)
    assert np.allclose(x_c, x_p, atol=1e-7)
    assert np.allclose(v_c, v_p, atol=1e-7)
    assert np.allclose(a_c, a_p, atol=1e-6)
    assert np.allclose(f_c, f_p, atol=1e-6)


def test_stepped_matches_closed_form(spring_system):
    x_c, v_c, _, f_c, _ = generate_closed_form_data(spring_system, NUM_STEPS, TIME_INCREMENT)
    x_s, v_s, _, f_s, _ = generate_stepped_data(spring_system, NUM_STEPS, TIME_INCREMENT)

    assert x_s[0] == 0.0
    assert v_s[0] == spring_system.initial_velocity
    assert np.allclose(x_s, x_c, atol=1e-10)
    assert np.allclose(v_s, v_c, atol=1e-10)
    assert np.allclose(f_s, f_c, atol=1e-8)


def test_spring_system_coefficients():
    system = SpringSystem(Spring.from_mass_stiffness_damping(2.0, 50.0, 4.0), target=3.0)
    assert np.isclose(system.m, 2.0)
    assert np.isclose(system.c, 4.0)
    assert np.isclose(system.k, 50.0)
    assert system.get_acceleration(3.0, 0.0, 0.0) == 0.0
    dxdt, dvdt = system.get_continuous_dynamics([1.0, 2.0], 0.0)
    assert dxdt == 2.0
    assert np.isclose(dvdt, (-4.0 * 2.0 - 50.0 * (1.0 - 3.0)) / 2.0)
    assert "SpringSystem" in repr(system)


def test_spring_system_defaults_to_default_spring():
    assert SpringSystem().spring == Spring()


def test_spring_system_rejects_invalid_springs():
    with pytest.raises(ValueError):
        SpringSystem(Spring.from_mass_stiffness_damping(0.0, 50.0, 0.4))
    with pytest.raises(ValueError):
        SpringSystem(Spring.from_duration_bounce(0.7, -1.2))


def test_spring_system_warns_on_negative_damping(capsys):
    SpringSystem(Spring.from_response_damping_ratio(1.3, -0.1))
    assert "Warning" in capsys.readouterr().out
