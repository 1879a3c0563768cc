import copy
import os

import numpy as np
import pytest

import config
import main
from analysis import (DAMPING_CASES, build_damping_case, run_single_case, run_damping_sweep,
                      summarize_results, plot_time_series, plot_errors)
from data_analysis import load_pickle_file, generate_individual_plots
from spring import Spring
from spring_system import SpringSystem


@pytest.fixture
def sim_config():
    params = copy.deepcopy(config.SIMULATION_PARAMS)
    params['num_steps'] = 60
    params['show_plots'] = False
    return params


@pytest.fixture
def isolated_config(monkeypatch):
    """Gives each test its own copy of the config dictionaries."""
    for name in ['SPRING_PARAMS', 'SIMULATION_PARAMS', 'SWEEP_CONFIG']:
        monkeypatch.setattr(config, name, copy.deepcopy(getattr(config, name)))
    return config


def test_build_damping_case_regimes(sim_config):
    assert build_damping_case('ud', sim_config).spring.angular_frequency > 0
    assert build_damping_case('cd', sim_config).spring.angular_frequency == 0
    assert build_damping_case('od', sim_config).spring.angular_frequency < 0
    with pytest.raises(ValueError):
        build_damping_case('xx', sim_config)


def test_run_single_case(sim_config):
    res = run_single_case(('ud', build_damping_case('ud', sim_config), sim_config))
    assert res['case_name'] == 'ud'
    assert np.isclose(res['stiffness'], DAMPING_CASES['ud']['k'])
    assert np.isclose(res['damping'], DAMPING_CASES['ud']['c'])
    assert res['x_error'] < 1e-7
    assert res['step_x_error'] < 1e-10
    assert len(res['time_points']) == sim_config['num_steps']


def test_sweep_saves_and_summarizes(sim_config, tmp_path):
    sim_config['save_results'] = True
    sim_config['file_name'] = str(tmp_path / 'sweep.pkl')
    sweep_config = {'cases': ['ud', 'cd', 'od'], 'parallel': False, 'tolerance': 1e-6}
    extra = {'snappy': SpringSystem(Spring.snappy(), sim_config['target'], sim_config['initial_velocity'])}

    results = run_damping_sweep(sim_config, sweep_config, extra_systems=extra)

    assert set(results) == {'ud', 'cd', 'od', 'snappy'}
    assert summarize_results(results, sweep_config['tolerance']) == []
    loaded = load_pickle_file(sim_config['file_name'])
    assert set(loaded) == set(results)
    assert loaded['snappy']['spring'] == Spring.snappy()


def test_parallel_sweep_matches_serial(sim_config):
    serial = run_damping_sweep(sim_config, {'cases': ['ud', 'od'], 'parallel': False})
    parallel = run_damping_sweep(sim_config, {'cases': ['ud', 'od'], 'parallel': True})
    for name in serial:
        assert np.array_equal(serial[name]['x_closed'], parallel[name]['x_closed'])


def test_summarize_flags_large_errors(sim_config):
    results = run_damping_sweep(sim_config, {'cases': ['cd']})
    results['cd']['x_error'] = 1.0
    assert summarize_results(results, 1e-6) == ['cd']


def test_plots_are_written(sim_config, tmp_path):
    results = run_damping_sweep(sim_config, {'cases': ['ud', 'cd']})
    plot_time_series(results['ud'], show=False, filename=str(tmp_path / 'ud.png'))
    plot_errors(results, show=False, filename=str(tmp_path / 'errors.png'))
    assert os.path.exists(tmp_path / 'ud.png')
    assert os.path.exists(tmp_path / 'errors.png')


def test_generate_individual_plots(sim_config, tmp_path):
    sim_config['save_results'] = True
    sim_config['file_name'] = str(tmp_path / 'run.pkl')
    run_damping_sweep(sim_config, {'cases': ['ud', 'od']})

    saved = generate_individual_plots(directory=str(tmp_path), output_dir=str(tmp_path / 'plots'))

    assert len(saved) == 3
    assert all(os.path.exists(path) for path in saved)
    assert generate_individual_plots(directory=str(tmp_path / 'plots'),
                                     output_dir=str(tmp_path / 'plots')) == []


def test_load_missing_pickle_returns_none(tmp_path):
    assert load_pickle_file(str(tmp_path / 'missing.pkl')) is None


@pytest.mark.parametrize("parameterization", [
    'duration_bounce', 'response_damping_ratio', 'mass_stiffness_damping',
    'settling_duration_damping_ratio', 'smooth', 'snappy', 'bouncy'])
def test_build_spring_from_config(isolated_config, parameterization):
    isolated_config.SPRING_PARAMS['parameterization'] = parameterization
    spring = main.build_spring(isolated_config.SPRING_PARAMS)
    assert isinstance(spring, Spring)
    assert np.isfinite(spring.decay_constant)


def test_build_spring_unknown_parameterization():
    with pytest.raises(ValueError):
        main.build_spring({'parameterization': 'wobbly'})


def test_command_line_overrides(isolated_config):
    main.apply_overrides(main.parse_overrides(
        ['--parameterization', 'mass_stiffness_damping', '--m', '2', '--k', '50', '--c', '4',
         '--num_steps', '30', '--no_plots']))

    assert main.build_spring(isolated_config.SPRING_PARAMS) == \
        Spring.from_mass_stiffness_damping(2.0, 50.0, 4.0)
    assert isolated_config.SIMULATION_PARAMS['num_steps'] == 30
    assert isolated_config.SIMULATION_PARAMS['show_plots'] is False
    assert isolated_config.SIMULATION_PARAMS['save_results'] is False


def test_main_runs_configured_spring(isolated_config, tmp_path):
    results, failures = main.main(['--parameterization', 'bouncy', '--num_steps', '60',
                                   '--file_name', str(tmp_path / 'main.pkl'), '--no_plots'])

    assert set(results) == {'ud', 'cd', 'od', 'configured'}
    assert results['configured']['spring'] == Spring.bouncy()
    assert failures == []
    assert os.path.exists(tmp_path / 'main.pkl')
