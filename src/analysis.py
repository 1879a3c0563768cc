# analysis.py
# -*- coding: utf-8 -*-
"""
Created on Wed Jun 18 09:34:16 2025

@author: Cormac Molyneaux
"""
# analysis.py
import numpy as np
import matplotlib.pyplot as plt
import pickle
from data_generator import generate_pristine_data, generate_closed_form_data, generate_stepped_data
from spring_system import SpringSystem
from multiprocessing import Pool, cpu_count

# The m, c, k combinations for each damping case
DAMPING_CASES = {
    'ud': {'m': 1.0, 'c': 2.0, 'k': 9.0}, # Under-damped
    'cd': {'m': 1.0, 'c': 6.0, 'k': 9.0}, # Critically-damped
    'od': {'m': 2.0, 'c': 6.0, 'k': 2.0}  # Over-damped
}

def build_damping_case(case_name: str, sim_config: dict):
    if case_name not in DAMPING_CASES:
        raise ValueError(f"Unknown damping case: {case_name}. Choose one of {list(DAMPING_CASES)}.")
    params = DAMPING_CASES[case_name]
    return SpringSystem.from_params(params['m'], params['c'], params['k'],
                                    target=sim_config['target'],
                                    initial_velocity=sim_config['initial_velocity'],
                                    allow_over_damping=True)

def run_single_case(args):
    """
    Worker function comparing the closed-form, stepped and integrated motion of one spring.
    Takes a tuple of arguments to be compatible with multiprocessing.Pool.
    """
    # 1. Unpack arguments
    case_name, spring_system, sim_config = args
    num_steps, time_increment = sim_config['num_steps'], sim_config['time_increment']

    # 2. Generate the three trajectories
    x_pristine, v_pristine, a_pristine, f_pristine, time_points = \
        generate_pristine_data(spring_system, num_steps, time_increment)
    x_closed, v_closed, a_closed, f_closed, _ = \
        generate_closed_form_data(spring_system, num_steps, time_increment)
    x_stepped, v_stepped, _, _, _ = \
        generate_stepped_data(spring_system, num_steps, time_increment)

    if np.any(np.isnan(x_closed)) or np.any(np.isnan(v_closed)):
        return None # Return None for failed runs

    # 3. Errors against the numerical reference and between closed form and stepping
    spring = spring_system.spring
    return {
        'case_name': case_name,
        'spring': spring,
        'stiffness': spring.stiffness, 'damping': spring.damping, 'mass': spring.mass,
        'duration': spring.duration, 'bounce': spring.bounce,
        'response': spring.response, 'damping_ratio': spring.damping_ratio,
        'settling_duration': spring.settling_duration_with_velocity(
            spring_system.target, spring_system.initial_velocity),
        'x_error': np.max(np.abs(x_closed - x_pristine)),
        'v_error': np.max(np.abs(v_closed - v_pristine)),
        'a_error': np.max(np.abs(a_closed - a_pristine)),
        'step_x_error': np.max(np.abs(x_stepped - x_closed)),
        'step_v_error': np.max(np.abs(v_stepped - v_closed)),
        'x_pristine': x_pristine, 'v_pristine': v_pristine, 'f_pristine': f_pristine,
        'x_closed': x_closed, 'v_closed': v_closed, 'f_closed': f_closed,
        'x_stepped': x_stepped, 'v_stepped': v_stepped,
        'time_points': time_points,
    }

def run_damping_sweep(sim_config: dict, sweep_config: dict, extra_systems=None):
    """
    Runs every damping case in sweep_config['cases'] (plus any extra named
    SpringSystems) and collects the per-case results keyed by case name.
    """
    systems = [(name, build_damping_case(name, sim_config)) for name in sweep_config['cases']]
    if extra_systems:
        systems.extend(extra_systems.items())

    args_for_pool = [(name, system, sim_config) for name, system in systems]

    if sweep_config.get('parallel', False):
        num_processes = min(cpu_count(), len(args_for_pool))
        print(f"Running {len(args_for_pool)} spring cases in parallel on {num_processes} cores...")
        with Pool(processes=num_processes) as pool:
            case_results = pool.map(run_single_case, args_for_pool)
    else:
        case_results = [run_single_case(args) for args in args_for_pool]

    # Filter out any failed runs (which we returned as None)
    valid_results = [res for res in case_results if res is not None]

    if not valid_results:
        raise RuntimeError("All spring cases failed. Check the spring parameters.")

    print(f"Completed {len(valid_results)}/{len(args_for_pool)} successful cases.")

    results = {res['case_name']: res for res in valid_results}

    if sim_config.get('save_results', False):
        output_filename = sim_config['file_name']
        try:
            with open(output_filename, 'wb') as f:
                pickle.dump(results, f)
            print(f"Results successfully saved to {output_filename}")
        except Exception as e:
            print(f"Error saving results: {e}")

    return results

def summarize_results(results: dict, tolerance: float = 1e-6):
    print("\n--- Spring Validation Summary ---")
    print(f"Number of Cases: {len(results)}")

    failures = []
    for case_name, res in results.items():
        print(f"\nCase: {case_name}")
        print(f"  Parameters: m={res['mass']:.4f}, c={res['damping']:.4f}, k={res['stiffness']:.4f}")
        print(f"  Duration: {res['duration']:.4f}, Bounce: {res['bounce']:.4f}")
        print(f"  Response: {res['response']:.4f}, Damping Ratio: {res['damping_ratio']:.4f}")
        print(f"  Settling Duration: {res['settling_duration']:.4f} s")
        print(f"  Max |x_closed - x_odeint|: {res['x_error']:.3e}")
        print(f"  Max |v_closed - v_odeint|: {res['v_error']:.3e}")
        print(f"  Max |x_stepped - x_closed|: {res['step_x_error']:.3e}")
        print(f"  Max |v_stepped - v_closed|: {res['step_v_error']:.3e}")

        scale = max(1.0, np.max(np.abs(res['x_pristine'])), np.max(np.abs(res['v_pristine'])))
        worst = max(res['x_error'], res['v_error'], res['step_x_error'], res['step_v_error'])
        if worst > tolerance * scale:
            failures.append(case_name)

    if failures:
        print(f"\nWarning: cases exceeding tolerance {tolerance:.1e}: {', '.join(failures)}")
    else:
        print(f"\nAll cases agree within tolerance {tolerance:.1e}.")
    return failures

def plot_time_series(res: dict, show=True, filename=None):
    fig, axes = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
    fig.suptitle(f"Spring case {res['case_name']}: m={res['mass']:.2f}, c={res['damping']:.2f}, "
                 f"k={res['stiffness']:.2f}, bounce={res['bounce']:.2f}")

    time_points = res['time_points']
    axes[0].plot(time_points, res['x_pristine'], 'k-', label='odeint', linewidth=2, zorder=1)
    axes[0].plot(time_points, res['x_closed'], 'b--', label='Closed form', linewidth=2, zorder=2)
    axes[0].plot(time_points, res['x_stepped'], 'r.', label='Stepped', markersize=3, zorder=3)
    axes[0].axvline(res['settling_duration'], color='g', linestyle='--', label='Settling duration')
    axes[0].set_ylabel('Position')
    axes[0].legend()
    axes[0].grid(True, linestyle='--', alpha=0.6)

    axes[1].plot(time_points, res['v_pristine'], 'k-', label='odeint', linewidth=2, zorder=1)
    axes[1].plot(time_points, res['v_closed'], 'b--', label='Closed form', linewidth=2, zorder=2)
    axes[1].plot(time_points, res['v_stepped'], 'r.', label='Stepped', markersize=3, zorder=3)
    axes[1].set_ylabel('Velocity')
    axes[1].set_xlabel('Time (s)')
    axes[1].legend()
    axes[1].grid(True, linestyle='--', alpha=0.6)

    plt.tight_layout(rect=[0, 0, 1, 0.96])
    if filename is not None:
        plt.savefig(filename)
    if show:
        plt.show()
    plt.close(fig)

def plot_errors(results: dict, show=True, filename=None):
    case_names = list(results)
    metrics = ['x_error', 'v_error', 'step_x_error', 'step_v_error']
    width = 0.2
    positions = np.arange(len(case_names))

    fig = plt.figure(figsize=(12, 6))
    for i, metric in enumerate(metrics):
        # Floor at machine epsilon so exact agreement still shows on a log axis
        values = [max(results[name][metric], np.finfo(float).eps) for name in case_names]
        plt.bar(positions + i * width, values, width, label=metric)
    plt.yscale('log')
    plt.xticks(positions + 1.5 * width, case_names)
    plt.title('Maximum Absolute Error per Case')
    plt.ylabel('Max Absolute Error')
    plt.grid(True, axis='y')
    plt.legend()
    plt.tight_layout()
    if filename is not None:
        plt.savefig(filename)
    if show:
        plt.show()
    plt.close(fig)
