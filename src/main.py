# main.py
# -*- coding: utf-8 -*-
"""
Created on Wed Jun 18 09:34:17 2025

@author: Cormac Molyneaux
"""
# main.py
from spring import Spring
from spring_system import SpringSystem
from analysis import run_damping_sweep, summarize_results, plot_time_series, plot_errors
import config
import argparse

PRESETS = {
    'smooth': Spring.smooth,
    'snappy': Spring.snappy,
    'bouncy': Spring.bouncy,
}

def build_spring(spring_params: dict):
    """Creates the Spring described by a SPRING_PARAMS style dictionary."""
    parameterization = spring_params.get('parameterization')

    if parameterization == 'duration_bounce':
        p = spring_params['duration_bounce']
        return Spring.from_duration_bounce(p['duration'], p['bounce'])
    elif parameterization == 'response_damping_ratio':
        p = spring_params['response_damping_ratio']
        return Spring.from_response_damping_ratio(p['response'], p['damping_ratio'])
    elif parameterization == 'mass_stiffness_damping':
        p = spring_params['mass_stiffness_damping']
        return Spring.from_mass_stiffness_damping(p['mass'], p['stiffness'], p['damping'],
                                                  allow_over_damping=p.get('allow_over_damping', False))
    elif parameterization == 'settling_duration_damping_ratio':
        p = spring_params['settling_duration_damping_ratio']
        return Spring.from_settling_duration_damping_ratio(p['settling_duration'], p['damping_ratio'],
                                                           epsilon=p.get('epsilon', 0.001))
    elif parameterization in PRESETS:
        p = spring_params.get('preset', {})
        return PRESETS[parameterization](duration=p.get('duration', 0.5),
                                         extra_bounce=p.get('extra_bounce', 0.0))
    else:
        raise ValueError(f"Unknown parameterization: {parameterization}")

def parse_overrides(argv=None):
    parser = argparse.ArgumentParser(description="Validate closed-form spring motion against numerical integration.")

    # Arguments for SPRING_PARAMS
    parser.add_argument('--parameterization', type=str,
                        help='How the spring is specified (e.g., duration_bounce, mass_stiffness_damping, snappy). Overrides config.SPRING_PARAMS["parameterization"]')
    parser.add_argument('--duration', type=float, help='Perceptual duration (duration_bounce and presets)')
    parser.add_argument('--bounce', type=float, help='Bounce (duration_bounce) or extra bounce (presets)')
    parser.add_argument('--response', type=float, help='Response (response_damping_ratio)')
    parser.add_argument('--damping_ratio', type=float, help='Damping ratio (response_damping_ratio and settling_duration_damping_ratio)')
    parser.add_argument('--m', type=float, help='Mass parameter (m). Overrides config.SPRING_PARAMS["mass_stiffness_damping"]["mass"]')
    parser.add_argument('--c', type=float, help='Damping coefficient (c). Overrides config.SPRING_PARAMS["mass_stiffness_damping"]["damping"]')
    parser.add_argument('--k', type=float, help='Spring constant (k). Overrides config.SPRING_PARAMS["mass_stiffness_damping"]["stiffness"]')
    parser.add_argument('--allow_over_damping', action='store_true', help='Allow overdamped motion instead of clamping to critical')
    parser.add_argument('--settling_duration', type=float, help='Settling duration (settling_duration_damping_ratio)')

    # Arguments for SIMULATION_PARAMS
    parser.add_argument('--target', type=float, help='Target amount of change. Overrides config.SIMULATION_PARAMS["target"]')
    parser.add_argument('--initial_velocity', type=float, help='Initial velocity. Overrides config.SIMULATION_PARAMS["initial_velocity"]')
    parser.add_argument('--num_steps', type=int, help='Number of frames. Overrides config.SIMULATION_PARAMS["num_steps"]')
    parser.add_argument('--time_increment', type=float, help='Frame time in seconds. Overrides config.SIMULATION_PARAMS["time_increment"]')
    parser.add_argument('--file_name', type=str, help='Output file name for results. Setting this turns on saving.')
    parser.add_argument('--no_plots', action='store_true', help='Do not show plots')

    return parser.parse_args(argv)

def apply_overrides(args):
    """Apply command-line overrides to the config dictionaries."""
    spring_params = config.SPRING_PARAMS
    if args.parameterization is not None:
        spring_params['parameterization'] = args.parameterization
    if args.duration is not None:
        spring_params['duration_bounce']['duration'] = args.duration
        spring_params['preset']['duration'] = args.duration
    if args.bounce is not None:
        spring_params['duration_bounce']['bounce'] = args.bounce
        spring_params['preset']['extra_bounce'] = args.bounce
    if args.response is not None:
        spring_params['response_damping_ratio']['response'] = args.response
    if args.damping_ratio is not None:
        spring_params['response_damping_ratio']['damping_ratio'] = args.damping_ratio
        spring_params['settling_duration_damping_ratio']['damping_ratio'] = args.damping_ratio
    if args.m is not None:
        spring_params['mass_stiffness_damping']['mass'] = args.m
    if args.c is not None:
        spring_params['mass_stiffness_damping']['damping'] = args.c
    if args.k is not None:
        spring_params['mass_stiffness_damping']['stiffness'] = args.k
    if args.allow_over_damping:
        spring_params['mass_stiffness_damping']['allow_over_damping'] = True
    if args.settling_duration is not None:
        spring_params['settling_duration_damping_ratio']['settling_duration'] = args.settling_duration

    sim_params = config.SIMULATION_PARAMS
    if args.target is not None:
        sim_params['target'] = args.target
    if args.initial_velocity is not None:
        sim_params['initial_velocity'] = args.initial_velocity
    if args.num_steps is not None:
        sim_params['num_steps'] = args.num_steps
    if args.time_increment is not None:
        sim_params['time_increment'] = args.time_increment
    if args.file_name is not None:
        sim_params['file_name'] = args.file_name
        sim_params['save_results'] = True
    if args.no_plots:
        sim_params['show_plots'] = False

def main(argv=None):
    if config.SIMULATION_PARAMS.get('ask_params'):
        apply_overrides(parse_overrides(argv))

    # 1. Setup Spring
    spring = build_spring(config.SPRING_PARAMS)
    print(f"Spring ({config.SPRING_PARAMS['parameterization']}): {spring}")
    spring_system = SpringSystem(spring, config.SIMULATION_PARAMS['target'],
                                 config.SIMULATION_PARAMS['initial_velocity'])

    # 2. Run the configured spring alongside the standard damping cases
    results = run_damping_sweep(config.SIMULATION_PARAMS, config.SWEEP_CONFIG,
                                extra_systems={'configured': spring_system})

    # 3. Summarize Results
    failures = summarize_results(results, config.SWEEP_CONFIG['tolerance'])

    # 4. Plotting Results
    if config.SIMULATION_PARAMS.get('show_plots'):
        if 'configured' in results:
            plot_time_series(results['configured'])
        plot_errors(results)

    return results, failures

if __name__ == "__main__":
    main()
