# -*- coding: utf-8 -*-
"""
Created on Wed Jun 18 09:34:18 2025

@author: Cormac Molyneaux
"""
# config.py
# Centralized configuration for the spring validation runs

# Which parameterization builds the spring, and the inputs for each one.
# 'duration_bounce', 'response_damping_ratio', 'mass_stiffness_damping',
# 'settling_duration_damping_ratio', or a preset: 'smooth', 'snappy', 'bouncy'
SPRING_PARAMS = {
    'parameterization': 'duration_bounce',
    'duration_bounce': {
        'duration': 0.5,
        'bounce': 0.15,
    },
    'response_damping_ratio': {
        'response': 0.4,
        'damping_ratio': 0.8,
    },
    'mass_stiffness_damping': {
        'mass': 1.0,
        'stiffness': 100.0,
        'damping': 10.0,
        'allow_over_damping': False, # False clamps overdamped springs to critical
    },
    'settling_duration_damping_ratio': {
        'settling_duration': 1.0,
        'damping_ratio': 0.7,
        'epsilon': 0.001,
    },
    # Used by the presets
    'preset': {
        'duration': 0.5,
        'extra_bounce': 0.0,
    },
}

SIMULATION_PARAMS = {
    'target': 1.0,
    'initial_velocity': 0.0,
    'num_steps': 120,
    'time_increment': 1 / 60, # One animation frame at 60 Hz
    'save_results': False, #True or False
    'file_name': 'spring_results.pkl', #Only matters if save_results is True
    'show_plots': True,
    'ask_params': True #True or False, set to False to ignore command-line arguments
}

SWEEP_CONFIG = {
    'cases': ['ud', 'cd', 'od'], # Damping cases from analysis.DAMPING_CASES
    'parallel': False, # Run cases on a multiprocessing Pool
    'tolerance': 1e-6, # Max error (relative to the motion's scale) before a case is flagged
}
