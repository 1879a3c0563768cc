# -*- coding: utf-8 -*-
"""
Created on Wed Jun 18 09:30:01 2025

@author: Cormac Molyneaux
"""
# data_generator.py
import numpy as np
from scipy.integrate import odeint
from spring_system import SpringSystem
import spring_motion

def get_time_points(num_steps: int, time_increment: float):
    # Evenly spaced by exactly time_increment so stepped runs line up
    return np.arange(num_steps) * time_increment

def generate_pristine_data(spring_system: SpringSystem, num_steps: int, time_increment: float):
    """
    Integrates m*x'' + c*x' + k*(x - target) = 0 numerically with odeint.
    This is the independent reference the closed-form solutions are checked against.
    """
    time_points = get_time_points(num_steps, time_increment)
    initial_state = [0.0, spring_system.initial_velocity]
    
    # Integrate the system dynamics
    sol = odeint(spring_system.get_continuous_dynamics, initial_state, time_points,
                 rtol=1e-10, atol=1e-12)
    
    x_pristine = sol[:, 0]
    v_pristine = sol[:, 1]
    
    # Calculate pristine acceleration from the model
    a_pristine = np.array([spring_system.get_acceleration(x_p, v_p, t_p) 
                           for x_p, v_p, t_p in zip(x_pristine, v_pristine, time_points)])
    f_pristine = spring_system.m * a_pristine
    
    return x_pristine, v_pristine, a_pristine, f_pristine, time_points

def generate_closed_form_data(spring_system: SpringSystem, num_steps: int, time_increment: float):
    """Evaluates the analytic position, velocity and force at every time point."""
    spring = spring_system.spring
    target, initial_velocity = spring_system.target, spring_system.initial_velocity
    time_points = get_time_points(num_steps, time_increment)

    x_closed = np.array([spring_motion.value(spring, target, initial_velocity, t) for t in time_points])
    v_closed = np.array([spring_motion.velocity(spring, target, initial_velocity, t) for t in time_points])
    f_closed = np.array([spring_motion.force(spring, target, x_c, v_c)
                         for x_c, v_c in zip(x_closed, v_closed)])
    a_closed = f_closed / spring.mass

    return x_closed, v_closed, a_closed, f_closed, time_points

def generate_stepped_data(spring_system: SpringSystem, num_steps: int, time_increment: float):
    """
    Advances the spring frame by frame with update(), the way an animation
    loop drives it, recording the state after every frame.
    """
    spring = spring_system.spring
    time_points = get_time_points(num_steps, time_increment)

    x_stepped = np.zeros(num_steps)
    v_stepped = np.zeros(num_steps)
    value, velocity = 0.0, spring_system.initial_velocity
    x_stepped[0], v_stepped[0] = value, velocity

    for i in range(1, num_steps):
        value, velocity = spring_motion.update(spring, value, velocity, spring_system.target, time_increment)
        x_stepped[i] = value
        v_stepped[i] = velocity

    f_stepped = np.array([spring_motion.force(spring, spring_system.target, x_s, v_s)
                          for x_s, v_s in zip(x_stepped, v_stepped)])
    a_stepped = f_stepped / spring.mass

    return x_stepped, v_stepped, a_stepped, f_stepped, time_points
