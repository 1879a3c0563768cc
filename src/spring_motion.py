# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 2026
"""
# spring_motion.py
# Closed-form motion of a spring towards a target.
#
# All functions work in the frame where the value starts at zero and moves
# towards `target`, i.e. `target` is the amount of change still to happen.
# Values may be plain numbers, numpy arrays or VectorArithmetic instances.
import numpy as np
from vector_arithmetic import scaled, magnitude_squared, zero_like
from settling import linear_envelope_crossing


def _constants(spring):
    return (np.float64(spring.angular_frequency),
            np.float64(spring.decay_constant),
            np.float64(spring.mass))


def _magnitude(vector):
    return np.sqrt(magnitude_squared(vector))


def _is_float_array(vector):
    return isinstance(vector, np.ndarray) and np.issubdtype(vector.dtype, np.floating)


@np.errstate(all='ignore')
def value(spring, target, initial_velocity=None, time: float = 0.0):
    """Calculates the value of the spring at `time` given a target amount of change."""
    if initial_velocity is None:
        initial_velocity = zero_like(target)
    omega, decay, _ = _constants(spring)
    t = np.float64(time)

    if omega > 0:
        # Underdamped: decaying oscillation
        angle = omega * t
        displacement = scaled(scaled(target, decay) - initial_velocity, np.sin(angle) / omega) \
            + scaled(target, np.cos(angle))
        return target - scaled(displacement, np.exp(-decay * t))
    elif omega < 0:
        # Overdamped: two real exponentials
        slow_exponent = -omega - decay
        exp_slow = np.exp(slow_exponent * t)
        exp_fast = np.exp((omega - decay) * t)
        damping_factor = (decay - omega) * exp_slow + slow_exponent * exp_fast
        scale_factor = damping_factor / (omega * 2) + 1
        velocity_factor = (exp_slow - exp_fast) / (omega * 2)
        return scaled(target, scale_factor) - scaled(initial_velocity, velocity_factor)
    else:
        # Critically damped
        displacement = target + scaled(scaled(target, decay) - initial_velocity, t)
        return target - scaled(displacement, np.exp(-decay * t))


position = value


@np.errstate(all='ignore')
def velocity(spring, target, initial_velocity=None, time: float = 0.0):
    """Calculates the velocity of the spring at `time` given a target amount of change."""
    if initial_velocity is None:
        initial_velocity = zero_like(target)
    omega, decay, _ = _constants(spring)
    t = np.float64(time)

    if omega > 0:
        envelope = np.exp(-decay * t)
        angle = omega * t
        sin_val = np.sin(angle)
        cos_val = np.cos(angle)
        target_term = scaled(target, (omega * sin_val + decay * cos_val) * envelope)
        displacement_factor = (decay * sin_val - omega * cos_val) * envelope / omega
        return scaled(scaled(target, decay) - initial_velocity, displacement_factor) + target_term
    elif omega < 0:
        slow_exponent = -omega - decay
        fast_exponent = omega - decay
        slow_term = slow_exponent * np.exp(slow_exponent * t)
        fast_term = fast_exponent * np.exp(fast_exponent * t)
        scale_factor = ((decay - omega) * slow_term + slow_exponent * fast_term) / (omega * 2)
        velocity_factor = (slow_term - fast_term) / (omega * 2)
        return scaled(target, scale_factor) - scaled(initial_velocity, velocity_factor)
    else:
        envelope = np.exp(-decay * t)
        time_factor = (decay * t - 1) * envelope
        velocity_delta = scaled(target, decay) - initial_velocity
        return scaled(velocity_delta, time_factor) + scaled(target, decay * envelope)


@np.errstate(all='ignore')
def force(spring, target, position, velocity):
    """
    Calculates the force upon the spring given a current position, target
    and velocity. Units are the vector type per second squared, times mass.
    """
    omega, decay, mass = _constants(spring)
    damping_force = scaled(velocity, (-decay * 2) * mass)
    spring_force = scaled(target - position, (decay * decay + omega * np.abs(omega)) * mass)
    return spring_force + damping_force


@np.errstate(all='ignore')
def update(spring, current_value, current_velocity, target, delta_time: float):
    """
    Advances a value and velocity towards `target` by `delta_time`.

    Parameters:
        spring (Spring): The spring driving the motion.
        current_value: The current value of the spring.
        current_velocity: The current velocity of the spring.
        target: The value that `current_value` is moving towards.
        delta_time (float): Time elapsed since the spring was at `current_value`.

    Returns:
        tuple: (new_value, new_velocity). Floating point numpy arrays passed
               in are also overwritten in place. Integer arrays are left
               untouched and new float arrays are returned.
    """
    delta = target - current_value
    new_velocity = velocity(spring, delta, current_velocity, delta_time)
    new_value = current_value + value(spring, delta, current_velocity, delta_time)

    if _is_float_array(current_value) and _is_float_array(current_velocity):
        current_value[...] = new_value
        current_velocity[...] = new_velocity
        return current_value, current_velocity
    return new_value, new_velocity


step = update


@np.errstate(all='ignore')
def settling_duration(spring, target=1.0, initial_velocity=None, epsilon=0.001):
    """
    Estimated time for the spring to come to rest.

    Returns the time after which both the distance to `target` and the
    velocity stay below `epsilon`, using the exponential envelope of the
    relevant damping regime. Springs with no decay never settle and return
    infinity, and NaN constants or inputs give NaN.
    """
    if initial_velocity is None:
        initial_velocity = zero_like(target)
    omega, decay, _ = _constants(spring)

    if np.isnan(omega) or np.isnan(decay):
        return np.nan
    if decay <= 0:
        return np.inf

    target_magnitude = _magnitude(target)
    velocity_magnitude = _magnitude(initial_velocity)
    velocity_delta = scaled(target, decay) - initial_velocity

    if omega > 0:
        # Distance is e^(-decay*t) * (A*sin + B*cos), bounded by e^(-decay*t) * sqrt(|A|^2 + |B|^2)
        distance_amplitude = np.sqrt(magnitude_squared(velocity_delta) / (omega * omega)
                                     + target_magnitude * target_magnitude)
        natural_squared = decay * decay + omega * omega
        velocity_sine = scaled(target, natural_squared / omega) - scaled(initial_velocity, decay / omega)
        velocity_amplitude = np.sqrt(magnitude_squared(velocity_sine) + velocity_magnitude * velocity_magnitude)
        if np.isnan(distance_amplitude) or np.isnan(velocity_amplitude):
            return np.nan
        amplitude = max(distance_amplitude, velocity_amplitude)
        return np.maximum(0.0, np.log(amplitude / epsilon) / decay)
    elif omega < 0:
        # The slower exponential bounds both terms
        slow_rate = omega + decay
        if np.isnan(slow_rate):
            return np.nan
        if slow_rate <= 0:
            return np.inf
        fast_rate = decay - omega
        slow_coefficient = _magnitude(scaled(target, decay - omega) - initial_velocity)
        fast_coefficient = _magnitude(scaled(target, -omega - decay) + initial_velocity)
        distance_amplitude = (slow_coefficient + fast_coefficient) / np.abs(omega * 2)
        velocity_amplitude = (slow_rate * slow_coefficient + fast_rate * fast_coefficient) / np.abs(omega * 2)
        if np.isnan(distance_amplitude) or np.isnan(velocity_amplitude):
            return np.nan
        amplitude = max(distance_amplitude, velocity_amplitude)
        return np.maximum(0.0, np.log(amplitude / epsilon) / slow_rate)
    else:
        # Distance is (a + b*t)e^(-decay*t), velocity is (v0 + decay*b*t)e^(-decay*t)
        linear_magnitude = _magnitude(velocity_delta)
        distance_time = linear_envelope_crossing(target_magnitude, linear_magnitude, decay, epsilon)
        velocity_time = linear_envelope_crossing(velocity_magnitude, decay * linear_magnitude, decay, epsilon)
        if np.isnan(distance_time) or np.isnan(velocity_time):
            return np.nan
        return max(distance_time, velocity_time)
