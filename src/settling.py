# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 2026
"""
# settling.py
# Closed-form solves for when a decaying envelope drops below a threshold.
import numpy as np
from scipy.special import lambertw

# Largest exponent we evaluate before switching to the asymptotic series
MAX_EXPONENT = 700.0


def lower_branch_lambertw(z):
    """
    Real part of the k=-1 branch of the Lambert W function.

    Only real for z in [-1/e, 0); NaN is returned outside that range.
    """
    if abs(z + 1 / np.e) <= 4 * np.finfo(np.float64).eps:
        # Branch point, where scipy can return nan
        return np.float64(-1.0)
    w = lambertw(z, k=-1)
    if np.isnan(w.real) or abs(w.imag) > 1e-6:
        return np.nan
    return np.float64(w.real)


def solve_log_linear(c):
    """Largest y with y - ln(y) = c, for c >= 1."""
    if c < MAX_EXPONENT:
        return -lower_branch_lambertw(-np.exp(-c))
    # e^-c underflows, use the asymptotic expansion instead
    L = np.log(c)
    return c + L + L / c + (L * L / 2 - L) / (c * c)


@np.errstate(all='ignore')
def linear_envelope_crossing(a, b, rate, epsilon):
    """
    Smallest t >= 0 after which (a + b*t) * exp(-rate*t) stays below epsilon.

    Parameters:
        a (float): Magnitude of the constant term (>= 0).
        b (float): Magnitude of the linear term (>= 0).
        rate (float): Exponential decay rate.
        epsilon (float): Threshold.
    """
    if np.isnan(rate):
        return np.nan
    if rate <= 0:
        # No decay, the envelope never settles
        return np.inf
    if b == 0:
        return np.maximum(0.0, np.log(a / epsilon) / rate)

    # Substituting y = rate*(t + a/b) gives y*exp(-y) = exp(-c)
    c = rate * a / b + np.log(b / (epsilon * rate))
    if np.isnan(c):
        return np.nan
    if c <= 1:
        # y*exp(-y) never exceeds exp(-c), so the envelope is never above epsilon
        return np.float64(0.0)
    y = solve_log_linear(c)
    return np.maximum(0.0, y / rate - a / b)


@np.errstate(all='ignore')
def natural_frequency_for_settling(settling_duration, damping_ratio, epsilon):
    """
    Finds the natural angular frequency whose envelope has decayed to
    `epsilon` after `settling_duration`.

    For damping ratios below 1 the envelope is
        zeta / sqrt(1 - zeta^2) * exp(-zeta * omega * T)
    and for critical damping it is
        (1 + omega * T) * exp(-omega * T).
    NaN is returned when no positive frequency satisfies the threshold.
    """
    zeta = np.float64(damping_ratio)
    duration = np.float64(settling_duration)
    if zeta < 1:
        zeta_squared = zeta * zeta
        amplitude = zeta / np.sqrt(1 - zeta_squared)
        root = np.log(amplitude / epsilon) / (zeta * duration)
    else:
        root = (-1 - lower_branch_lambertw(-epsilon / np.e)) / duration
    if not root > 0:
        return np.nan
    return root
