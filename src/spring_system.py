# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 2026
"""
# spring_system.py
import numpy as np
from spring import Spring

class SpringSystem:
    """
    A spring released from rest-relative position 0 towards `target`.

    Wraps a Spring with the initial conditions of one run so the motion can be
    integrated numerically and compared against the closed-form solution.
    """
    def __init__(self, spring=None, target=1.0, initial_velocity=0.0):
        self.spring = spring if spring is not None else Spring()
        self.target = target
        self.initial_velocity = initial_velocity

        if self.spring.mass == 0:
            raise ValueError("Mass (m) cannot be zero.")
        if np.isnan(self.spring.stiffness) or np.isnan(self.spring.damping):
            raise ValueError(f"Spring constants are NaN: {self.spring}")
        if self.spring.decay_constant < 0:
            print("Warning: Negative damping, system will oscillate with growing amplitude.")

        # Pre-calculate the equivalent ODE coefficients
        self.m = self.spring.mass
        self.c = self.spring.damping
        self.k = self.spring.stiffness

    @classmethod
    def from_params(cls, m=1.0, c=2.0, k=9.0, target=1.0, initial_velocity=0.0, allow_over_damping=True):
        spring = Spring.from_mass_stiffness_damping(m, k, c, allow_over_damping=allow_over_damping)
        return cls(spring, target, initial_velocity)

    def get_continuous_dynamics(self, state, t):
        """
        Defines the continuous-time dynamics m*x'' + c*x' + k*(x - target) = 0.
        Used by ODE solvers (e.g., scipy.integrate.odeint).
        State is [position, velocity]. Returns [d_position/dt, d_velocity/dt].
        """
        x, v = state

        dxdt = v
        dvdt = self.get_acceleration(x, v, t)

        return [dxdt, dvdt]

    def get_acceleration(self, x, v, t):
        """Calculates instantaneous acceleration based on system parameters."""
        return (-self.c * v - self.k * (x - self.target)) / self.m

    def __repr__(self):
        return (f"SpringSystem(m={self.m:.4f}, c={self.c:.4f}, k={self.k:.4f}, "
                f"target={self.target}, initial_velocity={self.initial_velocity})")
