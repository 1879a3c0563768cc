# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 2026
"""
# spring.py
from dataclasses import dataclass

import numpy as np

import spring_motion
from settling import natural_frequency_for_settling

TAU = 2 * np.pi
DEFAULT_DURATION = 0.5
DEFAULT_EPSILON = 0.001


@dataclass(frozen=True)
class Spring:
    """
    A representation of a spring's motion.

    The spring is stored as three constants:
        angular_frequency: the signed damped angular frequency. Positive for
            underdamped springs, zero when critically damped and negative
            when overdamped.
        decay_constant: the exponential decay rate of the envelope.
        mass: the mass attached to the spring.

    Every other parameterization (stiffness/damping, duration/bounce,
    response/damping ratio) is derived from these. Invalid inputs are not
    rejected, they propagate as NaN or inf through the derived values.

    Spring() with no arguments is the default spring, a critically damped
    spring with a duration of 0.5 seconds.
    """
    angular_frequency: float = 0.0
    decay_constant: float = float(TAU / DEFAULT_DURATION)
    mass: float = 1.0

    # --- Conversion constructors ---

    @classmethod
    @np.errstate(all='ignore')
    def from_duration_bounce(cls, duration=DEFAULT_DURATION, bounce=0.0):
        """
        Creates a spring with the specified duration and bounce.

        Parameters:
            duration (float): Defines the pace of the spring. This is
                approximately equal to the settling duration, but for springs
                with very large bounce values, will be the duration of the
                period of oscillation for the spring.
            bounce (float): How bouncy the spring should be. 0 gives no
                bounces (critically damped), positive values up to 1.0 give
                increasing bounciness (1.0 is undamped oscillation) and
                negative values down to -1.0 give overdamped springs.
        """
        duration = np.float64(duration)
        bounce = np.float64(bounce)

        if not bounce > -1:
            damping_ratio = np.inf
        elif bounce < 0:
            damping_ratio = 1 / (bounce + 1)
        elif bounce == 0:
            damping_ratio = np.float64(1.0)
        elif bounce <= 1:
            damping_ratio = 1 - bounce
        else:
            damping_ratio = np.float64(0.0)

        tau_factor = TAU if damping_ratio <= 1 else -TAU
        angular_frequency = np.sqrt(np.abs(1 - damping_ratio * damping_ratio)) * tau_factor / duration
        decay_constant = damping_ratio * TAU / duration
        return cls(float(angular_frequency), float(decay_constant), 1.0)

    @classmethod
    def with_duration(cls, duration):
        """A critically damped spring with the given perceptual duration."""
        return cls.from_duration_bounce(duration, 0.0)

    @classmethod
    @np.errstate(all='ignore')
    def from_response_damping_ratio(cls, response, damping_ratio):
        """
        Creates a spring with the specified response and damping ratio.

        Parameters:
            response (float): The stiffness of the spring, as an approximate
                duration in seconds.
            damping_ratio (float): The amount of drag applied, as a fraction of
                the amount needed to produce critical damping.
        """
        response = np.float64(response)
        damping_ratio = np.float64(damping_ratio)

        tau_factor = -TAU if damping_ratio > 1 else TAU
        damping_offset = np.abs(1 - damping_ratio * damping_ratio)
        angular_frequency = (tau_factor * np.sqrt(damping_offset)) / response
        decay_constant = (TAU * damping_ratio) / response
        return cls(float(angular_frequency), float(decay_constant), 1.0)

    @classmethod
    @np.errstate(all='ignore')
    def from_mass_stiffness_damping(cls, mass, stiffness, damping, allow_over_damping=False):
        """
        Creates a spring with the specified mass, stiffness and damping.

        Parameters:
            mass (float): The mass of the object attached to the spring.
            stiffness (float): The spring coefficient.
            damping (float): Defines how the motion is damped by friction.
            allow_over_damping (bool): If False, springs that would be
                overdamped are treated as critically damped instead.
        """
        mass = np.float64(mass)
        stiffness = np.float64(stiffness)
        damping = np.float64(damping)

        natural_frequency = np.sqrt(stiffness / mass)
        decay_constant = damping / (2 * mass)
        is_overdamped = decay_constant > natural_frequency

        if is_overdamped and not allow_over_damping:
            # Clamp to critical damping
            return cls(0.0, float(natural_frequency), float(mass))

        oscillation = np.sqrt(np.abs(stiffness / mass - decay_constant * decay_constant))
        angular_frequency = -oscillation if is_overdamped else oscillation
        return cls(float(angular_frequency), float(decay_constant), float(mass))

    @classmethod
    @np.errstate(all='ignore')
    def from_settling_duration_damping_ratio(cls, settling_duration, damping_ratio, epsilon=DEFAULT_EPSILON):
        """
        Creates a spring that settles within `settling_duration` seconds.

        Parameters:
            settling_duration (float): The approximate time it will take for
                the spring to come to rest. Clamped to (0, 10].
            damping_ratio (float): The amount of drag applied as a fraction of
                the amount needed to produce critical damping. Clamped to (0, 1].
            epsilon (float): The threshold for how small all subsequent values
                need to be before the spring is considered to have settled.
        """
        smallest = np.finfo(np.float64).eps
        duration = np.clip(np.float64(settling_duration), smallest, 10.0)
        damping_ratio = np.clip(np.float64(damping_ratio), smallest, 1.0)

        natural_frequency = natural_frequency_for_settling(duration, damping_ratio, epsilon)
        decay_constant = natural_frequency * damping_ratio
        angular_frequency = np.sqrt(np.abs(natural_frequency * natural_frequency
                                           - decay_constant * decay_constant))
        return cls(float(angular_frequency), float(decay_constant), 1.0)

    # --- Presets ---

    @classmethod
    def smooth(cls, duration=DEFAULT_DURATION, extra_bounce=0.0):
        """
        A smooth spring with no bounce.

        `extra_bounce` is added to the base bounce of 0.
        """
        return cls.from_duration_bounce(duration, extra_bounce)

    @classmethod
    def snappy(cls, duration=DEFAULT_DURATION, extra_bounce=0.0):
        """
        A spring with a small amount of bounce that feels more snappy.

        `extra_bounce` is added to the base bounce of 0.15.
        """
        return cls.from_duration_bounce(duration, 0.15 + extra_bounce)

    @classmethod
    def bouncy(cls, duration=DEFAULT_DURATION, extra_bounce=0.0):
        """
        A spring with a higher amount of bounce.

        `extra_bounce` is added to the base bounce of 0.3.
        """
        return cls.from_duration_bounce(duration, 0.3 + extra_bounce)

    # --- Derived properties ---

    def _constants(self):
        return np.float64(self.angular_frequency), np.float64(self.decay_constant), np.float64(self.mass)

    @property
    @np.errstate(all='ignore')
    def stiffness(self):
        """
        The spring stiffness coefficient.

        Increasing the stiffness reduces the number of oscillations and the
        settling duration.
        """
        omega, decay, mass = self._constants()
        # omega*|omega| keeps overdamped springs (negative omega) consistent
        return mass * (decay * decay + omega * np.abs(omega))

    @property
    @np.errstate(all='ignore')
    def damping(self):
        """Defines how the spring's motion is damped by friction."""
        _, decay, mass = self._constants()
        return decay * 2 * mass

    @property
    @np.errstate(all='ignore')
    def duration(self):
        """The perceptual duration, which defines the pace of the spring."""
        omega, decay, _ = self._constants()
        return TAU / np.sqrt(decay * decay + omega * np.abs(omega))

    @property
    @np.errstate(all='ignore')
    def bounce(self):
        """
        How bouncy the spring is.

        0 is critically damped, up to 1.0 for undamped oscillation and down
        to -1.0 for overdamped springs.
        """
        omega, decay, _ = self._constants()
        half_decay = decay / 2
        decay_squared = decay * decay
        frequency_squared = omega * omega

        if omega >= 0:
            oscillation_period = -TAU / np.sqrt(frequency_squared + decay_squared)
            return (oscillation_period * half_decay) / np.pi + 1
        decay_period = TAU / np.sqrt(decay_squared - frequency_squared)
        return 1 / ((decay_period * half_decay) / np.pi) - 1

    @property
    @np.errstate(all='ignore')
    def response(self):
        """The stiffness of the spring, as an approximate duration in seconds."""
        omega, decay, _ = self._constants()
        return TAU / np.sqrt(decay * decay + omega * np.abs(omega))

    @property
    @np.errstate(all='ignore')
    def damping_ratio(self):
        """
        The amount of drag applied, as a fraction of the amount needed to
        produce critical damping. 1 is critically damped; lower values
        oscillate more and more before coming to a stop.
        """
        _, decay, _ = self._constants()
        return decay * self.response / TAU

    @property
    def settling_duration(self):
        """
        Estimated time for the spring to be considered at rest, for a target
        of 1.0, no initial velocity and an epsilon of 0.001.
        """
        return spring_motion.settling_duration(self, 1.0, 0.0, DEFAULT_EPSILON)

    def settling_duration_with_velocity(self, target, initial_velocity=None, epsilon=DEFAULT_EPSILON):
        return spring_motion.settling_duration(self, target, initial_velocity, epsilon)

    # --- Motion ---

    def value(self, target, initial_velocity=None, time=0.0):
        return spring_motion.value(self, target, initial_velocity, time)

    position = value

    def velocity(self, target, initial_velocity=None, time=0.0):
        return spring_motion.velocity(self, target, initial_velocity, time)

    def force(self, target, position, velocity):
        return spring_motion.force(self, target, position, velocity)

    def update(self, value, velocity, target, delta_time):
        """Advances `value` and `velocity` by `delta_time`. See spring_motion.update."""
        return spring_motion.update(self, value, velocity, target, delta_time)

    step = update
