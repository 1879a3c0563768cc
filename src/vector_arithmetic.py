# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 2026
"""
# vector_arithmetic.py
from abc import ABC, abstractmethod
from numbers import Number

import numpy as np


class VectorArithmetic(ABC):
    """
    Base class for values that can be animated by a spring.

    Subclasses must support + and - between two values of the same type,
    scaling by a float and a squared magnitude. Plain numbers and numpy
    arrays are supported without subclassing.
    """

    @abstractmethod
    def __add__(self, other):
        ...

    @abstractmethod
    def __sub__(self, other):
        ...

    @abstractmethod
    def scaled(self, by):
        """Returns a copy with each component multiplied by `by`."""

    @property
    @abstractmethod
    def magnitude_squared(self):
        """The dot product of the value with itself."""

    @abstractmethod
    def zero(self):
        """The additive identity with the same shape as this value."""


class AnimatablePair(VectorArithmetic):
    """Two independently animatable values treated as one vector."""

    def __init__(self, first, second):
        self.first = first
        self.second = second

    def __add__(self, other):
        return AnimatablePair(self.first + other.first, self.second + other.second)

    def __sub__(self, other):
        return AnimatablePair(self.first - other.first, self.second - other.second)

    def scaled(self, by):
        return AnimatablePair(scaled(self.first, by), scaled(self.second, by))

    @property
    def magnitude_squared(self):
        return magnitude_squared(self.first) + magnitude_squared(self.second)

    def zero(self):
        return AnimatablePair(zero_like(self.first), zero_like(self.second))

    def __eq__(self, other):
        if not isinstance(other, AnimatablePair):
            return NotImplemented
        return bool(np.all(self.first == other.first)) and bool(np.all(self.second == other.second))

    def __repr__(self):
        return f"AnimatablePair({self.first!r}, {self.second!r})"


def _check_vector(value):
    if isinstance(value, (VectorArithmetic, Number, np.ndarray, np.generic)) and not isinstance(value, bool):
        return
    raise TypeError(f"Unsupported vector type: {type(value).__name__}")


def scaled(value, by):
    """Multiplies every component of `value` by the scalar `by`."""
    _check_vector(value)
    if isinstance(value, VectorArithmetic):
        return value.scaled(by)
    with np.errstate(all='ignore'):
        return value * np.float64(by)


def magnitude_squared(value):
    _check_vector(value)
    if isinstance(value, VectorArithmetic):
        return np.float64(value.magnitude_squared)
    with np.errstate(all='ignore'):
        # Sum of squares rather than np.dot so 0-d arrays and scalars share a path
        return np.float64(np.sum(np.square(np.asarray(value, dtype=np.float64))))


def zero_like(value):
    _check_vector(value)
    if isinstance(value, VectorArithmetic):
        return value.zero()
    if isinstance(value, np.ndarray):
        return np.zeros_like(value, dtype=np.float64)
    return np.float64(0.0)


def interpolated(value, other, amount):
    """
    Returns `value` moved towards `other` by `amount`.

    Equivalent to value + (other - value) * amount.
    """
    return value + scaled(other - value, amount)
