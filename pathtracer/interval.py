"""Closed real intervals."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """A real interval [min, max]; the default interval is empty."""

    min: float = math.inf
    max: float = -math.inf

    def size(self):
        return self.max - self.min

    def contains(self, x):
        return self.min <= x <= self.max

    def surrounds(self, x):
        return self.min < x < self.max

    def clamp(self, x):
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta):
        """Return the interval widened by ``delta`` in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    @staticmethod
    def enclosing(a, b):
        """Return the tightest interval enclosing both ``a`` and ``b``."""
        return Interval(a.min if a.min <= b.min else b.min, a.max if a.max >= b.max else b.max)

    @staticmethod
    def empty():
        return Interval(math.inf, -math.inf)

    @staticmethod
    def universe():
        return Interval(-math.inf, math.inf)

    def __add__(self, displacement):
        if not isinstance(displacement, (int, float)):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    __radd__ = __add__