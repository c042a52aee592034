"""Axis-aligned bounding boxes."""

import math

from .interval import Interval
from .vec3 import Vec3

_MIN_SIDE = 0.0001


def _reciprocal(t):
    if t == 0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def _padded(interval):
    if interval.size() < _MIN_SIDE:
        return interval.expand(_MIN_SIDE)
    return interval


class Aabb:
    """An axis-aligned box; no side is narrower than a small minimum."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x=None, y=None, z=None):
        self.x = _padded(x if x is not None else Interval())
        self.y = _padded(y if y is not None else Interval())
        self.z = _padded(z if z is not None else Interval())

    def __repr__(self):
        return f"Aabb({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other):
        if not isinstance(other, Aabb):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    @classmethod
    def from_points(cls, a, b):
        """Return the box with opposite corners ``a`` and ``b``, in any order."""
        return cls(*(Interval(min(p, q), max(p, q)) for p, q in zip(a, b)))

    @classmethod
    def surrounding(cls, box0, box1):
        """Return the smallest box enclosing both boxes."""
        return cls(
            Interval.enclosing(box0.x, box1.x),
            Interval.enclosing(box0.y, box1.y),
            Interval.enclosing(box0.z, box1.z),
        )

    def axis_interval(self, n):
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, r, ray_t):
        """Return True if the ray passes through the box within ``ray_t``."""
        t_min, t_max = ray_t.min, ray_t.max
        for ax, orig, direction in zip((self.x, self.y, self.z), r.origin, r.direction):
            adinv = _reciprocal(direction)
            t0 = (ax.min - orig) * adinv
            t1 = (ax.max - orig) * adinv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True

    def longest_axis(self):
        """Return the index of the longest axis."""
        x, y, z = self.x.size(), self.y.size(), self.z.size()
        if x > y:
            return 0 if x > z else 2
        return 1 if y > z else 2

    @classmethod
    def empty(cls):
        return cls(Interval.empty(), Interval.empty(), Interval.empty())

    @classmethod
    def universe(cls):
        return cls(Interval.universe(), Interval.universe(), Interval.universe())

    def __add__(self, offset):
        if not isinstance(offset, Vec3):
            return NotImplemented
        return Aabb(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    __radd__ = __add__