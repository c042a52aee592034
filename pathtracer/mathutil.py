"""Numeric constants and random-number helpers shared by the renderer."""

import math
import random

INFINITY = math.inf
PI = 3.1415926535897932385


def degrees_to_radians(degrees):
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double(low=0.0, high=1.0):
    """Return a random real in [low, high)."""
    return low + (high - low) * random.random()


def random_int(low, high):
    """Return a random integer in [low, high]."""
    return int(random_double(low, high + 1))