"""Color helpers: gamma correction and PPM pixel output."""

import math

from .interval import Interval
from .vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component):
    """Apply a gamma-2 transform; non-positive input maps to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0


def color_to_bytes(pixel_color):
    """Convert a linear color to a tuple of three byte values in [0, 255]."""
    result = []
    for component in pixel_color:
        if math.isnan(component):
            component = 0.0
        result.append(int(256 * _INTENSITY.clamp(linear_to_gamma(component))))
    return tuple(result)


def write_color(out, pixel_color):
    """Write one pixel as a plain PPM ``r g b`` line to the text stream ``out``."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")