"""Textures: solid colors, 3D checkers, images and Perlin noise."""

import math
from abc import ABC, abstractmethod

from .color import Color
from .image import RtwImage
from .interval import Interval
from .perlin import Perlin

_UNIT_INTERVAL = Interval(0, 1)
_CYAN = Color(0, 1, 1)


class Texture(ABC):
    """A color that varies over surface coordinates and position."""

    @abstractmethod
    def value(self, u, v, p):
        """Return the color at texture coordinates (u, v) and point ``p``."""


class SolidColor(Texture):
    """A single constant color."""

    def __init__(self, albedo):
        self.albedo = albedo

    @classmethod
    def from_rgb(cls, red, green, blue):
        return cls(Color(red, green, blue))

    def value(self, u, v, p):
        return self.albedo


def _as_texture(tex):
    return tex if isinstance(tex, Texture) else SolidColor(tex)


class CheckerTexture(Texture):
    """A solid 3D checker pattern of two textures; colors are wrapped as solid textures."""

    def __init__(self, scale, even, odd):
        self.inv_scale = 1.0 / scale
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u, v, p):
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        if (x + y + z) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


class ImageTexture(Texture):
    """A texture looked up from an image file; solid cyan if the image is missing."""

    def __init__(self, filename):
        self.image = RtwImage(filename)

    def value(self, u, v, p):
        if self.image.height <= 0:
            return _CYAN

        u = _UNIT_INTERVAL.clamp(u)
        v = 1.0 - _UNIT_INTERVAL.clamp(v)  # flip v to image coordinates

        i = int(u * self.image.width)
        j = int(v * self.image.height)
        r, g, b = self.image.pixel_data(i, j)

        scale = 1.0 / 255.0
        return Color(scale * r, scale * g, scale * b)


class NoiseTexture(Texture):
    """A marble-like texture driven by Perlin turbulence."""

    def __init__(self, scale):
        self.noise = Perlin()
        self.scale = scale

    def value(self, u, v, p):
        return Color(0.5, 0.5, 0.5) * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7)))