"""Probability density functions over directions."""

from abc import ABC, abstractmethod

from .mathutil import PI, random_double
from .vec3 import random_unit_vector


class Pdf(ABC):
    """A density over directions that can also draw samples."""

    @abstractmethod
    def value(self, direction):
        """Return the density for ``direction``."""

    @abstractmethod
    def generate(self):
        """Return a random direction drawn from the density."""


class SpherePdf(Pdf):
    """The uniform density over all directions."""

    def value(self, direction):
        return 1 / (4 * PI)

    def generate(self):
        return random_unit_vector()


class HittablePdf(Pdf):
    """The density of directions from ``origin`` towards a hittable."""

    def __init__(self, objects, origin):
        self.objects = objects
        self.origin = origin

    def value(self, direction):
        return self.objects.pdf_value(self.origin, direction)

    def generate(self):
        return self.objects.random(self.origin)


class MixturePdf(Pdf):
    """An equal-weight mixture of two densities."""

    def __init__(self, p0, p1):
        self.p = (p0, p1)

    def value(self, direction):
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self):
        if random_double() < 0.5:
            return self.p[0].generate()
        return self.p[1].generate()