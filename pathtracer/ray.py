"""Rays with an origin, a direction and a time."""

from dataclasses import dataclass

from .vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    origin: Vec3
    direction: Vec3
    time: float = 0.0

    def at(self, t):
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + t * self.direction